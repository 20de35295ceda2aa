from __future__ import annotations

import math
import os
from dataclasses import dataclass, replace
from typing import FrozenSet, Mapping, Optional, Tuple

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36 seo-keywords/0.1"
)

# English filler plus marketing junk that shows up in scraped SaaS pages.
STOPWORDS: FrozenSet[str] = frozenset(
    {
        "the",
        "and",
        "for",
        "you",
        "your",
        "with",
        "that",
        "from",
        "this",
        "are",
        "was",
        "have",
        "will",
        "been",
        "would",
        "could",
        "should",
        "they",
        "their",
        "there",
        "some",
        "very",
        "just",
        "like",
        "such",
        "than",
        "into",
        "over",
        "also",
        "those",
        "these",
        "here",
        "what",
        "when",
        "where",
        "which",
        "while",
        "about",
        "more",
        "much",
        "many",
        "any",
        "has",
        "had",
        "were",
        "did",
        "does",
        "done",
        "our",
        "can",
        "not",
        "all",
        "too",
        "who",
        "its",
        "it's",
        "only",
        "because",
        "let's",
        "out",
        "via",
        "etc",
        "use",
        "then",
        "once",
        "after",
        "before",
        "being",
        "every",
        "http",
        "else",
        "still",
        "either",
        "them",
        "him",
        "her",
        "couldnt",
        "shouldnt",
        "com",
        "www",
        "https",
        "paid",
        "dont",
        "try",
        "miss",
        "products",
        "free",
        "account",
        "advertising",
        "marketing",
        "model",
        "cpc",
        "cost",
        "click",
        "featurespricingapp",
        "centerenterprisesemrushblogcreate",
        "accountdont",
        "freecreate",
        "accountmarketing",
        "advertisingbenefits",
        "semrush",
    }
)

# Scraping artifacts: navigation text glued together without separators.
NOISE_PHRASES: Tuple[str, ...] = (
    "featurespricingapp",
    "centerenterprisesemrushblogcreate",
    "accountdont",
    "freecreate",
    "accountmarketing",
    "advertisingbenefits",
    "modelsemrush",
)

ENV_PREFIX = "SEOKW_"
TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AnalyzerConfig:
    stopwords: FrozenSet[str] = STOPWORDS
    noise_phrases: Tuple[str, ...] = NOISE_PHRASES
    min_token_len: int = 3
    unigram_limit: int = 20
    ngram_limit: int = 10
    preview_chars: int = 200
    timeout: float = 15.0
    user_agent: str = DEFAULT_USER_AGENT
    cache_size: int = 128
    strip_chrome: bool = False
    accept: str = "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8"

    def with_stopwords(self, *words: str) -> "AnalyzerConfig":
        extra = {w.strip().lower() for w in words if w and w.strip()}
        return replace(self, stopwords=frozenset(self.stopwords | extra))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AnalyzerConfig":
        env = os.environ if environ is None else environ
        cfg = cls()
        timeout = _float(env.get(f"{ENV_PREFIX}TIMEOUT"), cfg.timeout)
        cache_size = _int(env.get(f"{ENV_PREFIX}CACHE_SIZE"), cfg.cache_size)
        user_agent = (env.get(f"{ENV_PREFIX}USER_AGENT") or "").strip() or cfg.user_agent
        strip_chrome = (env.get(f"{ENV_PREFIX}STRIP_CHROME") or "").strip().lower() in TRUTHY
        cfg = replace(
            cfg,
            timeout=timeout if math.isfinite(timeout) and timeout > 0 else cfg.timeout,
            cache_size=max(0, cache_size),
            user_agent=user_agent,
            strip_chrome=strip_chrome,
        )
        extra = env.get(f"{ENV_PREFIX}EXTRA_STOPWORDS") or ""
        if extra.strip():
            cfg = cfg.with_stopwords(*extra.split(","))
        return cfg


def _int(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    try:
        return int(value.strip())
    except (TypeError, ValueError):
        return default


def _float(value: Optional[str], default: float) -> float:
    if value is None:
        return default
    try:
        return float(value.strip())
    except (TypeError, ValueError):
        return default
