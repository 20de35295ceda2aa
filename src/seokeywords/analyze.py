from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import requests

from .cache import LRUCache
from .config import DEFAULT_USER_AGENT, AnalyzerConfig
from .errors import FetchError
from .extract import HtmlExtractor
from .ngrams import FrequencyEntry, NGramEngine
from .normalize import TextNormalizer
from .placeholders import PlaceholderProvider, StaticPlaceholders, TrendSeries
from .utils import preview, validate_url

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], str]
FrozenTrends = Mapping[str, Tuple[Mapping[str, object], ...]]


@dataclass(frozen=True)
class AnalysisResult:
    url: str
    text: str
    unigrams: Tuple[FrequencyEntry, ...]
    bigrams: Tuple[FrequencyEntry, ...]
    trigrams: Tuple[FrequencyEntry, ...]
    token_count: int = 0
    competitor_keywords: Tuple[str, ...] = ()
    google_trends: FrozenTrends = field(default_factory=lambda: MappingProxyType({}))
    ai_suggestions: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        # "tfidf_terms" is plain term frequency; the name is kept for API clients.
        return {
            "text": self.text,
            "tfidf_terms": [{"term": e.key, "score": e.count} for e in self.unigrams],
            "bigrams": [e.key for e in self.bigrams],
            "trigrams": [e.key for e in self.trigrams],
            "competitor_keywords": list(self.competitor_keywords),
            "google_trends": {k: [dict(p) for p in v] for k, v in self.google_trends.items()},
            "ai_suggestions": list(self.ai_suggestions),
        }


def _freeze_trends(trends: TrendSeries) -> FrozenTrends:
    # Cached results are shared between requests, so nothing in them may be mutable.
    return MappingProxyType({k: tuple(MappingProxyType(dict(p)) for p in v) for k, v in trends.items()})


def fetch_html(
    url: str,
    timeout: float = 15.0,
    user_agent: str = DEFAULT_USER_AGENT,
    accept: Optional[str] = None,
) -> str:
    headers = {"User-Agent": user_agent}
    if accept:
        headers["Accept"] = accept
    try:
        resp = requests.get(url, timeout=timeout, headers=headers)
    except requests.Timeout as exc:
        raise FetchError(f"Timed out fetching {url}", url=url) from exc
    except requests.RequestException as exc:
        raise FetchError(f"Could not fetch {url}: {exc}", url=url) from exc
    if not 200 <= resp.status_code < 300:
        raise FetchError(f"{url} returned HTTP {resp.status_code}", url=url, status_code=resp.status_code)
    return resp.text


class Analyzer:
    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        fetcher: Optional[Fetcher] = None,
        placeholders: Optional[PlaceholderProvider] = None,
        cache: Optional[LRUCache[AnalysisResult]] = None,
    ) -> None:
        self.config = config or AnalyzerConfig()
        self.fetcher = fetcher or self._default_fetch
        self.placeholders = placeholders or StaticPlaceholders()
        if cache is None and self.config.cache_size > 0:
            cache = LRUCache(self.config.cache_size)
        self.cache = cache
        self.extractor = HtmlExtractor(strip_chrome=self.config.strip_chrome)
        self.normalizer = TextNormalizer(
            stopwords=self.config.stopwords,
            noise_phrases=self.config.noise_phrases,
            min_len=self.config.min_token_len,
        )
        self.engine = NGramEngine(
            noise_phrases=self.config.noise_phrases,
            unigram_limit=self.config.unigram_limit,
            ngram_limit=self.config.ngram_limit,
        )

    def _default_fetch(self, url: str) -> str:
        return fetch_html(
            url,
            timeout=self.config.timeout,
            user_agent=self.config.user_agent,
            accept=self.config.accept,
        )

    def analyze_html(self, url: str, html: str) -> AnalysisResult:
        """Run extraction, normalization and n-gram ranking on HTML already in hand."""
        raw_text = self.extractor.extract(html, base_url=url)
        cleaned = self.normalizer.clean_text(raw_text)
        tokens = self.normalizer.tokenize(cleaned)

        unigrams = self.engine.unigrams(tokens)
        terms = [e.key for e in unigrams]
        return AnalysisResult(
            url=url,
            text=preview(cleaned, self.config.preview_chars),
            unigrams=tuple(unigrams),
            bigrams=tuple(self.engine.bigrams(tokens)),
            trigrams=tuple(self.engine.trigrams(tokens)),
            token_count=len(tokens),
            competitor_keywords=tuple(self.placeholders.competitor_keywords(url, terms)),
            google_trends=_freeze_trends(self.placeholders.google_trends(url, terms)),
            ai_suggestions=tuple(self.placeholders.ai_suggestions(url, terms)),
        )

    def analyze(self, url: Any) -> AnalysisResult:
        url = validate_url(url)

        if self.cache is not None:
            cached = self.cache.get(url)
            if cached is not None:
                logger.debug("cache hit for %s", url)
                return cached

        logger.info("Fetching URL: %s", url)
        try:
            html = self.fetcher(url)
        except FetchError as exc:
            logger.warning("Fetch failed for %s: %s", url, exc)
            raise

        result = self.analyze_html(url, html)
        logger.info(
            "Analyzed %s: %d tokens, %d terms, %d bigrams, %d trigrams",
            url,
            result.token_count,
            len(result.unigrams),
            len(result.bigrams),
            len(result.trigrams),
        )
        if self.cache is not None:
            self.cache.put(url, result)
        return result


def analyze_url(url: Any, config: Optional[AnalyzerConfig] = None) -> AnalysisResult:
    return Analyzer(config).analyze(url)
