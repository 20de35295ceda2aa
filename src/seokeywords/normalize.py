from __future__ import annotations

import re
from typing import AbstractSet, Iterable, List, Optional, Sequence, Tuple

from .config import NOISE_PHRASES, STOPWORDS
from .utils import collapse_whitespace

# Runs of anything that is not a Unicode letter or digit. ``\W`` keeps the
# underscore, so it is excluded explicitly.
_NON_ALNUM = re.compile(r"[\W_]+", flags=re.UNICODE)


def strip_symbols(token: str) -> str:
    return _NON_ALNUM.sub("", token.lower())


class TextNormalizer:
    def __init__(
        self,
        stopwords: AbstractSet[str] = STOPWORDS,
        noise_phrases: Iterable[str] = NOISE_PHRASES,
        min_len: int = 3,
    ) -> None:
        self.stopwords = frozenset(w.lower() for w in stopwords)
        self.noise_phrases: Tuple[str, ...] = tuple(p.lower() for p in noise_phrases if p)
        self.min_len = min_len

    def is_noise_line(self, line: str) -> bool:
        lower = line.lower()
        return any(phrase in lower for phrase in self.noise_phrases)

    def lines(self, raw_text: Optional[str]) -> List[str]:
        if not raw_text or not isinstance(raw_text, str):
            return []
        kept: List[str] = []
        # Only "\n" separates lines; U+0085, U+2028 and form feeds stay inside a line.
        for line in raw_text.split("\n"):
            line = line.strip()
            if not line or self.is_noise_line(line):
                continue
            kept.append(line)
        return kept

    def clean_text(self, raw_text: Optional[str]) -> str:
        """Noise-free text with whitespace collapsed; the preview is cut from this."""
        return collapse_whitespace(" ".join(self.lines(raw_text)))

    def tokenize(self, cleaned_text: str) -> List[str]:
        tokens: List[str] = []
        for raw in cleaned_text.split():
            token = strip_symbols(raw)
            if len(token) < self.min_len:
                continue
            if token in self.stopwords:
                continue
            tokens.append(token)
        return tokens

    def normalize(self, raw_text: Optional[str]) -> List[str]:
        return self.tokenize(self.clean_text(raw_text))


def normalize(
    raw_text: Optional[str],
    min_len: int = 3,
    stopwords: AbstractSet[str] = STOPWORDS,
    noise_phrases: Sequence[str] = NOISE_PHRASES,
) -> List[str]:
    return TextNormalizer(stopwords=stopwords, noise_phrases=noise_phrases, min_len=min_len).normalize(raw_text)
