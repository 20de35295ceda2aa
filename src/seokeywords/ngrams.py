from __future__ import annotations

from typing import Dict, Iterable, List, NamedTuple, Sequence, Tuple

from .config import NOISE_PHRASES


class FrequencyEntry(NamedTuple):
    key: str
    count: int


def ngram_counts(tokens: Sequence[str], n: int) -> Dict[str, int]:
    """Sliding-window counts; dict order is the order each key was first seen."""
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    counts: Dict[str, int] = {}
    for i in range(len(tokens) - n + 1):
        key = " ".join(tokens[i : i + n])
        counts[key] = counts.get(key, 0) + 1
    return counts


def rank(counts: Dict[str, int]) -> List[FrequencyEntry]:
    # sorted() is stable, so equal counts keep first-seen order.
    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return [FrequencyEntry(key, count) for key, count in ranked]


def build_frequencies(tokens: Sequence[str], n: int) -> List[FrequencyEntry]:
    return rank(ngram_counts(tokens, n))


class NGramEngine:
    def __init__(
        self,
        noise_phrases: Iterable[str] = NOISE_PHRASES,
        unigram_limit: int = 20,
        ngram_limit: int = 10,
    ) -> None:
        self.noise_phrases: Tuple[str, ...] = tuple(p.lower() for p in noise_phrases if p)
        self.unigram_limit = unigram_limit
        self.ngram_limit = ngram_limit

    def limit_for(self, n: int) -> int:
        return self.unigram_limit if n == 1 else self.ngram_limit

    def contains_noise(self, key: str) -> bool:
        return any(junk in key for junk in self.noise_phrases)

    def top(self, tokens: Sequence[str], n: int) -> List[FrequencyEntry]:
        entries = build_frequencies(tokens, n)[: self.limit_for(n)]
        if n == 1:
            return entries
        # Filtered after the cut, so fewer than ``ngram_limit`` may survive.
        return [e for e in entries if not self.contains_noise(e.key)]

    def unigrams(self, tokens: Sequence[str]) -> List[FrequencyEntry]:
        return self.top(tokens, 1)

    def bigrams(self, tokens: Sequence[str]) -> List[FrequencyEntry]:
        return self.top(tokens, 2)

    def trigrams(self, tokens: Sequence[str]) -> List[FrequencyEntry]:
        return self.top(tokens, 3)
