from __future__ import annotations

import copy
from typing import Dict, List, Protocol

TrendSeries = Dict[str, List[Dict[str, object]]]

# Fixed sample data. Nothing here is computed from the analyzed page.
COMPETITOR_KEYWORDS: List[str] = ["competitor1", "competitor2"]
GOOGLE_TRENDS: TrendSeries = {
    "SEO": [
        {"date": "2025-01-01", "value": 50},
        {"date": "2025-01-02", "value": 60},
    ]
}
AI_SUGGESTIONS: List[str] = ["Add structured data", "Improve page speed"]


class PlaceholderProvider(Protocol):
    def competitor_keywords(self, url: str, terms: List[str]) -> List[str]:
        ...

    def google_trends(self, url: str, terms: List[str]) -> TrendSeries:
        ...

    def ai_suggestions(self, url: str, terms: List[str]) -> List[str]:
        ...


class StaticPlaceholders:
    """Returns copies of the sample constants regardless of input."""

    def competitor_keywords(self, url: str, terms: List[str]) -> List[str]:
        return list(COMPETITOR_KEYWORDS)

    def google_trends(self, url: str, terms: List[str]) -> TrendSeries:
        return copy.deepcopy(GOOGLE_TRENDS)

    def ai_suggestions(self, url: str, terms: List[str]) -> List[str]:
        return list(AI_SUGGESTIONS)
