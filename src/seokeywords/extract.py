from __future__ import annotations

import logging
from typing import Iterable, Optional

from bs4 import BeautifulSoup
from readability import Document

from .errors import ParseError

logger = logging.getLogger(__name__)

SCRUB_TAGS = ("script", "style", "noscript")
CHROME_TAGS = ("header", "footer", "nav", "aside")
BLOCK_TAGS = [
    "p",
    "div",
    "section",
    "article",
    "main",
    "li",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "tr",
    "td",
    "th",
    "ul",
    "ol",
    "nav",
    "header",
    "footer",
    "aside",
    "blockquote",
    "pre",
    "table",
    "form",
]


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def _remove(soup: BeautifulSoup, tags: Iterable[str]) -> None:
    for el in soup(list(tags)):
        el.extract()


def _text(node) -> str:
    # Block boundaries become newlines so the line filter sees them; inline
    # markup stays glued to its neighbours.
    for br in node.find_all("br"):
        br.replace_with("\n")
    for el in node.find_all(BLOCK_TAGS):
        el.insert_before("\n")
        el.insert_after("\n")
    return node.get_text()


class HtmlExtractor:
    """Main-content text from raw HTML.

    Readability picks the article block; when it fails or comes back empty
    the text of the whole ``<body>`` is used instead. Script, style and
    noscript subtrees are removed before either path sees the markup.
    """

    def __init__(self, strip_chrome: bool = False, min_article_chars: int = 1) -> None:
        self.strip_chrome = strip_chrome
        self.min_article_chars = max(1, min_article_chars)

    def scrub(self, html: str) -> BeautifulSoup:
        soup = _soup(html)
        _remove(soup, SCRUB_TAGS)
        if self.strip_chrome:
            _remove(soup, CHROME_TAGS)
        return soup

    def article_text(self, scrubbed_html: str, base_url: Optional[str] = None) -> str:
        try:
            summary = Document(scrubbed_html, url=base_url).summary(html_partial=True)
            return _text(_soup(summary))
        except Exception as exc:
            raise ParseError(f"readability failed: {exc}") from exc

    def body_text(self, soup: BeautifulSoup) -> str:
        root = soup.body or soup
        return _text(root)

    def extract(self, html: Optional[str], base_url: Optional[str] = None) -> str:
        if not html or not isinstance(html, str):
            return ""
        try:
            soup = self.scrub(html)
        except Exception:
            logger.debug("could not parse HTML from %s", base_url or "<input>", exc_info=True)
            return ""

        try:
            text = self.article_text(str(soup), base_url)
        except ParseError as exc:
            logger.debug("article extraction fell back to body text: %s", exc)
            text = ""
        if len("".join(text.split())) >= self.min_article_chars:
            return text

        try:
            return self.body_text(soup)
        except Exception:
            logger.debug("body text extraction failed", exc_info=True)
            return ""


def extract(html: Optional[str], base_url: Optional[str] = None, strip_chrome: bool = False) -> str:
    return HtmlExtractor(strip_chrome=strip_chrome).extract(html, base_url)
