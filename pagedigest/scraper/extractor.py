"""Content extraction: turns raw HTML into a :class:`Document`.

The main text is chosen by probing an ordered list of CSS selectors for
likely content containers.  The list runs from most to least specific and its
order is significant: a later selector only wins when its text is strictly
longer than the current best, so ties go to the earlier selector.
"""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from bs4 import BeautifulSoup

from pagedigest.scraper.models import UNTITLED, Document

CONTENT_SELECTORS: tuple[str, ...] = (
    "article",
    ".post-content",
    ".entry-content",
    ".content",
    "main",
    ".blog-post",
    ".article-content",
    ".story-content",
    ".post-body",
)

# A container must be longer than this to count as the main content.
MIN_CONTAINER_CHARS = 100
# Paragraphs at or below this length are treated as boilerplate.
MIN_PARAGRAPH_CHARS = 20
# Below this, the paragraph fallback gives way to the whole body text.
MIN_PARAGRAPH_FALLBACK_CHARS = 50

_NON_CONTENT_TAGS = ["script", "style", "noscript", "template"]
_WHITESPACE_RE = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim the ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def _parse(html: str | bytes) -> BeautifulSoup:
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(_NON_CONTENT_TAGS):
        tag.decompose()
    return soup


def _selector_text(soup: BeautifulSoup, selector: str) -> str:
    """Concatenated, trimmed text of every element matching *selector*."""
    return "".join(el.get_text() for el in soup.select(selector)).strip()


def _best_container_text(soup: BeautifulSoup, selectors: Iterable[str]) -> str:
    """Return the text of the winning content container, or ``""``."""
    best = ""
    for selector in selectors:
        text = _selector_text(soup, selector)
        if len(text) > len(best) and len(text) > MIN_CONTAINER_CHARS:
            best = text
    return best


def _paragraph_text(soup: BeautifulSoup) -> str:
    """Join every substantial ``<p>`` with single spaces."""
    paragraphs = (p.get_text().strip() for p in soup.find_all("p"))
    return " ".join(p for p in paragraphs if len(p) > MIN_PARAGRAPH_CHARS)


def _page_text(soup: BeautifulSoup) -> str:
    container = soup.body or soup
    return container.get_text()


def _extract_title(soup: BeautifulSoup) -> str:
    """``<title>``, then the first ``<h1>``, then ``"Untitled"``."""
    for tag_name in ("title", "h1"):
        tag = soup.find(tag_name)
        if tag is not None:
            text = tag.get_text().strip()
            if text:
                return text
    return UNTITLED


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_content(
    html: str | bytes,
    selectors: Sequence[str] = CONTENT_SELECTORS,
) -> Document:
    """Extract the title and main body text from *html*.

    Falls back from the best selector match to the page's substantial
    paragraphs, and from those to the whole body text.  Malformed markup never
    raises; an empty page yields ``Document("Untitled", "")``.
    """
    if not html or not isinstance(html, (str, bytes)):
        return Document()

    soup = _parse(html)

    text = _best_container_text(soup, selectors)
    if len(text) < MIN_CONTAINER_CHARS:
        text = _paragraph_text(soup)
        if len(text) < MIN_PARAGRAPH_FALLBACK_CHARS:
            text = _page_text(soup)

    return Document(
        title=_extract_title(soup),
        body_text=_normalize_whitespace(text),
    )
