"""Scraper package — web fetch & content extraction."""

from pagedigest.scraper.extractor import CONTENT_SELECTORS, extract_content
from pagedigest.scraper.fetcher import InvalidUrlError, fetch_url
from pagedigest.scraper.models import Document, RawPage

__all__ = [
    "fetch_url",
    "extract_content",
    "CONTENT_SELECTORS",
    "InvalidUrlError",
    "RawPage",
    "Document",
]
