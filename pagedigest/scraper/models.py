"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass

UNTITLED = "Untitled"


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass(frozen=True)
class Document:
    """Title and whitespace-normalised main text extracted from a page."""

    title: str = UNTITLED
    body_text: str = ""
