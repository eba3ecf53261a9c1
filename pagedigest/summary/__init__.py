"""Extractive sentence-scoring summariser."""

from pagedigest.summary.summarizer import (
    DEFAULT_OPTIONS,
    IMPORTANT_WORDS,
    TOO_SHORT_MESSAGE,
    SummaryOptions,
    summarize,
)

__all__ = [
    "summarize",
    "SummaryOptions",
    "DEFAULT_OPTIONS",
    "IMPORTANT_WORDS",
    "TOO_SHORT_MESSAGE",
]
