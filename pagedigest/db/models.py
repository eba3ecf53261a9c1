"""Dataclass models representing DB rows.

These are plain Python objects – not ORM models.  The DB layer serialises /
deserialises to and from these types.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SummaryRecord:
    id: str
    title: str
    url: str
    summary: str
    urdu_summary: str
    created_at: int


@dataclass
class ContentRecord:
    id: str
    title: str
    url: str
    full_text: str
    created_at: int
