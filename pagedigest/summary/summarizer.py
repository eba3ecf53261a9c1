"""Extractive summarisation by sentence scoring.

Pipeline:
    split into candidate sentences → score each → pick the top few →
    restore document order → join, truncate

Every constant the algorithm depends on lives on :class:`SummaryOptions`, so
callers (and tests) can inspect or override the vocabulary and limits without
touching the scoring code.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import List, Sequence

TOO_SHORT_MESSAGE = "Text too short to summarize."
ELLIPSIS = "..."

IMPORTANT_WORDS: frozenset[str] = frozenset(
    {
        "important", "key", "main", "primary", "significant", "crucial",
        "essential", "major", "fundamental", "critical", "vital", "necessary",
        "first", "second", "third", "finally", "conclusion", "result",
        "therefore", "because", "however", "although", "despite",
        "furthermore", "moreover",
    }
)

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class SummaryOptions:
    """Vocabulary and limits used by :func:`summarize`."""

    important_words: frozenset[str] = IMPORTANT_WORDS
    min_text_chars: int = 100
    min_sentence_chars: int = 20
    min_sentences: int = 3
    max_sentences: int = 3
    selection_ratio: float = 0.3
    medium_length: tuple[int, int] = (8, 25)
    leading_fraction: float = 0.2
    trailing_fraction: float = 0.8
    max_summary_chars: int = 500
    short_fallback_chars: int = 200
    empty_fallback_chars: int = 300
    # Reproduce the substring-containment re-ordering of earlier releases.
    legacy_containment: bool = False


DEFAULT_OPTIONS = SummaryOptions()


@dataclass(frozen=True)
class ScoredSentence:
    text: str
    score: int
    position: int


# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------

def split_sentences(text: str, min_chars: int = DEFAULT_OPTIONS.min_sentence_chars) -> List[str]:
    """Split *text* on runs of ``.``, ``!`` and ``?``.

    Fragments whose trimmed length is ``<= min_chars`` are dropped.  The
    survivors are returned untrimmed, in document order.
    """
    return [s for s in _SENTENCE_SPLIT_RE.split(text) if len(s.strip()) > min_chars]


def score_sentence(
    sentence: str,
    position: int,
    total: int,
    options: SummaryOptions = DEFAULT_OPTIONS,
) -> int:
    """Score a candidate sentence.

    * +2 for every token found in ``options.important_words``
    * +1 when the token count falls inside ``options.medium_length``
    * +1 when *position* falls before ``leading_fraction`` or after
      ``trailing_fraction`` of the *total* candidates
    """
    # Untrimmed: a leading space yields an empty first token that counts
    # toward the length rule.
    words = _WHITESPACE_RE.split(sentence.lower())
    score = 2 * sum(1 for word in words if word in options.important_words)

    low, high = options.medium_length
    if low <= len(words) <= high:
        score += 1

    if position < total * options.leading_fraction or position > total * options.trailing_fraction:
        score += 1

    return score


def select_top(
    scored: Sequence[ScoredSentence],
    options: SummaryOptions = DEFAULT_OPTIONS,
) -> List[ScoredSentence]:
    """Highest scores first; ties keep their original relative order."""
    count = min(options.max_sentences, math.ceil(len(scored) * options.selection_ratio))
    ranked = sorted(scored, key=lambda s: -s.score)
    return ranked[:count]


def reorder_by_position(
    selected: Sequence[ScoredSentence],
    limit: int = DEFAULT_OPTIONS.max_sentences,
) -> List[str]:
    """Return the selected texts in document order."""
    return [s.text for s in sorted(selected, key=lambda s: s.position)][:limit]


def reorder_by_containment(
    candidates: Sequence[str],
    selected: Sequence[ScoredSentence],
    limit: int = DEFAULT_OPTIONS.max_sentences,
) -> List[str]:
    """Legacy re-ordering: keep each candidate that contains, or is contained
    in, any selected sentence, then take the first *limit* of them.

    A short selected sentence can match several candidates, so this may pull
    in sentences that were never selected.
    """
    tops = [s.text for s in selected]
    ordered = []
    for candidate in candidates:
        trimmed = candidate.strip()
        if any(trimmed in top or top in trimmed for top in tops):
            ordered.append(trimmed)
    return ordered[:limit]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def summarize(body_text: str, options: SummaryOptions = DEFAULT_OPTIONS) -> str:
    """Return a short extractive summary of *body_text*.

    Deterministic and side-effect free.  Short inputs and inputs with too few
    usable sentences get fixed fallbacks instead of a scored summary.
    """
    text = body_text or ""
    if len(text) < options.min_text_chars:
        return TOO_SHORT_MESSAGE

    candidates = split_sentences(text, options.min_sentence_chars)
    if len(candidates) < options.min_sentences:
        return text[: options.short_fallback_chars] + ELLIPSIS

    total = len(candidates)
    # Repeated sentences are scored at the index of their first appearance.
    first_seen: dict[str, int] = {}
    for position, sentence in enumerate(candidates):
        first_seen.setdefault(sentence, position)

    scored = [
        ScoredSentence(
            text=sentence.strip(),
            score=score_sentence(sentence, first_seen[sentence], total, options),
            position=position,
        )
        for position, sentence in enumerate(candidates)
    ]
    selected = select_top(scored, options)

    if options.legacy_containment:
        ordered = reorder_by_containment(candidates, selected, options.max_sentences)
    else:
        ordered = reorder_by_position(selected, options.max_sentences)

    if not ordered:
        return text[: options.empty_fallback_chars] + ELLIPSIS

    summary = ". ".join(ordered) + "."
    if len(summary) > options.max_summary_chars:
        summary = summary[: options.max_summary_chars] + ELLIPSIS
    return summary
