"""Tests for the extractive summariser.

All inputs are synthetic; the expected outputs are worked out by hand from
the scoring rules (+2 per cue word, +1 medium length, +1 leading/trailing
position).
"""

from __future__ import annotations

import pytest

from pagedigest.summary.summarizer import (
    DEFAULT_OPTIONS,
    IMPORTANT_WORDS,
    TOO_SHORT_MESSAGE,
    ScoredSentence,
    SummaryOptions,
    reorder_by_containment,
    reorder_by_position,
    score_sentence,
    select_top,
    split_sentences,
    summarize,
)


# ---------------------------------------------------------------------------
# Fixtures / constants
# ---------------------------------------------------------------------------

# Five candidates; only the last one carries cue words, so it scores highest.
_ORDER_TEXT = (
    "The weather in the valley was mild during spring. "
    "Farmers planted rows of barley along the river banks. "
    "Traders arrived each week with carts full of goods. "
    "Children played near the old stone bridge every evening. "
    "However the key result was a crucial and important harvest."
)


def _long_text(sentences: int = 10) -> str:
    parts = [f"Sentence number {i} " + "lorem ipsum dolor " * 12 for i in range(sentences)]
    return ". ".join(p.strip() for p in parts) + "."


# ---------------------------------------------------------------------------
# split_sentences
# ---------------------------------------------------------------------------

class TestSplitSentences:
    def test_splits_on_terminal_punctuation(self) -> None:
        text = "This sentence is long enough to count! Another one that qualifies here? Yes it does."
        result = [s.strip() for s in split_sentences(text)]
        assert result == [
            "This sentence is long enough to count",
            "Another one that qualifies here",
        ]

    def test_drops_short_fragments(self) -> None:
        assert split_sentences("Hi. Ok. Fine.") == []

    def test_boundary_is_strictly_greater_than_twenty(self) -> None:
        exactly_20 = "a" * 20
        twenty_one = "b" * 21
        result = split_sentences(f"{exactly_20}. {twenty_one}.")
        assert [s.strip() for s in result] == [twenty_one]

    def test_consecutive_punctuation_is_one_boundary(self) -> None:
        text = "What an extraordinary afternoon it was?!... Nobody expected the storm to pass so fast"
        assert len(split_sentences(text)) == 2


# ---------------------------------------------------------------------------
# score_sentence
# ---------------------------------------------------------------------------

class TestScoreSentence:
    def test_cue_words_and_medium_length(self) -> None:
        sentence = "This is a crucial and important finding for the team"
        # crucial + important = 4, ten tokens = +1, middle position = 0
        assert score_sentence(sentence, position=5, total=10) == 5

    def test_leading_position_bonus(self) -> None:
        assert score_sentence("short words here ok", position=0, total=10) == 1

    def test_trailing_position_bonus(self) -> None:
        assert score_sentence("short words here ok", position=9, total=10) == 1

    def test_trailing_boundary_is_strict(self) -> None:
        # 0.8 * 10 == 8, and position 8 is not strictly greater.
        assert score_sentence("short words here ok", position=8, total=10) == 0

    def test_tokens_with_punctuation_do_not_match(self) -> None:
        assert score_sentence("However, the plan worked", position=5, total=10) == 0

    def test_cue_words_are_case_insensitive(self) -> None:
        assert score_sentence("MOREOVER", position=5, total=10) == 2

    def test_leading_space_counts_as_a_token(self) -> None:
        seven_words = " one two three four five six seven"
        assert score_sentence(seven_words, position=5, total=10) == 1
        assert score_sentence(seven_words.strip(), position=5, total=10) == 0

    def test_twenty_five_words_after_a_space_is_too_long(self) -> None:
        words = " ".join(f"w{i}" for i in range(25))
        assert score_sentence(words, position=5, total=10) == 1
        assert score_sentence(" " + words, position=5, total=10) == 0

    def test_custom_vocabulary(self) -> None:
        options = SummaryOptions(important_words=frozenset({"barley"}))
        assert score_sentence("barley barley", position=5, total=10, options=options) == 4


# ---------------------------------------------------------------------------
# Selection and ordering
# ---------------------------------------------------------------------------

class TestSelection:
    def test_selection_count_uses_ratio(self) -> None:
        scored = [ScoredSentence(f"s{i}", 1, i) for i in range(5)]
        assert len(select_top(scored)) == 2  # ceil(5 * 0.3)

    def test_selection_count_capped_at_three(self) -> None:
        scored = [ScoredSentence(f"s{i}", 1, i) for i in range(40)]
        assert len(select_top(scored)) == 3

    def test_ties_keep_original_order(self) -> None:
        scored = [
            ScoredSentence("a", 1, 0),
            ScoredSentence("b", 3, 1),
            ScoredSentence("c", 3, 2),
            ScoredSentence("d", 3, 3),
        ]
        # ceil(4 * 0.3) == 2
        assert [s.text for s in select_top(scored)] == ["b", "c"]

    def test_reorder_by_position(self) -> None:
        selected = [ScoredSentence("late", 9, 7), ScoredSentence("early", 2, 1)]
        assert reorder_by_position(selected) == ["early", "late"]

    def test_containment_can_pull_in_unselected_sentences(self) -> None:
        candidates = [
            " Revenue grew strongly in the northern region this year",
            " Revenue grew strongly in the north",
            " Costs stayed flat across every department",
        ]
        selected = [ScoredSentence("Revenue grew strongly in the north", 5, 1)]

        assert reorder_by_containment(candidates, selected) == [
            "Revenue grew strongly in the northern region this year",
            "Revenue grew strongly in the north",
        ]
        assert reorder_by_position(selected) == ["Revenue grew strongly in the north"]


# ---------------------------------------------------------------------------
# summarize
# ---------------------------------------------------------------------------

class TestSummarize:
    def test_short_text_message(self) -> None:
        assert summarize("Too short.") == TOO_SHORT_MESSAGE

    def test_empty_text_message(self) -> None:
        assert summarize("") == TOO_SHORT_MESSAGE

    def test_ninety_nine_chars_is_too_short(self) -> None:
        assert summarize("x" * 99) == TOO_SHORT_MESSAGE

    def test_too_few_candidates_returns_prefix(self) -> None:
        text = "a" * 150
        assert summarize(text) == text[:200] + "..."

    def test_too_few_candidates_truncates_at_200(self) -> None:
        text = "This opening sentence is fairly long. " + "b" * 300
        assert summarize(text) == text[:200] + "..."

    def test_output_follows_document_order(self) -> None:
        summary = summarize(_ORDER_TEXT)
        assert summary == (
            "The weather in the valley was mild during spring. "
            "However the key result was a crucial and important harvest."
        )
        assert summary.index("However") > summary.index("The weather")

    def test_non_initial_seven_word_sentence_is_medium_length(self) -> None:
        text = (
            "Alpha beta gamma delta epsilon zeta eta theta. "
            "one two three four five six seven. "
            "aa bb cc dd ee ff gg hh ii. "
            "Extraordinarily lengthy vocabulary. "
            "Incomprehensibilities abound."
        )
        assert summarize(text) == (
            "Alpha beta gamma delta epsilon zeta eta theta. "
            "one two three four five six seven."
        )

    def test_repeated_sentence_scores_at_first_position(self) -> None:
        river = "Rivers carry sediment toward the distant sea"
        parts = [
            "Opening remarks set the scene",
            river,
            "Mountains slowly erode under steady wind and rain",
            "Filler words appear here",
            "Stones settle quietly below",
            river,
            "Birds nest along muddy banks",
            "Reeds sway beside calm water",
            "Fish dart between smooth rocks",
            "Evening light fades over hills",
        ]
        text = ". ".join(parts) + "."
        # The copy at index 5 inherits the leading-position bonus of index 1.
        assert summarize(text) == (
            "Opening remarks set the scene. "
            f"{river}. {river}."
        )

    def test_is_deterministic(self) -> None:
        assert summarize(_ORDER_TEXT) == summarize(_ORDER_TEXT)

    def test_long_summary_is_truncated(self) -> None:
        text = _long_text()
        assert len(text) >= 2000
        summary = summarize(text)
        assert len(summary) <= 503
        assert summary.endswith("...")
        assert summary == summary[:500] + "..."

    def test_at_most_three_sentences(self) -> None:
        text = " ".join(
            f"Paragraph {i} explains a detail about the harvest season." for i in range(30)
        )
        summary = summarize(text)
        assert summary.count(". ") <= 2

    def test_legacy_containment_option(self) -> None:
        options = SummaryOptions(legacy_containment=True)
        # No containment overlap between these sentences, so both modes agree.
        assert summarize(_ORDER_TEXT, options) == summarize(_ORDER_TEXT)


class TestDefaults:
    def test_vocabulary_contains_cue_words(self) -> None:
        for word in ("important", "crucial", "therefore", "moreover", "primary"):
            assert word in IMPORTANT_WORDS

    def test_default_limits(self) -> None:
        assert DEFAULT_OPTIONS.max_sentences == 3
        assert DEFAULT_OPTIONS.max_summary_chars == 500

    def test_options_are_immutable(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_OPTIONS.max_sentences = 5  # type: ignore[misc]
