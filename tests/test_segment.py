"""Tests for termwrap.segment -- word tokens and grapheme packing."""

from __future__ import annotations

from termwrap.segment import (
    Token,
    graphemes,
    is_white_space,
    segment_words,
    split_graphemes,
    word_boundaries,
)
from termwrap.width import text_width


# ---------------------------------------------------------------------------
# is_white_space
# ---------------------------------------------------------------------------


class TestIsWhiteSpace:
    def test_ascii_space_and_tab(self) -> None:
        assert is_white_space(" ")
        assert is_white_space("\t")
        assert is_white_space("\n")

    def test_unicode_spaces(self) -> None:
        assert is_white_space("\u00a0")
        assert is_white_space("\u2003")
        assert is_white_space("\u3000")

    def test_letters_and_punctuation(self) -> None:
        assert not is_white_space("a")
        assert not is_white_space(".")
        assert not is_white_space("漢")

    def test_zero_width_space_is_not_white_space(self) -> None:
        assert not is_white_space("\u200b")


# ---------------------------------------------------------------------------
# segment_words
# ---------------------------------------------------------------------------


class TestSegmentWords:
    """Word segmentation keeps every codepoint and tags single spaces."""

    def test_simple_sentence(self) -> None:
        tokens = segment_words("foo bar baz")
        assert [t.text for t in tokens] == ["foo", " ", "bar", " ", "baz"]

    def test_whitespace_tokens_flagged(self) -> None:
        tokens = segment_words("foo bar")
        assert [t.is_whitespace for t in tokens] == [False, True, False]

    def test_punctuation_is_separate(self) -> None:
        tokens = segment_words("hello, world")
        assert [t.text for t in tokens] == ["hello", ",", " ", "world"]

    def test_space_run_is_not_a_whitespace_token(self) -> None:
        tokens = segment_words("a  b")
        assert tokens[1] == Token("  ", False)

    def test_concatenation_reconstructs_text(self) -> None:
        text = "café 漢字, e\u0301té!"
        assert "".join(t.text for t in segment_words(text)) == text

    def test_empty_text(self) -> None:
        assert segment_words("") == []

    def test_token_width(self) -> None:
        assert Token("漢字", False).width == 4

    def test_token_width_sums_codepoints(self) -> None:
        assert Token("e\u0301x", False).width == text_width("e\u0301x") == 2

    def test_word_boundaries_cover_text(self) -> None:
        offsets = word_boundaries("foo bar")
        assert offsets[0] == 0
        assert offsets[-1] == 7
        assert 3 in offsets and 4 in offsets


# ---------------------------------------------------------------------------
# split_graphemes
# ---------------------------------------------------------------------------


class TestGraphemes:
    def test_combining_marks_stay_with_base(self) -> None:
        assert graphemes("e\u0301a") == ["e\u0301", "a"]


class TestSplitGraphemes:
    """Packing clusters into a first line, full lines and a remainder."""

    def test_fills_remaining_then_full_lines(self) -> None:
        assert split_graphemes(2, 5, "abcdefgh") == ("ab", ["cdefg"], "h")

    def test_word_ending_exactly_on_line_end(self) -> None:
        assert split_graphemes(5, 5, "abcdefghij") == ("abcde", ["fghij"], "")

    def test_short_word_only_trailing(self) -> None:
        first, middle, trailing = split_graphemes(5, 5, "abc")
        assert (first, middle, trailing) == ("", [], "abc")

    def test_no_room_gives_empty_first_line(self) -> None:
        assert split_graphemes(0, 3, "abcdefg") == ("", ["abc", "def"], "g")

    def test_never_splits_a_cluster(self) -> None:
        cluster = "e\u0301"
        first, middle, trailing = split_graphemes(3, 3, cluster * 4)
        assert first == cluster * 3
        assert middle == []
        assert trailing == cluster

    def test_wide_cluster_does_not_fit_remaining_slot(self) -> None:
        # One column left, the ideograph needs two
        first, middle, trailing = split_graphemes(1, 4, "漢字漢")
        assert first == ""
        assert middle == ["漢字"]
        assert trailing == "漢"

    def test_cluster_wider_than_target_gets_own_line(self) -> None:
        first, middle, trailing = split_graphemes(1, 1, "漢a")
        assert first == ""
        assert middle == ["漢"]
        assert trailing == "a"

    def test_no_empty_middle_lines(self) -> None:
        _first, middle, _trailing = split_graphemes(1, 1, "漢字漢")
        assert all(middle)
