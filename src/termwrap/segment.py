"""Grapheme-cluster and word segmentation.

Grapheme clusters come from the ``grapheme`` package and word boundaries
from ``apsw.unicode``; both follow Unicode TR29.  Boundaries are computed up
front and the text is sliced, so neither splitter keeps state between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import grapheme
from apsw import unicode as _unicode

from termwrap.width import text_width

logger = logging.getLogger(__name__)

# Codepoints with the Unicode White_Space property.
WHITE_SPACE: frozenset[str] = frozenset(
    [chr(cp) for cp in range(0x09, 0x0E)]
    + [chr(cp) for cp in range(0x2000, 0x200B)]
    + [
        " ",
        "\u0085",
        "\u00a0",
        "\u1680",
        "\u2028",
        "\u2029",
        "\u202f",
        "\u205f",
        "\u3000",
    ]
)


def is_white_space(ch: str) -> bool:
    """Return ``True`` if *ch* is a single Unicode whitespace codepoint."""
    return ch in WHITE_SPACE


# ---------------------------------------------------------------------------
# Words
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Token:
    """A run of text between two word boundaries."""

    text: str
    is_whitespace: bool

    @property
    def width(self) -> int:
        return text_width(self.text)


def word_boundaries(text: str) -> list[int]:
    """Return the offsets of every word break in *text*, ``0`` included."""
    offsets = [0]
    offset = 0
    while offset < len(text):
        offset = _unicode.word_next_break(text, offset)
        offsets.append(offset)
    return offsets


def segment_words(text: str) -> list[Token]:
    """Split *text* into word tokens; joining them gives back *text*.

    Whitespace runs, punctuation and words are all tokens.  A token only
    counts as whitespace when it is exactly one whitespace codepoint.
    """
    offsets = word_boundaries(text)
    tokens: list[Token] = []
    for start, end in zip(offsets, offsets[1:]):
        piece = text[start:end]
        tokens.append(Token(piece, len(piece) == 1 and is_white_space(piece)))
    return tokens


# ---------------------------------------------------------------------------
# Grapheme clusters
# ---------------------------------------------------------------------------


def graphemes(text: str) -> list[str]:
    """Return the grapheme clusters of *text* in order."""
    return list(grapheme.graphemes(text))


def split_graphemes(
    remaining: int,
    target_width: int,
    text: str,
) -> tuple[str, list[str], str]:
    """Pack the clusters of *text* into lines.

    *remaining* is the room left on the line the text starts on, and
    *target_width* the width of every following line.  Returns
    ``(first_line, middle_lines, trailing)``: the part that completes the
    current line (possibly empty), the full lines after it, and an unfinished
    last line.  A cluster wider than *target_width* gets a line of its own
    and overflows it.
    """
    first_line: str | None = None
    lines: list[str] = []
    current: list[str] = []
    current_width = 0
    limit = remaining

    def close(line: str) -> None:
        nonlocal first_line, limit
        if first_line is None:
            first_line = line
            limit = target_width
        elif line:
            lines.append(line)

    for cluster in graphemes(text):
        width = text_width(cluster)
        if current_width + width < limit:
            current.append(cluster)
            current_width += width
        elif current_width + width == limit:
            current.append(cluster)
            close("".join(current))
            current = []
            current_width = 0
        else:
            close("".join(current))
            if width > target_width:
                logger.debug("cluster %r wider than %d columns", cluster, target_width)
            current = [cluster]
            current_width = width

    return first_line or "", lines, "".join(current)
