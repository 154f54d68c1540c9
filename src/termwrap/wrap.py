"""Word wrapping to a fixed terminal width.

Lines break at word boundaries where possible.  A word that cannot fit even
on an empty line is split between grapheme clusters: its head finishes the
current line, full lines follow, and its tail starts the next one.  With
``strip_leading_whitespace`` a lone whitespace token is dropped from the
start of every line.

Example at width 5::

    "foo bar baz"       "foobar bar baz"    "foobarbazbar boo"
    foo  |              fooba|              fooba|
    bar  |              r bar|              rbazb|
    baz  |              baz  |              ar   |
                                            boo  |
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from termwrap.segment import segment_words, split_graphemes
from termwrap.width import text_width

logger = logging.getLogger(__name__)

Style = Callable[[str], str]
Fragment = tuple[Style | None, str | bytes]


@dataclass(frozen=True)
class StyledLine:
    """One display line and the style of the fragment it came from."""

    style: Style | None
    text: str

    @property
    def width(self) -> int:
        return text_width(self.text)

    def render(self) -> str:
        if self.style is None:
            return self.text
        return self.style(self.text)


def decode_text(text: str | bytes) -> str:
    """Decode UTF-8 input, dropping malformed byte sequences."""
    if isinstance(text, str):
        return text
    try:
        return text.decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.debug("dropping malformed UTF-8 in %d bytes: %s", len(text), exc.reason)
        return text.decode("utf-8", errors="ignore")


# ---------------------------------------------------------------------------
# General path
# ---------------------------------------------------------------------------


def wrap(strip_leading_whitespace: bool, target_width: int, text: str) -> list[str]:
    """Wrap a single line of *text* (no newlines) to *target_width* columns."""
    if target_width <= 0 or text_width(text) <= target_width:
        return [text]

    lines: list[str] = []
    current: list[str] = []
    line_width = 0

    for token in segment_words(text):
        width = token.width
        if line_width + width <= target_width:
            if strip_leading_whitespace and line_width == 0 and token.is_whitespace:
                continue
            current.append(token.text)
            line_width += width
        elif width > target_width:
            first, middle, trailing = split_graphemes(
                target_width - line_width, target_width, token.text
            )
            closed = "".join(current) + first
            if closed:
                lines.append(closed)
            lines.extend(middle)
            current = [trailing] if trailing else []
            line_width = text_width(trailing)
        else:
            lines.append("".join(current))
            if strip_leading_whitespace and token.is_whitespace:
                current = []
                line_width = 0
            else:
                current = [token.text]
                line_width = width

    if current:
        lines.append("".join(current))
    return lines


# ---------------------------------------------------------------------------
# ASCII fast path
# ---------------------------------------------------------------------------


def split_ascii(strip_leading_whitespace: bool, target_width: int, text: str) -> list[str]:
    """Wrap ASCII *text* at spaces, without word segmentation.

    Breaks at the last space within the first *target_width* columns, or cuts
    hard at *target_width* when there is none.  With
    ``strip_leading_whitespace`` the spaces at the start of every line after a
    break are dropped, and so are those of an overlong first line.
    """
    if target_width <= 0:
        return [text]

    lines: list[str] = []
    while len(text) > target_width:
        if strip_leading_whitespace and text[0] == " ":
            text = text.lstrip(" ")
            continue
        idx = text.rfind(" ", 1, target_width + 1)
        if idx == -1:
            lines.append(text[:target_width])
            text = text[target_width:]
        else:
            lines.append(text[:idx])
            text = text[idx + 1 :] if strip_leading_whitespace else text[idx:]

    if strip_leading_whitespace and lines:
        text = text.lstrip(" ")
    if text or not lines:
        lines.append(text)
    return lines


def wrap_line(strip_leading_whitespace: bool, target_width: int, line: str) -> list[str]:
    """Wrap one logical line, taking the ASCII fast path when possible."""
    if line.isascii():
        return split_ascii(strip_leading_whitespace, target_width, line)
    return wrap(strip_leading_whitespace, target_width, line)


# ---------------------------------------------------------------------------
# Blocks of styled fragments
# ---------------------------------------------------------------------------


def render_wrapped(
    strip_leading_whitespace: bool,
    target_width: int,
    fragments: Iterable[Fragment],
) -> list[StyledLine]:
    """Wrap every ``(style, text)`` fragment and stack the results.

    Fragment text is split on newlines first; empty lines are dropped.
    """
    block: list[StyledLine] = []
    for style, raw in fragments:
        for line in decode_text(raw).split("\n"):
            if not line:
                continue
            for wrapped in wrap_line(strip_leading_whitespace, target_width, line):
                block.append(StyledLine(style, wrapped))
    return block


def render_block(block: Iterable[StyledLine]) -> list[str]:
    """Apply each line's style and return the printable strings."""
    return [line.render() for line in block]


def cursor_position(lines: list[str], offset: int) -> tuple[int, int]:
    """Map a codepoint *offset* into unstripped wrapped *lines* to ``(row, col)``.

    An offset at the end of a line that has a successor lands at the start of
    the next row.
    """
    for row, line in enumerate(lines):
        if offset < len(line) or row == len(lines) - 1:
            return row, text_width(line[:offset])
        offset -= len(line)
    return 0, 0
