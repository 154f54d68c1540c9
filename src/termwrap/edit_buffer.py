"""Single-line edit buffer split at the cursor.

The buffer is a pair of strings: the text before the cursor and the text
after it.  Every edit is a pure function from one buffer to the next, so a
key binding is just a reference to one of the functions below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from termwrap.segment import is_white_space


@dataclass(frozen=True)
class EditBuffer:
    pre: str = ""
    post: str = ""

    @property
    def value(self) -> str:
        return self.pre + self.post

    @property
    def cursor(self) -> int:
        return len(self.pre)

    @classmethod
    def from_text(cls, text: str, cursor: int | None = None) -> EditBuffer:
        """Build a buffer with the cursor at *cursor* (default: end of text)."""
        if cursor is None:
            cursor = len(text)
        cursor = max(0, min(cursor, len(text)))
        return cls(text[:cursor], text[cursor:])


Transform = Callable[[EditBuffer], EditBuffer]


# ---------------------------------------------------------------------------
# Deletion
# ---------------------------------------------------------------------------


def delete_backward(buf: EditBuffer) -> EditBuffer:
    if not buf.pre:
        return buf
    return EditBuffer(buf.pre[:-1], buf.post)


def delete_forward(buf: EditBuffer) -> EditBuffer:
    if not buf.post:
        return buf
    return EditBuffer(buf.pre, buf.post[1:])


def kill_to_end(buf: EditBuffer) -> EditBuffer:
    return EditBuffer(buf.pre, "")


def kill_to_start(buf: EditBuffer) -> EditBuffer:
    return EditBuffer("", buf.post)


# ---------------------------------------------------------------------------
# Cursor movement
# ---------------------------------------------------------------------------


def move_to_start(buf: EditBuffer) -> EditBuffer:
    return EditBuffer("", buf.pre + buf.post)


def move_to_end(buf: EditBuffer) -> EditBuffer:
    return EditBuffer(buf.pre + buf.post, "")


def move_right(buf: EditBuffer) -> EditBuffer:
    if not buf.post:
        return buf
    return EditBuffer(buf.pre + buf.post[0], buf.post[1:])


def move_left(buf: EditBuffer) -> EditBuffer:
    if not buf.pre:
        return buf
    return EditBuffer(buf.pre[:-1], buf.pre[-1] + buf.post)


def move_word_left(buf: EditBuffer) -> EditBuffer:
    """Jump back to just after the previous whitespace codepoint.

    The codepoint right before the cursor is skipped unconditionally, so
    repeated presses keep moving even when the cursor sits after a space.
    """
    if not buf.pre:
        return buf
    rest = buf.pre[:-1]
    for idx in range(len(rest) - 1, -1, -1):
        if is_white_space(rest[idx]):
            return EditBuffer(rest[: idx + 1], buf.pre[idx + 1 :] + buf.post)
    return EditBuffer("", buf.pre + buf.post)


def move_word_right(buf: EditBuffer) -> EditBuffer:
    """Jump forward to the next whitespace codepoint, stopping before it.

    Mirror of :func:`move_word_left`: the codepoint right after the cursor
    is skipped unconditionally.
    """
    if not buf.post:
        return buf
    for idx in range(1, len(buf.post)):
        if is_white_space(buf.post[idx]):
            return EditBuffer(buf.pre + buf.post[:idx], buf.post[idx:])
    return EditBuffer(buf.pre + buf.post, "")


# ---------------------------------------------------------------------------
# Insertion
# ---------------------------------------------------------------------------


def insert(text: str) -> Transform:
    """Return a transform inserting *text* at the cursor."""

    def _insert(buf: EditBuffer) -> EditBuffer:
        return EditBuffer(buf.pre + text, buf.post)

    return _insert
