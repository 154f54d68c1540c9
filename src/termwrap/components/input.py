"""Input component - line editor that wraps over as many rows as it needs."""

from __future__ import annotations

from typing import Callable

from termwrap.edit_buffer import EditBuffer, insert
from termwrap.keybindings import Unhandled, get_keybindings
from termwrap.keys import KeyEvent, parse_key
from termwrap.width import text_width
from termwrap.wrap import cursor_position, wrap_line

CURSOR_ON = "\x1b[7m"
CURSOR_OFF = "\x1b[27m"

PASTE_START = "\x1b[200~"
PASTE_END = "\x1b[201~"


class Input:
    """Input component - line editor that wraps over as many rows as it needs."""

    def __init__(self, prompt: str = "> ") -> None:
        self._buffer = EditBuffer()
        self.prompt = prompt

        self.on_submit: Callable[[str], None] | None = None
        self.on_escape: Callable[[], None] | None = None

        # Focusable interface
        self.focused: bool = False

        # Bracketed paste mode
        self._paste_buffer: str = ""
        self._is_in_paste: bool = False

    @property
    def buffer(self) -> EditBuffer:
        return self._buffer

    def get_value(self) -> str:
        return self._buffer.value

    def set_value(self, value: str) -> None:
        self._buffer = EditBuffer.from_text(value, self._buffer.cursor)

    def handle_input(self, data: str | bytes) -> bool:
        """Feed raw terminal input; returns ``False`` if nothing used it."""
        if isinstance(data, bytes):
            data = data.decode("utf-8", errors="ignore")

        if PASTE_START in data:
            self._is_in_paste = True
            self._paste_buffer = ""
            data = data.replace(PASTE_START, "")

        if self._is_in_paste:
            self._paste_buffer += data
            end_index = self._paste_buffer.find(PASTE_END)
            if end_index != -1:
                self._handle_paste(self._paste_buffer[:end_index])
                self._is_in_paste = False
                remaining = self._paste_buffer[end_index + len(PASTE_END) :]
                self._paste_buffer = ""
                if remaining:
                    self.handle_input(remaining)
            return True

        event = parse_key(data)
        if event is None:
            # Unbracketed paste or multi-character input
            if data and data.isprintable():
                self._buffer = insert(data)(self._buffer)
                return True
            return False
        return self.handle_key(event)

    def handle_key(self, event: KeyEvent) -> bool:
        if event.key_id == "enter":
            if self.on_submit:
                self.on_submit(self._buffer.value)
            return True

        if event.key_id == "escape":
            if self.on_escape:
                self.on_escape()
            return True

        result = get_keybindings().handle(event)
        if isinstance(result, Unhandled):
            return False
        self._buffer = result(self._buffer)
        return True

    def _handle_paste(self, pasted_text: str) -> None:
        clean_text = pasted_text.replace("\r\n", "").replace("\r", "").replace("\n", "")
        self._buffer = insert(clean_text)(self._buffer)

    def invalidate(self) -> None:
        pass

    def render(self, width: int) -> list[str]:
        available_width = width - text_width(self.prompt)

        if available_width <= 0:
            return [self.prompt]

        # A trailing space gives the cursor a cell when it sits at the end
        text = self._buffer.value + " "
        lines = wrap_line(False, available_width, text)
        row, col = cursor_position(lines, self._buffer.cursor)

        indent = " " * text_width(self.prompt)
        result: list[str] = []
        for i, line in enumerate(lines):
            if i == row:
                line = _highlight_column(line, col)
            prefix = self.prompt if i == 0 else indent
            padding = " " * max(0, available_width - text_width(lines[i]))
            result.append(prefix + line + padding)
        return result


def _highlight_column(line: str, col: int) -> str:
    """Wrap the character starting at column *col* in reverse video."""
    pos = 0
    for idx, ch in enumerate(line):
        if pos == col:
            return line[:idx] + CURSOR_ON + ch + CURSOR_OFF + line[idx + 1 :]
        pos += text_width(ch)
    return line + CURSOR_ON + " " + CURSOR_OFF
