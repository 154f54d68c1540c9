"""Key events and decoding of raw terminal input.

A :class:`KeyEvent` names a physical key plus its modifiers.  Its
``key_id`` is the textual form used by keybinding tables, e.g. ``"left"``,
``"ctrl+a"`` or ``"ctrl+shift+right"``.  :func:`parse_key` turns the bytes a
terminal sends for one key press into a :class:`KeyEvent`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

KeyId = str


# ---------------------------------------------------------------------------
# Key helper object
# ---------------------------------------------------------------------------


class Key:
    """Named key constants and modifier combinators."""

    escape = "escape"
    enter = "enter"
    tab = "tab"
    space = "space"
    backspace = "backspace"
    delete = "delete"
    insert = "insert"
    home = "home"
    end = "end"
    page_up = "pageUp"
    page_down = "pageDown"
    up = "up"
    down = "down"
    left = "left"
    right = "right"

    @staticmethod
    def ctrl(key: str) -> str:
        return f"ctrl+{key}"

    @staticmethod
    def shift(key: str) -> str:
        return f"shift+{key}"

    @staticmethod
    def alt(key: str) -> str:
        return f"alt+{key}"


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MODIFIERS: dict[str, int] = {
    "shift": 1,
    "alt": 2,
    "ctrl": 4,
}

# Final byte of CSI / SS3 sequences -> key name
_FINAL_BYTE_KEYS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
}

# Number in CSI <n> ~ sequences -> key name
_TILDE_KEYS: dict[str, str] = {
    "1": "home",
    "2": "insert",
    "3": "delete",
    "4": "end",
    "5": "pageUp",
    "6": "pageDown",
    "7": "home",
    "8": "end",
}


def _build_legacy_sequences() -> dict[str, tuple[str, int]]:
    """Map every legacy escape sequence to ``(key, modifier bits)``.

    Modified keys use the xterm form ``CSI 1 ; <1 + bits> <final>`` and
    ``CSI <n> ; <1 + bits> ~``.
    """
    sequences: dict[str, tuple[str, int]] = {}
    for final, key in _FINAL_BYTE_KEYS.items():
        sequences[f"\x1b[{final}"] = (key, 0)
        sequences[f"\x1bO{final}"] = (key, 0)
        for bits in range(1, 8):
            sequences[f"\x1b[1;{bits + 1}{final}"] = (key, bits)
    for num, key in _TILDE_KEYS.items():
        sequences[f"\x1b[{num}~"] = (key, 0)
        for bits in range(1, 8):
            sequences[f"\x1b[{num};{bits + 1}~"] = (key, bits)
    # rxvt ctrl+arrow
    for final, key in (("a", "up"), ("b", "down"), ("c", "right"), ("d", "left")):
        sequences[f"\x1bO{final}"] = (key, MODIFIERS["ctrl"])
    sequences["\x1b[Z"] = ("tab", MODIFIERS["shift"])
    return sequences


LEGACY_SEQUENCES: dict[str, tuple[str, int]] = _build_legacy_sequences()

# Single bytes with a name of their own
_SIMPLE_KEYS: dict[str, str] = {
    "\x1b": "escape",
    "\r": "enter",
    "\n": "enter",
    "\t": "tab",
    "\x7f": "backspace",
    "\x08": "backspace",
}


# ---------------------------------------------------------------------------
# KeyEvent
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeyEvent:
    """A key press: a named key or a single character, plus modifiers."""

    key: str
    ctrl: bool = False
    alt: bool = False
    shift: bool = False

    @property
    def key_id(self) -> KeyId:
        prefix = ""
        if self.ctrl:
            prefix += "ctrl+"
        if self.shift:
            prefix += "shift+"
        if self.alt:
            prefix += "alt+"
        return prefix + self.key

    @property
    def has_modifiers(self) -> bool:
        return self.ctrl or self.alt or self.shift

    @property
    def char(self) -> str | None:
        """The character to insert for this event, or ``None``."""
        if self.has_modifiers:
            return None
        if self.key == "space":
            return " "
        if len(self.key) == 1 and self.key.isprintable():
            return self.key
        return None

    @classmethod
    def from_bits(cls, key: str, bits: int) -> KeyEvent:
        return cls(
            key,
            ctrl=bool(bits & MODIFIERS["ctrl"]),
            alt=bool(bits & MODIFIERS["alt"]),
            shift=bool(bits & MODIFIERS["shift"]),
        )

    @classmethod
    def from_id(cls, key_id: KeyId) -> KeyEvent | None:
        """Parse an identifier like ``"ctrl+shift+a"``.

        Returns ``None`` for an empty identifier or one with no key part.
        A trailing ``+`` is the plus key itself (``"ctrl++"``).
        """
        if not key_id:
            return None

        if key_id.endswith("++"):
            head, key = key_id[:-2], "+"
        elif key_id == "+":
            head, key = "", "+"
        else:
            head, _, key = key_id.rpartition("+")

        bits = 0
        for part in filter(None, head.split("+")):
            lower = part.lower()
            if lower not in MODIFIERS:
                return None
            bits |= MODIFIERS[lower]

        if not key or key.lower() in MODIFIERS:
            return None
        if len(key) == 1 and bits & MODIFIERS["ctrl"]:
            key = key.lower()
        return cls.from_bits(key, bits)


# ---------------------------------------------------------------------------
# parse_key -- determine what key was pressed from raw input
# ---------------------------------------------------------------------------


def parse_key(data: str | bytes) -> KeyEvent | None:
    """Parse raw terminal input for a single key press.

    Returns ``None`` when *data* is not a recognized key.  Bytes are decoded
    as UTF-8 with malformed sequences dropped.
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="ignore")
    if not data:
        return None

    legacy = LEGACY_SEQUENCES.get(data)
    if legacy is not None:
        return KeyEvent.from_bits(*legacy)

    simple = _SIMPLE_KEYS.get(data)
    if simple is not None:
        return KeyEvent(simple)

    if data == "\x00":
        return KeyEvent("space", ctrl=True)

    # Ctrl + letter (0x01 - 0x1a)
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return KeyEvent(chr(ord(data) + ord("a") - 1), ctrl=True)

    # Alt + key (ESC prefix)
    if len(data) == 2 and data[0] == "\x1b":
        inner = parse_key(data[1])
        if inner is not None and not inner.alt:
            if inner.key != "space" and inner.key.isupper():
                return KeyEvent(inner.key.lower(), ctrl=inner.ctrl, alt=True, shift=True)
            return KeyEvent(inner.key, ctrl=inner.ctrl, alt=True, shift=inner.shift)

    if len(data) == 1 and data.isprintable():
        return KeyEvent(data)

    logger.debug("unrecognized key input %r", data)
    return None
