"""Tests for termwrap.keys -- key events and raw input parsing."""

from __future__ import annotations

import pytest

from termwrap.keys import Key, KeyEvent, parse_key


# ---------------------------------------------------------------------------
# KeyEvent
# ---------------------------------------------------------------------------


class TestKeyEvent:
    def test_plain_key_id(self) -> None:
        assert KeyEvent("left").key_id == "left"

    def test_modifier_order_in_key_id(self) -> None:
        event = KeyEvent("x", ctrl=True, alt=True, shift=True)
        assert event.key_id == "ctrl+shift+alt+x"

    def test_char_for_printable(self) -> None:
        assert KeyEvent("a").char == "a"
        assert KeyEvent("漢").char == "漢"

    def test_char_for_space_key(self) -> None:
        assert KeyEvent("space").char == " "

    def test_no_char_with_modifiers(self) -> None:
        assert KeyEvent("a", ctrl=True).char is None

    def test_no_char_for_named_key(self) -> None:
        assert KeyEvent("left").char is None

    def test_key_helper(self) -> None:
        assert Key.ctrl(Key.left) == "ctrl+left"
        assert Key.alt("b") == "alt+b"


class TestKeyEventFromId:
    def test_plain(self) -> None:
        assert KeyEvent.from_id("home") == KeyEvent("home")

    def test_ctrl_letter_is_lowercased(self) -> None:
        assert KeyEvent.from_id("ctrl+A") == KeyEvent("a", ctrl=True)

    def test_multiple_modifiers(self) -> None:
        assert KeyEvent.from_id("ctrl+shift+right") == KeyEvent(
            "right", ctrl=True, shift=True
        )

    def test_plus_key(self) -> None:
        assert KeyEvent.from_id("ctrl++") == KeyEvent("+", ctrl=True)

    def test_roundtrip_through_key_id(self) -> None:
        assert KeyEvent.from_id("ctrl+left").key_id == "ctrl+left"

    @pytest.mark.parametrize("key_id", ["", "ctrl+", "ctrl", "hyper+a"])
    def test_invalid(self, key_id: str) -> None:
        assert KeyEvent.from_id(key_id) is None


# ---------------------------------------------------------------------------
# parse_key
# ---------------------------------------------------------------------------


class TestParseKey:
    @pytest.mark.parametrize(
        ("data", "key_id"),
        [
            ("\x1b[D", "left"),
            ("\x1b[C", "right"),
            ("\x1bOD", "left"),
            ("\x1b[H", "home"),
            ("\x1b[F", "end"),
            ("\x1b[1~", "home"),
            ("\x1b[4~", "end"),
            ("\x1b[3~", "delete"),
            ("\x7f", "backspace"),
            ("\x08", "backspace"),
            ("\r", "enter"),
            ("\x1b", "escape"),
            ("\t", "tab"),
        ],
    )
    def test_named_keys(self, data: str, key_id: str) -> None:
        event = parse_key(data)
        assert event is not None
        assert event.key_id == key_id

    @pytest.mark.parametrize(
        ("data", "key_id"),
        [
            ("\x1b[1;5D", "ctrl+left"),
            ("\x1b[1;5C", "ctrl+right"),
            ("\x1bOd", "ctrl+left"),
            ("\x1b[1;2A", "shift+up"),
            ("\x1b[1;3D", "alt+left"),
            ("\x1b[3;5~", "ctrl+delete"),
            ("\x1b[Z", "shift+tab"),
        ],
    )
    def test_modified_sequences(self, data: str, key_id: str) -> None:
        event = parse_key(data)
        assert event is not None
        assert event.key_id == key_id

    def test_ctrl_letters(self) -> None:
        assert parse_key("\x01") == KeyEvent("a", ctrl=True)
        assert parse_key("\x05") == KeyEvent("e", ctrl=True)
        assert parse_key("\x0b") == KeyEvent("k", ctrl=True)
        assert parse_key("\x15") == KeyEvent("u", ctrl=True)

    def test_alt_letter(self) -> None:
        assert parse_key("\x1bb") == KeyEvent("b", alt=True)

    def test_alt_shift_letter(self) -> None:
        event = parse_key("\x1bB")
        assert event is not None
        assert event.key_id == "shift+alt+b"

    def test_printable_character(self) -> None:
        assert parse_key("a") == KeyEvent("a")
        assert parse_key("漢") == KeyEvent("漢")

    def test_bytes_input(self) -> None:
        assert parse_key(b"\x1b[D") == KeyEvent("left")
        assert parse_key("é".encode("utf-8")) == KeyEvent("é")

    def test_malformed_bytes_dropped(self) -> None:
        assert parse_key(b"\xff") is None

    def test_unknown_sequence(self) -> None:
        assert parse_key("\x1b[99~") is None

    def test_empty(self) -> None:
        assert parse_key("") is None

    def test_multi_character_text_is_not_a_key(self) -> None:
        assert parse_key("hello") is None
