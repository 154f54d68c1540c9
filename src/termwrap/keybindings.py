"""Keybinding tables for the edit buffer.

Each table maps key ids to edit actions and each action to a transform from
:mod:`termwrap.edit_buffer`.  A lookup either yields the transform or an
:class:`Unhandled` marker, so tables can be chained: the base navigation
table first, then the Emacs-style table, then whatever the caller does with
keys nobody claimed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Literal

from termwrap import edit_buffer
from termwrap.edit_buffer import Transform
from termwrap.keys import Key, KeyEvent, KeyId

logger = logging.getLogger(__name__)

EditAction = Literal[
    # Cursor movement
    "cursorLeft",
    "cursorRight",
    "cursorWordLeft",
    "cursorWordRight",
    "cursorLineStart",
    "cursorLineEnd",
    # Deletion
    "deleteCharBackward",
    "deleteCharForward",
    "deleteToLineStart",
    "deleteToLineEnd",
]

EDIT_ACTIONS: dict[EditAction, Transform] = {
    "cursorLeft": edit_buffer.move_left,
    "cursorRight": edit_buffer.move_right,
    "cursorWordLeft": edit_buffer.move_word_left,
    "cursorWordRight": edit_buffer.move_word_right,
    "cursorLineStart": edit_buffer.move_to_start,
    "cursorLineEnd": edit_buffer.move_to_end,
    "deleteCharBackward": edit_buffer.delete_backward,
    "deleteCharForward": edit_buffer.delete_forward,
    "deleteToLineStart": edit_buffer.kill_to_start,
    "deleteToLineEnd": edit_buffer.kill_to_end,
}

KeybindingsConfig = dict[EditAction, KeyId | list[KeyId]]

BASE_KEYBINDINGS: KeybindingsConfig = {
    "deleteCharBackward": Key.backspace,
    "deleteCharForward": Key.delete,
    "cursorLineStart": Key.home,
    "cursorLineEnd": Key.end,
    "cursorRight": Key.right,
    "cursorLeft": Key.left,
}

EMACS_KEYBINDINGS: KeybindingsConfig = {
    "cursorLineStart": Key.ctrl("a"),
    "cursorLineEnd": Key.ctrl("e"),
    "deleteToLineEnd": Key.ctrl("k"),
    "deleteToLineStart": Key.ctrl("u"),
    "cursorRight": Key.ctrl("f"),
    "cursorLeft": Key.ctrl("b"),
    "cursorWordLeft": Key.ctrl(Key.left),
    "cursorWordRight": Key.ctrl(Key.right),
}


@dataclass(frozen=True)
class Unhandled:
    """Returned by a lookup when no binding matches *event*."""

    event: KeyEvent


def _normalize(key_id: KeyId) -> KeyId | None:
    event = KeyEvent.from_id(key_id)
    return event.key_id if event is not None else None


class KeyBindingTable:
    """One set of bindings from key ids to edit actions.

    *config* overrides *defaults* per action.  With *insert_chars* the table
    also claims unmodified printable characters and inserts them.
    """

    def __init__(
        self,
        defaults: KeybindingsConfig,
        config: KeybindingsConfig | None = None,
        *,
        insert_chars: bool = False,
    ) -> None:
        self._defaults = defaults
        self._insert_chars = insert_chars
        self._action_to_keys: dict[EditAction, list[KeyId]] = {}
        self._key_to_action: dict[KeyId, EditAction] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: KeybindingsConfig) -> None:
        self._action_to_keys.clear()
        self._key_to_action.clear()

        merged: dict[EditAction, KeyId | list[KeyId]] = dict(self._defaults)
        merged.update(config)

        for action, keys in merged.items():
            if action not in EDIT_ACTIONS:
                logger.warning("ignoring binding for unknown action %r", action)
                continue
            key_array = keys if isinstance(keys, list) else [keys]
            normalized: list[KeyId] = []
            for key in key_array:
                key_id = _normalize(key)
                if key_id is None:
                    logger.warning("ignoring invalid key id %r for %s", key, action)
                    continue
                normalized.append(key_id)
                self._key_to_action[key_id] = action
            self._action_to_keys[action] = normalized

    def lookup(self, event: KeyEvent) -> Transform | Unhandled:
        action = self._key_to_action.get(event.key_id)
        if action is not None:
            return EDIT_ACTIONS[action]
        if self._insert_chars:
            char = event.char
            if char is not None:
                return edit_buffer.insert(char)
        return Unhandled(event)

    def get_action(self, key_id: KeyId) -> EditAction | None:
        normalized = _normalize(key_id)
        if normalized is None:
            return None
        return self._key_to_action.get(normalized)

    def get_keys(self, action: EditAction) -> list[KeyId]:
        """Get keys bound to an action."""
        return self._action_to_keys.get(action, [])

    def set_config(self, config: KeybindingsConfig) -> None:
        """Update configuration."""
        self._build_maps(config)


def handle_key(event: KeyEvent, tables: Iterable[KeyBindingTable]) -> Transform | Unhandled:
    """Try *tables* in order and return the first transform bound to *event*."""
    for table in tables:
        result = table.lookup(event)
        if not isinstance(result, Unhandled):
            return result
    logger.debug("no binding for %s", event.key_id)
    return Unhandled(event)


class KeyBindingsManager:
    """The base and Emacs-style tables used by input components."""

    def __init__(
        self,
        base_config: KeybindingsConfig | None = None,
        emacs_config: KeybindingsConfig | None = None,
    ) -> None:
        self.base = KeyBindingTable(BASE_KEYBINDINGS, base_config, insert_chars=True)
        self.emacs = KeyBindingTable(EMACS_KEYBINDINGS, emacs_config)

    @property
    def tables(self) -> tuple[KeyBindingTable, KeyBindingTable]:
        return (self.base, self.emacs)

    def handle(self, event: KeyEvent) -> Transform | Unhandled:
        return handle_key(event, self.tables)


_global_keybindings: KeyBindingsManager | None = None


def get_keybindings() -> KeyBindingsManager:
    global _global_keybindings
    if _global_keybindings is None:
        _global_keybindings = KeyBindingsManager()
    return _global_keybindings


def set_keybindings(manager: KeyBindingsManager) -> None:
    global _global_keybindings
    _global_keybindings = manager
