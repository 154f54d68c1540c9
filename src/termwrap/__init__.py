"""termwrap: display-width aware word wrapping and line editing for terminals."""

# Components (re-exported from components package)
from termwrap.components import Input, WrappedText

# Edit buffer
from termwrap.edit_buffer import EditBuffer, Transform

# Keybindings
from termwrap.keybindings import (
    BASE_KEYBINDINGS,
    EMACS_KEYBINDINGS,
    EditAction,
    KeyBindingsManager,
    KeyBindingTable,
    Unhandled,
    get_keybindings,
    handle_key,
    set_keybindings,
)

# Keyboard input handling
from termwrap.keys import Key, KeyEvent, KeyId, parse_key

# Segmentation
from termwrap.segment import Token, is_white_space, segment_words, split_graphemes

# Width
from termwrap.width import char_width, text_width

# Wrapping
from termwrap.wrap import (
    StyledLine,
    cursor_position,
    render_block,
    render_wrapped,
    split_ascii,
    wrap,
    wrap_line,
)

__all__ = [
    # Components
    "Input",
    "WrappedText",
    # Edit buffer
    "EditBuffer",
    "Transform",
    # Keybindings
    "BASE_KEYBINDINGS",
    "EMACS_KEYBINDINGS",
    "EditAction",
    "KeyBindingsManager",
    "KeyBindingTable",
    "Unhandled",
    "get_keybindings",
    "handle_key",
    "set_keybindings",
    # Keys
    "Key",
    "KeyEvent",
    "KeyId",
    "parse_key",
    # Segmentation
    "Token",
    "is_white_space",
    "segment_words",
    "split_graphemes",
    # Width
    "char_width",
    "text_width",
    # Wrapping
    "StyledLine",
    "cursor_position",
    "render_block",
    "render_wrapped",
    "split_ascii",
    "wrap",
    "wrap_line",
]
