"""Terminal components built on the wrapping and editing core."""

from termwrap.components.input import Input
from termwrap.components.text import WrappedText

__all__ = [
    "Input",
    "WrappedText",
]
