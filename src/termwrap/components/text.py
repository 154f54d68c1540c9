"""WrappedText component - displays styled fragments with word wrapping."""

from __future__ import annotations

from typing import Iterable

from termwrap.wrap import Fragment, render_wrapped


class WrappedText:
    """WrappedText component - displays styled fragments with word wrapping."""

    def __init__(
        self,
        fragments: Iterable[Fragment] = (),
        padding_x: int = 0,
        strip_whitespace: bool = True,
    ) -> None:
        self._fragments: list[Fragment] = list(fragments)
        self._padding_x = padding_x
        self._strip_whitespace = strip_whitespace

        # Cache
        self._cached_width: int | None = None
        self._cached_lines: list[str] | None = None

    def set_fragments(self, fragments: Iterable[Fragment]) -> None:
        self._fragments = list(fragments)
        self.invalidate()

    def append(self, fragment: Fragment) -> None:
        self._fragments.append(fragment)
        self.invalidate()

    def invalidate(self) -> None:
        self._cached_width = None
        self._cached_lines = None

    def render(self, width: int) -> list[str]:
        if self._cached_lines is not None and self._cached_width == width:
            return self._cached_lines

        # Calculate content width (subtract left/right margins)
        content_width = max(1, width - self._padding_x * 2)

        block = render_wrapped(self._strip_whitespace, content_width, self._fragments)

        margin = " " * self._padding_x
        result: list[str] = []
        for line in block:
            padding_needed = max(0, content_width - line.width)
            result.append(margin + line.render() + " " * padding_needed + margin)

        self._cached_width = width
        self._cached_lines = result
        return result
