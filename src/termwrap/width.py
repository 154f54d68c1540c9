"""Display width of codepoints and text in terminal columns."""

from __future__ import annotations

import wcwidth as _wcwidth

# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Per-codepoint width
# ---------------------------------------------------------------------------


def char_width(ch: str) -> int:
    """Return the terminal width of a single codepoint: 0, 1 or 2.

    Wide east-asian characters take two columns, combining marks and other
    zero-width characters none.  Control characters, for which wcwidth
    reports -1, are clamped to 0.
    """
    cp = ord(ch)
    if 0x20 <= cp < 0x7F:
        return 1
    if cp < 0x20 or 0x7F <= cp <= 0x9F:
        return 0
    return max(_wcwidth.wcwidth(ch), 0)


def text_width(text: str) -> int:
    """Sum of :func:`char_width` over *text*.

    Additive: combining sequences are not merged, so this matches what the
    wrapper counts for each line.
    """
    if not text:
        return 0

    if text.isascii() and text.isprintable():
        return len(text)

    cached = _width_cache.get(text)
    if cached is not None:
        return cached

    return _cache_width(text, sum(char_width(ch) for ch in text))
