"""String helpers: splitting, trimming, joining and integer formatting."""

from __future__ import annotations

import re
from collections.abc import Iterable

_MAX_FORMAT_LENGTH = 12
_UINT32_MASK = 0xFFFFFFFF
_TRIM_CHARS = " \t\r\n"

# A printf conversion: either "%%" or flags, width, precision, length and type.
_CONVERSION = re.compile(
    r"%(?:(%)|([-+ #0]*\d*(?:\.\d*)?)[hlLqjzt]*([a-zA-Z]))"
)


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    if not separator:
        raise ValueError("separator must not be empty")
    return [piece for piece in text.split(separator) if piece]


def trim(text: str) -> str:
    """Strip spaces, tabs, carriage returns and newlines from both ends."""
    return text.strip(_TRIM_CHARS)


def join(items: Iterable[str], separator: str) -> str:
    """Join the strings with ``separator`` between them."""
    return separator.join(items)


def from_int(number: int, fmt: str) -> str:
    """Format an integer with a printf-style format of at most 12 characters.

    Unsigned conversions (``o``, ``u``, ``x``, ``X``) show negative numbers
    as their 32-bit two's complement.
    """
    if len(fmt) > _MAX_FORMAT_LENGTH:
        raise ValueError(f"format longer than {_MAX_FORMAT_LENGTH} characters: {fmt!r}")

    conversions: list[str] = []

    def rewrite(match: re.Match) -> str:
        if match.group(1):
            return "%%"
        spec, kind = match.group(2), match.group(3)
        if kind == "u":
            kind = "d"
            conversions.append("u")
        else:
            conversions.append(kind)
        return f"%{spec}{kind}"

    normalized = _CONVERSION.sub(rewrite, fmt)
    if not conversions:
        return normalized % ()
    if len(conversions) > 1:
        raise ValueError(f"format must hold a single conversion: {fmt!r}")
    if conversions[0] in "ouxX" and number < 0:
        number &= _UINT32_MASK
    return normalized % number


def to_hex(number: int) -> str:
    """Render a 32-bit value as ``0x`` followed by eight lower-case hex digits."""
    return f"0x{number & _UINT32_MASK:08x}"