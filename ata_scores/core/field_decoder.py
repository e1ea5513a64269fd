"""Lenient decoders for fixed-width ASCII fields.

None of these raise. Malformed numbers degrade to 0 and short text windows
are NUL-filled, so a score field of "000" or "   " both read as "not shot".
"""

import re


# Leading whitespace, optional plus sign, then digits (strtol style)
_COUNT_RE = re.compile(rb'\s*\+?(\d+)')
# Same, with an optional fractional part: "27", "27.5", "27.", ".5"
_FLOAT_RE = re.compile(rb'\s*\+?(\d+\.?\d*|\.\d+)')


def decode_text(window: bytes, width: int) -> str:
    """Copy a byte window verbatim into a fixed-width string.

    Each byte maps to exactly one character (latin-1), so the result always
    has `width` characters. Short windows are padded with NULs.
    """
    raw = bytes(window[:width])
    return raw.ljust(width, b'\x00').decode('latin-1')


def decode_count(window: bytes) -> int:
    """Parse leading digits: ' 5X' -> 5, '   ' -> 0, 'abc' -> 0."""
    m = _COUNT_RE.match(bytes(window))
    if not m:
        return 0
    return int(m.group(1).decode('ascii'))


def decode_float(window: bytes) -> float:
    """Parse a leading decimal number: '27.5' -> 27.5, '  ' -> 0.0."""
    m = _FLOAT_RE.match(bytes(window))
    if not m:
        return 0.0
    return float(m.group(1).decode('ascii'))
