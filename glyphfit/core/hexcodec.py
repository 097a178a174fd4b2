"""Hex colour notation: #RGB, #RRGGBB, #RRGGBBAA.

Two entry points share one grammar:
  parse_hex    user input; anything off-grammar gives None
  hex_literal  trusted literal data; anything off-grammar raises ValueError

Only ASCII hex digits are accepted. No whitespace trimming, no missing '#',
no partial results.
"""

from glyphfit.core.types import PixelColor

_HEX_DIGITS = '0123456789abcdef'


def _digit(c: str) -> int | None:
    idx = _HEX_DIGITS.find(c.lower()) if len(c) == 1 and c.isascii() else -1
    return idx if idx >= 0 else None


def _channels(s: str) -> list[int] | None:
    """Decode the digits after '#' into 3 or 4 channel values."""
    if not s.startswith('#'):
        return None
    digits = [_digit(c) for c in s[1:]]
    if any(d is None for d in digits):
        return None

    if len(digits) == 3:
        # #RGB: each digit fills both nibbles
        return [d * 17 for d in digits] + [255]
    if len(digits) in (6, 8):
        values = [digits[i] * 16 + digits[i + 1] for i in range(0, len(digits), 2)]
        if len(values) == 3:
            values.append(255)
        return values
    return None


def parse_hex(s: str) -> PixelColor | None:
    """Parse a hex colour. Returns None for anything outside the grammar."""
    if not isinstance(s, str):
        return None
    values = _channels(s)
    if values is None:
        return None
    return PixelColor(*values)


def hex_literal(s: str) -> PixelColor:
    """Parse a hex colour from trusted literal data. Raises ValueError on bad input."""
    values = _channels(s) if isinstance(s, str) else None
    if values is None:
        raise ValueError(f'invalid hex colour literal {s!r}: expected #RGB, #RRGGBB or #RRGGBBAA')
    return PixelColor(*values)
