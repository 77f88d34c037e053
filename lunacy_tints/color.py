"""Conversions between ``#rrggbb`` text, 8-bit RGB and HSL.

HSL triples use degrees for hue ``[0, 360)`` and percentages for saturation
and lightness ``[0, 100]``. The conversions are lossy: hue is rounded to the
nearest degree, saturation and lightness to one decimal place and channels to
8 bits, so a round trip may drift by one unit.
"""

import colorsys
import math
import string

from .errors import InvalidColorFormat, InvalidColorValue

HEX_DIGITS = set(string.hexdigits)


def round_half_up(value):
    """Round to the nearest integer, ties towards positive infinity."""
    return int(math.floor(value + 0.5))


def clamp(value, low, high):
    return max(low, min(high, value))


def parse_hex(text):
    """Return the integer value of a ``#rrggbb`` string.

    Raises:
        InvalidColorFormat: text is not ``#`` followed by six characters
        InvalidColorValue: the six characters are not hex digits
    """
    if not isinstance(text, str) or len(text) != 7 or not text.startswith("#"):
        raise InvalidColorFormat(f"expected '#' followed by 6 hex digits, got {text!r}")
    digits = text[1:]
    if not HEX_DIGITS.issuperset(digits):
        raise InvalidColorValue(f"not a hexadecimal color value: {text!r}")
    return int(digits, 16)


def normalize_hex(text):
    """Validate and lowercase a color, accepting it with or without ``#``."""
    if isinstance(text, str) and not text.startswith("#"):
        text = "#" + text
    value = parse_hex(text)
    return f"#{value:06x}"


def rgb_to_hex(r, g, b):
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    value = parse_hex(hex_color)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def rgb_to_hsl(r, g, b):
    r, g, b = r / 255, g / 255, b / 255
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    hue = round_half_up(h * 360) % 360
    return (hue, round(s * 100, 1), round(l * 100, 1))


def hsl_to_rgb(h, s, l):
    h, s, l = (h % 360) / 360, clamp(s, 0, 100) / 100, clamp(l, 0, 100) / 100
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return tuple(clamp(round_half_up(c * 255), 0, 255) for c in (r, g, b))


def hex_to_hsl(text):
    """Convert ``#rrggbb`` to ``(hue, saturation, lightness)``."""
    return rgb_to_hsl(*hex_to_rgb(text))


def hsl_to_hex(hue, saturation, lightness):
    """Convert an HSL triple to ``#rrggbb``.

    Hue wraps modulo 360, saturation and lightness are clamped to
    ``[0, 100]``, so any real input yields a valid color.
    """
    return rgb_to_hex(*hsl_to_rgb(hue, saturation, lightness))


def relative_luminance(r, g, b):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)
