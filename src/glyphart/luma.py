import math

from glyphart.charsets import Charset
from glyphart.model import RGB

# ITU-R BT.601 luma weights
RED_WEIGHT = 0.299
GREEN_WEIGHT = 0.587
BLUE_WEIGHT = 0.114


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ties going up, so 2.5 -> 3 and 0.5 -> 1."""
    return math.floor(value + 0.5)


def brightness(color: RGB) -> float:
    """Perceived brightness of an 8-bit RGB colour, in [0, 1]."""
    r, g, b = color
    return (RED_WEIGHT * r + GREEN_WEIGHT * g + BLUE_WEIGHT * b) / 255


def map_to_glyph(color: RGB, charset: Charset, invert: bool = False) -> tuple[int, float]:
    """Quantize a colour to an index into ``charset``.

    Returns the glyph index together with the brightness it was derived from
    (after inversion, when ``invert`` is set). Both colour and monochrome
    conversion select glyphs through this function.
    """
    value = brightness(color)
    if invert:
        value = 1 - value
    last = len(charset) - 1
    index = min(max(round_half_up(value * last), 0), last)
    return index, value
