#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/glyphs.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

BLANK = ' '

# Unicode Braille block; dot bits in code point order
#  1 4
#  2 5
#  3 6
#  7 8
BRAILLE_BASE = 0x2800
BRAILLE_BLANK = chr(BRAILLE_BASE)
BRAILLE_FULL = chr(BRAILLE_BASE + 0xFF)

# Fill tiers, empty to full, one per fifth of the pole-to-pole span
DENSITY_MASKS = (0b0000_0000, 0b0000_1001, 0b0001_1011, 0b0011_1111, 0b1111_1111)

# Meridian bands: one stripe every BAND radians, inked over its first half
BAND = math.pi / 6
HALF_BAND = math.pi / 12
MERIDIAN_LEADING_EDGE = 0b1011_1000
MERIDIAN_TRAILING_EDGE = 0b0100_0111


def braille_char(mask: int) -> str:
    """Renders an 8-bit dot mask as a Unicode Braille character."""
    return chr(BRAILLE_BASE + (mask & 0xFF))


def density_glyph(ratio: float) -> str:
    """Braille cell whose fill grows with ratio in [0, 1]."""
    if ratio < 0.2:
        mask = DENSITY_MASKS[0]
    elif ratio < 0.4:
        mask = DENSITY_MASKS[1]
    elif ratio < 0.6:
        mask = DENSITY_MASKS[2]
    elif ratio < 0.8:
        mask = DENSITY_MASKS[3]
    else:
        mask = DENSITY_MASKS[4]
    return braille_char(mask)


def braille_fallback(long: float, y: int, height: int) -> str:
    """
    Synthesized glyph for a sphere point with no texture cell behind it.

    Alternating longitude bands: the inked half picks a density tier from
    how far down the texture (y / height) the point falls.
    """
    if long % BAND < HALF_BAND:
        return density_glyph(y / height if height else 0.0)
    return BRAILLE_BLANK


def meridian_glyph(long: float) -> str:
    """Procedural meridian stripes, no texture involved."""
    offset = long % BAND
    if offset < 0.05 * HALF_BAND:
        return braille_char(MERIDIAN_LEADING_EDGE)
    if offset < 0.95 * HALF_BAND:
        return BRAILLE_FULL
    if offset < HALF_BAND:
        return braille_char(MERIDIAN_TRAILING_EDGE)
    return BRAILLE_BLANK
