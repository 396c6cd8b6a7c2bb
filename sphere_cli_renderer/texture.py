#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/texture.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import math
from typing import Callable, Optional, Tuple

from .errors import TextureFormatError, TextureLoadError
from .geometry import Coords
from .glyphs import BLANK

logger = logging.getLogger(__name__)

TWO_PI = math.pi * 2.0


class TextureMap:
    """
    Read-only character grid sampled onto the sphere.

    width is the character count of the first line, height the number of
    line breaks in the source text. Row 0 is the top line of the source.
    """
    __slots__ = ('_rows', '_width', '_height')

    def __init__(self, rows: Tuple[str, ...], width: int, height: int):
        self._rows = tuple(rows)
        self._width = width
        self._height = height

    @property
    def rows(self) -> Tuple[str, ...]:
        return self._rows

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @classmethod
    def from_text(cls, text: str) -> 'TextureMap':
        """Build a texture from the full contents of a texture file."""
        if not text:
            raise TextureFormatError("texture is empty")
        first_break = text.find('\n')
        if first_break < 0:
            raise TextureFormatError(
                "texture has no line break; each row must end with '\\n'")

        width = first_break
        if width == 0:
            raise TextureFormatError("texture's first line is empty")
        height = text.count('\n')
        rows = tuple(text.split('\n')[:height])

        ragged = [i for i, row in enumerate(rows) if len(row) != width]
        if ragged:
            logger.warning("Texture rows %s differ from width %d; "
                           "missing cells render blank", ragged[:8], width)
        logger.debug("Loaded texture %dx%d", width, height)
        return cls(rows, width, height)

    @classmethod
    def from_file(cls, path) -> 'TextureMap':
        """Read path fully into memory and build a texture from it."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise TextureLoadError(path, e) from e
        return cls.from_text(text)

    def cell(self, row: int, col: int) -> Optional[str]:
        """Character at (row, col), or None outside the grid."""
        if row < 0 or row >= self._height or col < 0:
            return None
        line = self._rows[row]
        if col >= len(line):
            return None
        return line[col]

    def __repr__(self):
        return f"TextureMap({self._width}x{self._height})"


# fallback(long, y, height) -> glyph, consulted when no texture cell exists
Fallback = Callable[[float, int, int], str]


def sample(coords: Optional[Coords], rotation: float, texture: TextureMap,
           fallback: Optional[Fallback] = None) -> str:
    """
    Glyph for a sphere point after spinning it by rotation about the
    vertical axis.

    Longitude wraps into [0, 2pi) and spans the texture width; latitude
    spans the height and is read bottom-up, so row = height - y. At y == 0
    that row is one past the last one and samples blank.
    """
    if coords is None:
        return BLANK

    long = ((coords.long + rotation) + TWO_PI) % TWO_PI
    lat = coords.lat
    if math.isnan(long) or math.isnan(lat):
        return BLANK

    x = int(long * texture.width / TWO_PI)
    y = int(lat * texture.height / math.pi)

    glyph = texture.cell(texture.height - y, x)
    if glyph is not None:
        return glyph
    if fallback is not None:
        return fallback(long, y, texture.height)
    return BLANK
