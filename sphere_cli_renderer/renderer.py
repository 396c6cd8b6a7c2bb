#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from typing import List, Optional

from .camera import Camera
from .config import GlyphMode, RenderConfig
from .geometry import intersect, to_geometric
from .glyphs import BLANK, braille_fallback, meridian_glyph
from .texture import TextureMap, sample


class Renderer:
    """
    Ray-cast texture renderer for the unit sphere.

    render(rotation) returns one frame as text. The renderer keeps no state
    between frames; the caller owns the rotation angle.

    Pipeline per pixel:
      1. Ray from the fixed camera through the pixel
      2. Nearest intersection with the unit sphere (blank on a miss)
      3. Hit point -> (lat, long)
      4. Glyph from the texture (or the configured procedural source)
    """

    def __init__(self, texture: TextureMap, config: Optional[RenderConfig] = None,
                 camera: Optional[Camera] = None):
        self.texture = texture
        self.config = config if config is not None else RenderConfig()
        self.camera = camera if camera is not None else Camera()
        self.glyph_mode = self.config.effective_glyph_mode()
        self.width, self.height = self.camera.frame_size(texture.width)

    def glyph_at(self, x: int, y: int, rotation: float) -> str:
        hit = intersect(self.camera.origin,
                        self.camera.ray_direction(x, y, self.width))
        if hit is None:
            return BLANK

        coords = to_geometric(hit)
        mode = self.glyph_mode
        if mode is GlyphMode.TEXTURE:
            return sample(coords, rotation, self.texture)
        if mode is GlyphMode.BRAILLE:
            return sample(coords, rotation, self.texture, fallback=braille_fallback)

        long = coords.long + rotation
        if math.isnan(long):
            return BLANK
        return meridian_glyph(long)

    def render_rows(self, rotation: float) -> List[str]:
        return [
            ''.join(self.glyph_at(x, y, rotation) for x in range(self.width))
            for y in range(self.height)
        ]

    def render(self, rotation: float) -> str:
        """Frame buffer for rotation: every row terminated by a line break."""
        return ''.join(row + '\n' for row in self.render_rows(rotation))
