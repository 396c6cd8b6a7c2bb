#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import enum
import logging
import math
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_TEXTURE_PATH = './data/s'


class GlyphMode(enum.Enum):
    """Where pixel glyphs come from."""
    TEXTURE = 'texture'      # texture cell, blank where none exists
    BRAILLE = 'braille'      # texture cell, synthesized Braille where none exists
    MERIDIANS = 'meridians'  # procedural Braille stripes, texture only sizes the frame

    @property
    def needs_braille(self) -> bool:
        return self is not GlyphMode.TEXTURE


@dataclass
class RenderConfig:
    """Configuration for the animation."""
    texture_path: str = DEFAULT_TEXTURE_PATH
    rotation_step: float = math.pi / 90
    frame_interval: float = 1.0 / 60
    glyph_mode: GlyphMode = GlyphMode.TEXTURE
    use_braille: bool = True

    def __post_init__(self):
        if self.frame_interval < 0:
            raise ValueError(
                f"frame_interval must be non-negative, got {self.frame_interval}")
        if not isinstance(self.glyph_mode, GlyphMode):
            self.glyph_mode = GlyphMode(self.glyph_mode)

    def effective_glyph_mode(self) -> GlyphMode:
        """Glyph mode to render with, given what the terminal can show."""
        if self.glyph_mode.needs_braille and not self.use_braille:
            logger.warning("Terminal does not look Braille-capable; "
                           "rendering '%s' as plain texture", self.glyph_mode.value)
            return GlyphMode.TEXTURE
        return self.glyph_mode

    @classmethod
    def detect_terminal(cls, **overrides) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        # Linux console font often lacks braille, so default off there
        overrides.setdefault('use_braille', supports_utf8 and not is_linux_console)
        return cls(**overrides)
