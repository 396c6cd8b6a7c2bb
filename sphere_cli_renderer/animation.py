#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/animation.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import sys
import time
from typing import Callable, Optional, TextIO

from .config import RenderConfig
from .renderer import Renderer

logger = logging.getLogger(__name__)


def cursor_up(rows: int) -> str:
    """Carriage return, then move the cursor up rows lines."""
    return f"\r\x1b[{rows}A"


class AnimationLoop:
    """
    Fixed-rate animation harness: render, present, advance, wait, rewind.

    Frames are strictly sequential. The only state carried between frames is
    the rotation angle and the frame counter.
    """

    def __init__(self, renderer: Renderer, config: Optional[RenderConfig] = None,
                 stream: Optional[TextIO] = None,
                 sleep: Callable[[float], None] = time.sleep):
        self.renderer = renderer
        self.config = config if config is not None else renderer.config
        self.stream = stream if stream is not None else sys.stdout
        self.sleep = sleep

        self.rotation = 0.0
        self.frame_count = 0

    def step(self):
        """Render and present one frame, leaving the cursor on its first row."""
        frame = self.renderer.render(self.rotation)

        self.stream.write(frame)
        self.stream.flush()

        self.rotation += self.config.rotation_step
        self.frame_count += 1
        self.sleep(self.config.frame_interval)

        self.stream.write(cursor_up(frame.count('\n')))
        self.stream.flush()

    # ────────────────────────────────────────────────────────────────────
    # Main loop
    # ────────────────────────────────────────────────────────────────────
    def run(self, max_frames: Optional[int] = None) -> int:
        """
        Animate until max_frames have been shown, or forever when it is None.

        Returns the number of frames presented. A failed write to the output
        stream (closed terminal, broken pipe) ends the loop.
        """
        logger.debug("Animating %dx%d frames, step %.4f rad, interval %.4f s",
                     self.renderer.width, self.renderer.height,
                     self.config.rotation_step, self.config.frame_interval)
        try:
            while max_frames is None or self.frame_count < max_frames:
                self.step()
        except OSError as e:
            logger.info("Output closed after %d frames: %s", self.frame_count, e)
        return self.frame_count
