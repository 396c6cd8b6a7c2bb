#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from typing import Tuple

from .math_utils import Vec3


class Camera:
    """
    Fixed pinhole camera for the sphere renderer.

    Sits on the optical axis at z = -DISTANCE looking toward +z. The image
    plane spans x in [-2, 2) and y in (-1, 1]; rows are a quarter as many as
    columns to make up for terminal cells being about twice as tall as wide.
    """
    __slots__ = ()

    DISTANCE = 1.5
    ASPECT_DIVISOR = 4

    @property
    def origin(self) -> Vec3:
        return Vec3(0.0, 0.0, -self.DISTANCE)

    def frame_size(self, width: int) -> Tuple[int, int]:
        """(columns, rows) of a frame rendered over width columns."""
        return width, width // self.ASPECT_DIVISOR

    def ray_direction(self, x: int, y: int, width: int) -> Vec3:
        """Direction of the ray through pixel (x, y) of a frame width wide."""
        rows = width / self.ASPECT_DIVISOR
        return Vec3(
            x * 4.0 / width - 2.0,   # [0, w[ -> [-2, +2[
            y * -2.0 / rows + 1.0,   # [0, w/4[ -> [1, -1[
            1.0,
        )
