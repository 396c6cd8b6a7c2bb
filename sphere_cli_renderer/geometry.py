#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/geometry.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from dataclasses import dataclass
from typing import Optional

from .math_utils import Vec3


@dataclass(frozen=True)
class Coords:
    """Latitude/longitude pair on the unit sphere, in radians."""
    lat: float
    long: float

    def __str__(self):
        return f"({self.lat}, {self.long})"


def intersect(origin: Vec3, direction: Vec3) -> Optional[Vec3]:
    """
    Nearest intersection of the line origin + t * direction with the unit
    sphere centred at the world origin, or None when the line misses.

    Only origin.z takes part in the algebra; origin.x and origin.y are
    taken as 0, which holds for every ray the fixed camera emits:

        (t*a)^2 + (t*b)^2 + (z0 + t*c)^2 = 1
        t^2 (a^2 + b^2 + c^2) + (2 * z0 * c) * t + (z0^2 - 1) = 0

    The smaller root is the entry point seen from the camera.
    """
    z0 = origin.z
    a, b, c = direction.x, direction.y, direction.z

    qa = a * a + b * b + c * c
    qb = 2.0 * z0 * c
    qc = z0 * z0 - 1.0

    discriminant = qb * qb - 4.0 * qa * qc
    if discriminant < 0.0:
        return None

    t = (-qb - math.sqrt(discriminant)) / (2.0 * qa)
    return Vec3(0.0, 0.0, z0).add(direction.scale(t))


def _angle(u: float, v: float, dot_product: float) -> float:
    # Reference direction has unit length; only (u, v) normalizes.
    magnitude = math.sqrt(u * u + v * v)
    if magnitude == 0.0:
        return math.nan
    return math.acos(max(-1.0, min(1.0, dot_product / magnitude)))


def to_geometric(p: Vec3) -> Coords:
    """
    Convert a point on the unit sphere to (lat, long).

    lat is the angle between (-1, 0) and (y, z) on the yz plane, long the
    angle between (-1, 0) and (x, z) on the xz plane. Both lie in [0, pi].
    Points with a zero projection yield NaN.
    """
    return Coords(
        lat=_angle(p.y, p.z, -p.y),
        long=_angle(p.x, p.z, -p.x),
    )
