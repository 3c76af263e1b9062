from __future__ import annotations

import math
from typing import Sequence

from ..core.vector import Vec2

# Relative force (abeam, ahead) the sail provides in ideal trim, per 10 deg of apparent wind angle
SAIL_RESPONSE_TABLE: tuple[tuple[float, float], ...] = (
    (0.0, -20.0),    # 0 deg
    (40.0, -10.0),   # 10
    (180.0, 40.0),   # 20
    (200.0, 120.0),  # 30
    (180.0, 160.0),  # 40
    (140.0, 180.0),  # 50
    (120.0, 200.0),  # 60
    (100.0, 210.0),  # 70
    (80.0, 220.0),   # 80
    (70.0, 230.0),   # 90
    (60.0, 240.0),   # 100
    (55.0, 250.0),   # 110
    (50.0, 255.0),   # 120
    (45.0, 260.0),   # 130
    (40.0, 260.0),   # 140
    (40.0, 255.0),   # 150
    (45.0, 230.0),   # 160
    (50.0, 200.0),   # 170
    (0.0, 150.0),    # 180
    (0.0, 0.0),      # sentinel, never blended
)

BUCKET_DEG = 10.0
MAX_BUCKET = 18


def table_position(angle: float) -> tuple[int, float]:
    """Map an angle in [0, 180] to (bucket index, blend fraction)."""
    scaled = angle / BUCKET_DEG
    if not math.isfinite(scaled):
        return 0, 0.0
    index = math.floor(scaled)
    if index < 0:
        return 0, 0.0
    if index >= MAX_BUCKET:
        return MAX_BUCKET, 0.0
    return index, scaled - index


class SailForce:
    """
    Idealized-trim sail force from a coefficient table.
    Features:
      - Linear interpolation between 10 deg buckets from dead upwind to dead downwind
      - Port/starboard symmetry: angles past 180 deg reuse the table mirrored abeam
      - Quadratic scaling with apparent wind speed, linear with sail area
    """

    def __init__(self, table: Sequence[tuple[float, float]] = SAIL_RESPONSE_TABLE) -> None:
        if len(table) < MAX_BUCKET + 2:
            raise ValueError(f"Sail response table needs {MAX_BUCKET + 2} entries, got {len(table)}")
        self.table = tuple((float(x), float(y)) for x, y in table)

    def coefficients(self, angle: float) -> Vec2:
        """Unscaled (abeam, ahead) coefficients for an apparent wind angle in degrees."""
        angle = angle % 360.0
        negative_side = False
        if angle > 180.0:
            angle = 360.0 - angle
            negative_side = True

        i, frac = table_position(angle)
        x0, y0 = self.table[i]
        x1, y1 = self.table[i + 1]
        coeff = Vec2(x0 * (1.0 - frac) + x1 * frac, y0 * (1.0 - frac) + y1 * frac)

        if negative_side:
            coeff = coeff.mirror_abeam()
        return coeff

    def compute(self, apparent_wind: Vec2, sail_area: float) -> Vec2:
        mag = apparent_wind.magnitude
        return self.coefficients(apparent_wind.angle).scale(sail_area * mag * mag)


def heeling_angle(sail_force: Vec2, sail_area: float, righting_force: float) -> float:
    """Heel [deg] from the abeam sail force acting at a height of sqrt(sail_area).

    Balances F*cos(heel) against righting_force*sin(heel), a triangular-sail approximation.
    """
    moment = abs(sail_force.x) * math.sqrt(sail_area)
    return math.degrees(math.atan(moment / righting_force))


def heel_attenuation(heeling_angle_deg: float) -> float:
    """cos^2(heel): projected sail area loss times the tilt of the sideways force."""
    c = math.cos(math.radians(heeling_angle_deg))
    return c * c
