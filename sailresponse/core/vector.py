from __future__ import annotations

import math
from dataclasses import dataclass

from .constants import EPSILON


def normalize_angle_mag(angle: float, mag: float) -> tuple[float, float]:
    """Fold a negative magnitude into a 180 deg flip, then wrap angle to [0, 360)."""
    if mag < 0.0:
        angle += 180.0
        mag = -mag

    if not math.isfinite(angle):
        return math.nan, mag

    angle = math.fmod(angle, 360.0) + 0.0
    if angle < 0.0:
        angle += 360.0
    # Tiny negative remainders round up to exactly 360
    if angle >= 360.0:
        angle = 0.0

    return angle, mag


@dataclass(frozen=True, eq=False)
class Vec2:
    """Boat-frame 2-D vector.

    x is the abeam component (positive to starboard), y the ahead component.
    Angles are degrees measured clockwise from the ahead axis, compass style.
    """
    x: float
    y: float

    @classmethod
    def from_polar(cls, angle: float, mag: float) -> "Vec2":
        angle, mag = normalize_angle_mag(float(angle), float(mag))
        rad = math.radians(angle)
        return cls(mag * math.sin(rad), mag * math.cos(rad))

    @classmethod
    def from_cartesian(cls, x: float, y: float) -> "Vec2":
        return cls(float(x), float(y))

    @property
    def angle(self) -> float:
        if abs(self.y) < EPSILON:
            # Along the abeam axis; atan(x/y) is unusable here
            if self.x > EPSILON:
                return 90.0
            if self.x < -EPSILON:
                return 270.0
            return 0.0

        a = math.degrees(math.atan(self.x / self.y))
        if self.y < 0.0:
            a += 180.0
        elif self.x < 0.0:
            a += 360.0
        # a can round up to exactly 360 for tiny negative x
        return a if a < 360.0 else a - 360.0

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def add(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def scale(self, k: float) -> "Vec2":
        return Vec2(self.x * k, self.y * k)

    def reverse(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def mirror_abeam(self) -> "Vec2":
        return Vec2(-self.x, self.y)

    def mirror_ahead(self) -> "Vec2":
        return Vec2(self.x, -self.y)

    def __add__(self, other: "Vec2") -> "Vec2":
        return self.add(other)

    def __neg__(self) -> "Vec2":
        return self.reverse()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return abs(self.x - other.x) < EPSILON and abs(self.y - other.y) < EPSILON

    # Approximate equality cannot be made consistent with hashing
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Vec2(x={self.x!r}, y={self.y!r}, "
            f"angle={self.angle!r}, magnitude={self.magnitude!r})"
        )


ZERO = Vec2(0.0, 0.0)
