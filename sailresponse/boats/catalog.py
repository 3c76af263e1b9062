from __future__ import annotations

import numbers
from enum import Enum

from ..core.constants import KTS_IN_MPS
from ..core.types import BoatConstants, BoatProfile

SLOOP_CONSTANTS = BoatConstants()


class BoatType(Enum):
    MODELED_SLOOP = 0
    UNMODELED = None

    @classmethod
    def from_id(cls, boat_type: int) -> "BoatType":
        """Map a host boat-type identifier; anything unknown is UNMODELED."""
        if isinstance(boat_type, bool) or not isinstance(boat_type, numbers.Integral):
            return cls.UNMODELED
        if boat_type == cls.MODELED_SLOOP.value:
            return cls.MODELED_SLOOP
        return cls.UNMODELED


PROFILES: dict[BoatType, BoatProfile] = {
    BoatType.MODELED_SLOOP: BoatProfile(
        course_change_rate=5.0,
        wave_effect_resistance=75.0,
        wind_gust_damage_threshold=45.0 / KTS_IN_MPS,
        constants=SLOOP_CONSTANTS,
    ),
    # No turning ability; small nonzero values keep host-side divisions defined
    BoatType.UNMODELED: BoatProfile(
        course_change_rate=0.0,
        wave_effect_resistance=0.001,
        wind_gust_damage_threshold=0.001,
    ),
}

MODELED_TYPES = tuple(t for t in BoatType if t is not BoatType.UNMODELED)


def profile_for(boat_type: int) -> BoatProfile:
    return PROFILES[BoatType.from_id(boat_type)]
