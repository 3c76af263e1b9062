from __future__ import annotations

import logging
from typing import Optional

from ..core.types import BoatInput, BoatOutput, UpdateResult, UpdateStatus
from ..models.sloop.model import SloopModel
from .catalog import MODELED_TYPES, BoatType, profile_for

logger = logging.getLogger(__name__)

_SLOOP = SloopModel(constants=profile_for(BoatType.MODELED_SLOOP.value).constants)


def boat_type_count() -> int:
    return len(MODELED_TYPES)


def update(boat_type: int, data: BoatInput, model: Optional[SloopModel] = None) -> UpdateResult:
    """Advance one boat by one tick.

    Unmodeled boat types return UNSUPPORTED_TYPE with no output; callers must
    check the status before reading the output. `model` overrides the built-in
    sloop, e.g. one built from a loaded constants file.
    """
    kind = BoatType.from_id(boat_type)
    if kind is BoatType.UNMODELED:
        logger.debug("Boat type %s is not modeled", boat_type)
        return UpdateResult(status=UpdateStatus.UNSUPPORTED_TYPE)

    sloop = model if model is not None else _SLOOP
    velocity, heel = sloop.calculate(data.wind_vector(), data.boat_vector(), data.sail_area)
    return UpdateResult(status=UpdateStatus.SUCCESS, output=BoatOutput.from_vector(velocity, heel))


def course_change_rate(boat_type: int) -> float:
    return profile_for(boat_type).course_change_rate


def wave_effect_resistance(boat_type: int) -> float:
    return profile_for(boat_type).wave_effect_resistance


def wind_gust_damage_threshold(boat_type: int) -> float:
    return profile_for(boat_type).wind_gust_damage_threshold
