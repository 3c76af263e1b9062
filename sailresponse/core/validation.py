from __future__ import annotations

import math
from dataclasses import fields

from .exceptions import ConfigError, NumericalInstability
from .types import BoatConstants, BoatInput

# Fields allowed to be zero; everything else ends up in a denominator or scales a force
_NON_NEGATIVE_FIELDS = ("abeam_air_area_extra_per_deg_heel",)


def validate_constants(constants: BoatConstants) -> None:
    for f in fields(constants):
        val = getattr(constants, f.name)
        if not isinstance(val, (int, float)) or not math.isfinite(val):
            raise ConfigError("Boat constant must be a finite number", field_name=f.name, field_value=val)
        if f.name in _NON_NEGATIVE_FIELDS:
            if val < 0:
                raise ConfigError("Boat constant must be >= 0", field_name=f.name, field_value=val)
        elif val <= 0:
            raise ConfigError("Boat constant must be > 0", field_name=f.name, field_value=val)


def check_finite_input(data: BoatInput, index: int | None = None) -> None:
    for name, val in (
        ("wind_angle", data.wind_angle),
        ("wind_speed", data.wind_speed),
        ("boat_speed_ahead", data.boat_speed_ahead),
        ("boat_speed_abeam", data.boat_speed_abeam),
        ("sail_area", data.sail_area),
    ):
        if not math.isfinite(val):
            raise NumericalInstability(f"Non-finite input {name}={val}", component=name, value=val, index=index)
