from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from .constants import AIR_DENSITY, WATER_DENSITY
from .vector import Vec2


@dataclass(frozen=True)
class BoatInput:
    """Per-tick input record exchanged with the fleet host."""
    wind_angle: float        # [deg], clockwise from ahead
    wind_speed: float        # [m/s]
    boat_speed_ahead: float  # [m/s]
    boat_speed_abeam: float  # [m/s], positive to starboard
    sail_area: float         # [m^2]

    def wind_vector(self) -> Vec2:
        return Vec2.from_polar(self.wind_angle, self.wind_speed)

    def boat_vector(self) -> Vec2:
        return Vec2.from_cartesian(self.boat_speed_abeam, self.boat_speed_ahead)


@dataclass(frozen=True)
class BoatOutput:
    """Per-tick output record; heel is a magnitude with no side information."""
    boat_speed_ahead: float  # [m/s]
    boat_speed_abeam: float  # [m/s]
    heeling_angle: float     # [deg]

    @classmethod
    def from_vector(cls, velocity: Vec2, heeling_angle: float) -> "BoatOutput":
        return cls(
            boat_speed_ahead=velocity.y,
            boat_speed_abeam=velocity.x,
            heeling_angle=heeling_angle,
        )


class UpdateStatus(IntEnum):
    SUCCESS = 0
    UNSUPPORTED_TYPE = -1


@dataclass(frozen=True)
class UpdateResult:
    """Outcome of a boat update; output is None unless the status is SUCCESS."""
    status: UpdateStatus
    output: Optional[BoatOutput] = None

    @property
    def ok(self) -> bool:
        return self.status == UpdateStatus.SUCCESS


@dataclass(frozen=True)
class BoatResponse:
    """Solver result with the intermediate force components kept for diagnostics."""
    velocity: Vec2            # smoothed boat velocity [m/s]
    heeling_angle: float      # [deg]
    apparent_wind: Vec2       # [m/s]
    sail_force: Vec2          # heel-attenuated [N]
    windage_force: Vec2       # [N]
    aero_force: Vec2          # sail + windage [N]
    equilibrium_velocity: Vec2  # balance velocity before smoothing [m/s]


@dataclass(frozen=True)
class BoatConstants:
    """Hull and fluid constants for one boat type, SI units."""
    ahead_water_area: float = 2.5           # [m^2]
    ahead_water_drag_coefficient: float = 0.3
    abeam_water_area: float = 7.0           # [m^2]
    abeam_water_drag_coefficient: float = 1.25
    ahead_air_area: float = 3.5             # [m^2]
    ahead_air_drag_coefficient: float = 0.5
    abeam_air_area: float = 9.0             # [m^2]
    abeam_air_drag_coefficient: float = 0.7
    abeam_air_area_extra_per_deg_heel: float = 0.12  # [m^2/deg]
    heel_righting_force: float = 10_000.0
    rho_air: float = AIR_DENSITY            # [kg/m^3]
    rho_water: float = WATER_DENSITY        # [kg/m^3]


@dataclass(frozen=True)
class BoatProfile:
    """Scalar per-type responses queried by the host alongside the solver."""
    course_change_rate: float          # [deg/s]
    wave_effect_resistance: float
    wind_gust_damage_threshold: float  # [m/s]
    constants: Optional[BoatConstants] = None
