from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...core.types import BoatConstants, BoatResponse
from ...core.validation import validate_constants
from ...core.vector import Vec2
from ...forces.hull import HullResistance
from ...forces.sail import SailForce, heel_attenuation, heeling_angle
from ...forces.windage import WindageForce


@dataclass
class SloopModel:
    """Single-sail sloop force balance.
    Responsibilities:
      - Combine heel-attenuated sail force with hull windage
      - Solve the per-axis velocity where aero force equals water drag
      - Average the solved velocity with the previous one to damp tick-to-tick oscillation
    Every call is a pure function of its arguments; instances hold only immutable collaborators.
    """
    constants: BoatConstants = BoatConstants()
    sail: Optional[SailForce] = None
    windage: Optional[WindageForce] = None
    hull: Optional[HullResistance] = None

    def __post_init__(self):
        validate_constants(self.constants)
        if self.sail is None:
            self.sail = SailForce()
        if self.windage is None:
            self.windage = WindageForce()
        if self.hull is None:
            self.hull = HullResistance()

    def response(self, wind: Vec2, boat_velocity: Vec2, sail_area: float) -> BoatResponse:
        c = self.constants
        apparent = wind.add(boat_velocity)

        f_sail = self.sail.compute(apparent, sail_area)
        heel = heeling_angle(f_sail, sail_area, c.heel_righting_force)
        f_sail = f_sail.scale(heel_attenuation(heel))

        f_air = self.windage.compute(apparent, heel, c)
        f_aero = f_sail.add(f_air)

        v_eq = self.hull.equilibrium_velocity(f_aero, heel, c)
        velocity = Vec2(
            (boat_velocity.x + v_eq.x) / 2.0,
            (boat_velocity.y + v_eq.y) / 2.0,
        )

        return BoatResponse(
            velocity=velocity,
            heeling_angle=heel,
            apparent_wind=apparent,
            sail_force=f_sail,
            windage_force=f_air,
            aero_force=f_aero,
            equilibrium_velocity=v_eq,
        )

    def calculate(self, wind: Vec2, boat_velocity: Vec2, sail_area: float) -> tuple[Vec2, float]:
        """Return (new boat velocity, heeling angle in degrees)."""
        r = self.response(wind, boat_velocity, sail_area)
        return r.velocity, r.heeling_angle
