from __future__ import annotations

import math

from ..core.types import BoatConstants
from ..core.vector import Vec2
from .base import drag_velocity


class HullResistance:
    """
    Hydrodynamic resistance of the underwater hull.
    Solves for the velocity at which water drag balances a given force, per axis.
    Heeling lifts lateral area out of the water, so the abeam area scales with cos(heel).
    """

    def equilibrium_velocity(self, force: Vec2, heeling_angle: float, constants: BoatConstants) -> Vec2:
        abeam_area = constants.abeam_water_area * math.cos(math.radians(heeling_angle))

        vx = drag_velocity(force.x, constants.rho_water, constants.abeam_water_drag_coefficient, abeam_area)
        vy = drag_velocity(force.y, constants.rho_water, constants.ahead_water_drag_coefficient, constants.ahead_water_area)
        return Vec2(vx, vy)
