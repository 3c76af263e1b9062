from __future__ import annotations

from ..core.types import BoatConstants
from ..core.vector import Vec2
from .base import quadratic_drag


class WindageForce:
    """
    Aerodynamic drag on hull and superstructure.
    Features:
      - Quadratic drag per boat axis, opposing the apparent wind
      - Abeam exposed area grows linearly with heel as freeboard tilts into the wind
    """

    def compute(self, apparent_wind: Vec2, heeling_angle: float, constants: BoatConstants) -> Vec2:
        # Force acts along the relative air motion, opposite the wind's from-vector
        w = apparent_wind.reverse()
        abeam_area = (
            constants.abeam_air_area
            + constants.abeam_air_area_extra_per_deg_heel * heeling_angle
        )

        X = quadratic_drag(constants.rho_air, w.x, constants.abeam_air_drag_coefficient, abeam_area)
        Y = quadratic_drag(constants.rho_air, w.y, constants.ahead_air_drag_coefficient, constants.ahead_air_area)
        return Vec2(X, Y)
