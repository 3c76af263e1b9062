from __future__ import annotations

import math


def quadratic_drag(rho: float, v: float, cd: float, area: float) -> float:
    """Signed drag force 0.5*rho*v^2*Cd*A, carrying the sign of v. Units: N."""
    return 0.5 * rho * v * abs(v) * cd * area


def drag_velocity(f: float, rho: float, cd: float, area: float) -> float:
    """Invert quadratic_drag: the signed speed at which drag equals f. Units: m/s.

    rho, cd and area must be strictly positive.
    """
    return math.copysign(math.sqrt(2.0 * abs(f) / (rho * cd * area)), f)
