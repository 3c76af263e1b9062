from __future__ import annotations

WATER_DENSITY = 1_000.0  # kg/m^3
AIR_DENSITY = 1.204      # kg/m^3

KTS_IN_MPS = 1.943844    # knots per m/s

# Component tolerance for vector equality and near-axis angle handling
EPSILON = 1e-8
