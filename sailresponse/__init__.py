from .core.types import (
    BoatInput,
    BoatOutput,
    BoatResponse,
    BoatConstants,
    BoatProfile,
    UpdateResult,
    UpdateStatus,
)
from .core.vector import Vec2
from .core.exceptions import (
    SchemaError,
    ConfigError,
    NumericalInstability,
)
from .boats.catalog import SLOOP_CONSTANTS, BoatType
from .boats.contract import (
    boat_type_count,
    update,
    course_change_rate,
    wave_effect_resistance,
    wind_gust_damage_threshold,
)
from .models.sloop.model import SloopModel

__version__ = "0.1.0"
