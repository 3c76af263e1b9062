from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, field
from typing import Any, Mapping, Optional, Sequence

import numpy as np

from ..boats.contract import update
from ..core.exceptions import ConfigError
from ..core.types import BoatInput, UpdateStatus
from ..core.validation import check_finite_input
from ..core.vector import Vec2
from ..io.results import RowWriter
from ..models.sloop.model import SloopModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SweepConfig:
    """Steady-state sweep over true wind angles at fixed wind speed and sail area."""
    wind_speed: float                      # [m/s]
    sail_area: float                       # [m^2]
    angles: Sequence[float] = field(default_factory=lambda: tuple(np.arange(0.0, 181.0, 5.0)))  # [deg]
    boat_type: int = 0
    max_ticks: int = 500
    tolerance: float = 1e-6                # [m/s], per-tick velocity change


@dataclass(frozen=True)
class PolarPoint:
    wind_angle: float
    wind_speed: float
    sail_area: float
    boat_speed: float
    boat_speed_ahead: float
    boat_speed_abeam: float
    vmg: float               # velocity made good toward the wind [m/s]
    heeling_angle: float
    ticks: int
    converged: bool

    def record(self) -> Mapping[str, Any]:
        return asdict(self)


@dataclass
class PolarResult:
    config: SweepConfig
    points: list[PolarPoint]

    def as_arrays(self) -> dict[str, np.ndarray]:
        cols = ("wind_angle", "boat_speed", "boat_speed_ahead", "boat_speed_abeam", "vmg", "heeling_angle")
        return {c: np.asarray([getattr(p, c) for p in self.points], dtype=float) for c in cols}

    def summary(self) -> Mapping[str, Any]:
        arrays = self.as_arrays()
        best = int(np.argmax(arrays["vmg"])) if self.points else None
        return {
            "wind_speed": self.config.wind_speed,
            "sail_area": self.config.sail_area,
            "boat_type": self.config.boat_type,
            "points": len(self.points),
            "converged": sum(1 for p in self.points if p.converged),
            "max_boat_speed": float(np.max(arrays["boat_speed"])) if self.points else None,
            "max_heeling_angle": float(np.max(arrays["heeling_angle"])) if self.points else None,
            "best_vmg_angle": self.points[best].wind_angle if best is not None else None,
            "best_vmg": self.points[best].vmg if best is not None else None,
        }


def validate_sweep_config(cfg: SweepConfig) -> None:
    if not math.isfinite(cfg.wind_speed) or cfg.wind_speed < 0:
        raise ConfigError("wind_speed must be finite and >= 0", field_name="wind_speed", field_value=cfg.wind_speed)
    if not math.isfinite(cfg.sail_area) or cfg.sail_area < 0:
        raise ConfigError("sail_area must be finite and >= 0", field_name="sail_area", field_value=cfg.sail_area)
    if cfg.max_ticks <= 0:
        raise ConfigError("max_ticks must be a positive integer", field_name="max_ticks", field_value=cfg.max_ticks)
    if not cfg.tolerance > 0:
        raise ConfigError("tolerance must be > 0", field_name="tolerance", field_value=cfg.tolerance)
    if len(cfg.angles) == 0:
        raise ConfigError("angles must not be empty", field_name="angles")


class PolarSweep:
    """Repeats the host's per-tick update from rest until boat velocity settles."""

    def __init__(self, model: Optional[SloopModel] = None) -> None:
        self.model = model

    def settle(self, cfg: SweepConfig, wind_angle: float) -> PolarPoint:
        ahead = abeam = 0.0
        heel = 0.0
        converged = False
        ticks = 0

        while ticks < cfg.max_ticks:
            data = BoatInput(
                wind_angle=wind_angle,
                wind_speed=cfg.wind_speed,
                boat_speed_ahead=ahead,
                boat_speed_abeam=abeam,
                sail_area=cfg.sail_area,
            )
            check_finite_input(data)
            res = update(cfg.boat_type, data, model=self.model)
            if res.status != UpdateStatus.SUCCESS:
                raise ConfigError("Boat type is not modeled", field_name="boat_type", field_value=cfg.boat_type)

            out = res.output
            ticks += 1
            delta = math.hypot(out.boat_speed_ahead - ahead, out.boat_speed_abeam - abeam)
            ahead, abeam, heel = out.boat_speed_ahead, out.boat_speed_abeam, out.heeling_angle
            if delta < cfg.tolerance:
                converged = True
                break

        if not converged:
            logger.warning(
                "No steady state at wind angle %.1f deg after %d ticks", wind_angle, cfg.max_ticks
            )

        velocity = Vec2(abeam, ahead)
        # The wind vector points toward the wind source
        wind_dir = Vec2.from_polar(wind_angle, 1.0)
        vmg = velocity.x * wind_dir.x + velocity.y * wind_dir.y

        return PolarPoint(
            wind_angle=float(wind_angle),
            wind_speed=cfg.wind_speed,
            sail_area=cfg.sail_area,
            boat_speed=velocity.magnitude,
            boat_speed_ahead=ahead,
            boat_speed_abeam=abeam,
            vmg=vmg,
            heeling_angle=heel,
            ticks=ticks,
            converged=converged,
        )

    def run(self, cfg: SweepConfig, writer: Optional[RowWriter] = None) -> PolarResult:
        validate_sweep_config(cfg)
        logger.debug(
            "Polar sweep: %d angles, wind %.2f m/s, sail %.1f m^2",
            len(cfg.angles), cfg.wind_speed, cfg.sail_area,
        )

        points = []
        for angle in cfg.angles:
            p = self.settle(cfg, float(angle))
            points.append(p)
            if writer:
                writer.write_row(p.record())

        return PolarResult(config=cfg, points=points)
