from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from ..boats.contract import update
from ..core.types import BoatInput, UpdateStatus
from ..core.validation import check_finite_input
from ..models.sloop.model import SloopModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FleetStep:
    """Column-wise results of one tick across a fleet; failed rows hold NaN."""
    status: np.ndarray
    boat_speed_ahead: np.ndarray
    boat_speed_abeam: np.ndarray
    heeling_angle: np.ndarray

    @property
    def ok(self) -> np.ndarray:
        return self.status == int(UpdateStatus.SUCCESS)

    def __len__(self) -> int:
        return int(self.status.size)


def inputs_from_arrays(
    wind_angle: "np.ndarray | Sequence[float] | float",
    wind_speed: "np.ndarray | Sequence[float] | float",
    boat_speed_ahead: "np.ndarray | Sequence[float] | float",
    boat_speed_abeam: "np.ndarray | Sequence[float] | float",
    sail_area: "np.ndarray | Sequence[float] | float",
) -> list[BoatInput]:
    """Build input records from broadcastable columns."""
    cols = np.broadcast_arrays(
        np.asarray(wind_angle, dtype=float),
        np.asarray(wind_speed, dtype=float),
        np.asarray(boat_speed_ahead, dtype=float),
        np.asarray(boat_speed_abeam, dtype=float),
        np.asarray(sail_area, dtype=float),
    )
    flat = [np.ravel(c) for c in cols]
    return [
        BoatInput(
            wind_angle=float(a),
            wind_speed=float(s),
            boat_speed_ahead=float(u),
            boat_speed_abeam=float(v),
            sail_area=float(area),
        )
        for a, s, u, v, area in zip(*flat)
    ]


def step_fleet(
    boat_types: Sequence[int],
    inputs: Sequence[BoatInput],
    model: Optional[SloopModel] = None,
) -> FleetStep:
    """Run one update per boat. Boats are independent, so order does not matter."""
    if len(boat_types) != len(inputs):
        raise ValueError(f"boat_types and inputs differ in length ({len(boat_types)} != {len(inputs)})")

    n = len(inputs)
    status = np.empty(n, dtype=np.int32)
    ahead = np.full(n, np.nan)
    abeam = np.full(n, np.nan)
    heel = np.full(n, np.nan)

    for i, (bt, data) in enumerate(zip(boat_types, inputs)):
        check_finite_input(data, index=i)
        res = update(int(bt), data, model=model)
        status[i] = int(res.status)
        if res.ok:
            ahead[i] = res.output.boat_speed_ahead
            abeam[i] = res.output.boat_speed_abeam
            heel[i] = res.output.heeling_angle

    failed = int(np.count_nonzero(status != int(UpdateStatus.SUCCESS)))
    if failed:
        logger.debug("Fleet step: %d of %d boats have unmodeled types", failed, n)

    return FleetStep(status=status, boat_speed_ahead=ahead, boat_speed_abeam=abeam, heeling_angle=heel)
