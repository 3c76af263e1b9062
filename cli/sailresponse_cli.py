from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Optional

import numpy as np

from sailresponse.boats.contract import (
    course_change_rate,
    update,
    wave_effect_resistance,
    wind_gust_damage_threshold,
)
from sailresponse.core.exceptions import ConfigError, SchemaError
from sailresponse.core.types import BoatInput
from sailresponse.io.boat import load as load_boat
from sailresponse.io.results import CsvRowWriter, JsonlRowWriter, MuxRowWriter, SummaryJsonWriter
from sailresponse.models.sloop.model import SloopModel
from sailresponse.sim.polar import PolarSweep, SweepConfig

logger = logging.getLogger("sailresponse.cli")


def _mkdir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def _model_from_args(args: argparse.Namespace) -> Optional[SloopModel]:
    if args.boat_config is None:
        return None
    return SloopModel(constants=load_boat(args.boat_config))


def cmd_step(args: argparse.Namespace) -> int:
    data = BoatInput(
        wind_angle=args.wind_angle,
        wind_speed=args.wind_speed,
        boat_speed_ahead=args.ahead,
        boat_speed_abeam=args.abeam,
        sail_area=args.sail_area,
    )
    res = update(args.boat_type, data, model=_model_from_args(args))
    payload = {
        "status": int(res.status),
        "output": asdict(res.output) if res.output else None,
        "course_change_rate": course_change_rate(args.boat_type),
        "wave_effect_resistance": wave_effect_resistance(args.boat_type),
        "wind_gust_damage_threshold": wind_gust_damage_threshold(args.boat_type),
    }
    print(json.dumps(payload, indent=2))
    if not res.ok:
        logger.error("Boat type %d is not modeled", args.boat_type)
        return 1
    return 0


def cmd_polar(args: argparse.Namespace) -> int:
    out_dir: Path = args.out_dir
    _mkdir(out_dir)

    cfg = SweepConfig(
        wind_speed=args.wind_speed,
        sail_area=args.sail_area,
        angles=tuple(float(a) for a in np.arange(args.angle_min, args.angle_max + 1e-9, args.angle_step)),
        boat_type=args.boat_type,
        max_ticks=args.max_ticks,
        tolerance=args.tolerance,
    )

    writer = MuxRowWriter(
        CsvRowWriter(out_dir / "polar.csv"),
        JsonlRowWriter(out_dir / "polar.jsonl"),
    )
    try:
        result = PolarSweep(model=_model_from_args(args)).run(cfg, writer=writer)
    finally:
        writer.close()

    summary = result.summary()
    SummaryJsonWriter(out_dir / "summary.json").write_summary(summary)
    logger.info("Polar sweep wrote %d points to %s", summary["points"], out_dir)

    if args.plot:
        try:
            from sailresponse.viz.polar import PolarPlotOptions, plot_polar
            png_out = args.png if args.png else (out_dir / "polar.png")
            title = f"Sloop polar, wind {args.wind_speed:g} m/s, sail {args.sail_area:g} m^2"
            plot_polar(result, png_out=png_out, options=PolarPlotOptions(title=title))
        except (ImportError, OSError, ValueError) as e:
            # Do not fail the run if plotting fails
            logger.warning("Polar plot failed: %s", e)
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="sailresponse", description="Sailboat wind response kernel")
    ap.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    ap.add_argument("--boat-config", type=Path, default=None, help="Optional boat constants JSON overriding the sloop defaults")
    ap.add_argument("--boat-type", type=int, default=0, help="Host boat type identifier (0 = modeled sloop)")
    sub = ap.add_subparsers(dest="command", required=True)

    step = sub.add_parser("step", help="Run one update and print the output record as JSON")
    step.add_argument("--wind-angle", type=float, required=True, help="Wind bearing [deg], clockwise from ahead")
    step.add_argument("--wind-speed", type=float, required=True, help="Wind speed [m/s]")
    step.add_argument("--ahead", type=float, default=0.0, help="Boat velocity ahead [m/s]")
    step.add_argument("--abeam", type=float, default=0.0, help="Boat velocity abeam [m/s]")
    step.add_argument("--sail-area", type=float, required=True, help="Sail area [m^2]")
    step.set_defaults(func=cmd_step)

    polar = sub.add_parser("polar", help="Sweep wind angles to steady state and write results")
    polar.add_argument("--wind-speed", type=float, required=True, help="True wind speed [m/s]")
    polar.add_argument("--sail-area", type=float, required=True, help="Sail area [m^2]")
    polar.add_argument("--angle-min", type=float, default=0.0, help="First wind angle [deg]")
    polar.add_argument("--angle-max", type=float, default=180.0, help="Last wind angle [deg]")
    polar.add_argument("--angle-step", type=float, default=5.0, help="Wind angle step [deg]")
    polar.add_argument("--max-ticks", type=int, default=500, help="Maximum ticks per angle")
    polar.add_argument("--tolerance", type=float, default=1e-6, help="Steady-state velocity tolerance [m/s]")
    polar.add_argument("--out-dir", type=Path, required=True, help="Output directory for sweep artifacts")
    polar.add_argument("--plot", action="store_true", help="Render a polar PNG after the sweep")
    polar.add_argument("--png", type=Path, default=None, help="Optional output PNG path (defaults to out-dir/polar.png)")
    polar.set_defaults(func=cmd_polar)

    return ap


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    if args.command == "polar" and args.angle_step <= 0:
        logger.error("--angle-step must be > 0")
        return 2
    try:
        return args.func(args)
    except (ConfigError, SchemaError) as e:
        logger.error("%s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
