from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Mapping

from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from ..boats.catalog import SLOOP_CONSTANTS
from ..core.exceptions import ConfigError, SchemaError
from ..core.types import BoatConstants
from ..core.validation import validate_constants

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_PATH = Path(__file__).resolve().parent.parent / "schemas" / "boat.schema.json"


def _load_json(path: Path) -> Mapping[str, Any]:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigError(
            f"Failed to read JSON {path}: {e}",
            config_path=path,
        ) from e


def _load_schema(schema_path: Path) -> Mapping[str, Any]:
    try:
        return json.loads(schema_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise SchemaError(
            f"Failed to read schema {schema_path}: {e}",
            schema_path=schema_path,
        ) from e


def _validate(
    data: Mapping[str, Any], schema: Mapping[str, Any], schema_name: str
) -> None:
    error = best_match(Draft202012Validator(schema).iter_errors(data))
    if error is not None:
        where = "/".join(str(p) for p in error.path) or "<root>"
        raise SchemaError(
            f"{schema_name} validation failed: {error.message}",
            schema_name=schema_name,
            location=where,
            validation_error=error,
        )


def _drag(axes: Mapping[str, Any], axis: str) -> Mapping[str, Any]:
    return (axes or {}).get(axis, {}) or {}


def from_mapping(data: Mapping[str, Any], base: BoatConstants = SLOOP_CONSTANTS) -> BoatConstants:
    """Overlay an already-validated constants document on `base`."""
    updates: dict[str, float] = {}

    env = data.get("environment", {}) or {}
    for key in ("rho_air", "rho_water"):
        if key in env:
            updates[key] = float(env[key])

    hull = data.get("hull", {}) or {}
    for medium in ("water", "air"):
        axes = hull.get(medium, {})
        for axis in ("ahead", "abeam"):
            drag = _drag(axes, axis)
            if "area" in drag:
                updates[f"{axis}_{medium}_area"] = float(drag["area"])
            if "drag_coefficient" in drag:
                updates[f"{axis}_{medium}_drag_coefficient"] = float(drag["drag_coefficient"])
    if "abeam_air_area_extra_per_deg_heel" in hull:
        updates["abeam_air_area_extra_per_deg_heel"] = float(hull["abeam_air_area_extra_per_deg_heel"])

    heel = data.get("heel", {}) or {}
    if "righting_force" in heel:
        updates["heel_righting_force"] = float(heel["righting_force"])

    constants = replace(base, **updates)
    validate_constants(constants)
    return constants


def load(
    path: str | Path, schema_path: str | Path = DEFAULT_SCHEMA_PATH
) -> BoatConstants:
    """Load a boat constants JSON, validate it, and merge it over the sloop defaults."""
    path = Path(path)
    schema_path = Path(schema_path)

    data = _load_json(path)
    schema = _load_schema(schema_path)
    _validate(data, schema, "Boat")

    try:
        constants = from_mapping(data)
    except ConfigError as e:
        raise e.with_path(path) from e

    logger.info("Loaded boat constants %r from %s", data.get("name", path.stem), path)
    return constants
