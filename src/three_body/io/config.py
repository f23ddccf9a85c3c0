"""Simulation configuration and JSON I/O."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)

ConfigDefinition = dict[str, Any]


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    gravitational_coefficient: float = 900.0
    default_number_of_stars: int = 3
    min_number_of_stars: int = 1
    max_number_of_stars: int = 1000
    mass_low: int = 1000
    mass_high: int = 4000
    mass_reference_count: int = 4
    mass_to_size: float = 50.0
    spawn_margin_fraction: float = 0.1
    min_softening_distance: float = 10.0
    contact_cutoff: float = 1.0
    max_dt: float = 0.1
    min_visible_size: float = 3.0
    zoom_step: float = 0.9
    pan_divisor: float = 20.0
    antialias_max_stars: int = 100
    background_color: str = "#000000"
    frame_interval_ms: int = 16

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.gravitational_coefficient < 0.0:
            raise ValueError("gravitational_coefficient must be >= 0")
        if self.min_number_of_stars < 1:
            raise ValueError("min_number_of_stars must be >= 1")
        if self.max_number_of_stars < self.min_number_of_stars:
            raise ValueError("max_number_of_stars must be >= min_number_of_stars")
        if not (
            self.min_number_of_stars
            <= self.default_number_of_stars
            <= self.max_number_of_stars
        ):
            raise ValueError("default_number_of_stars must lie within the star bounds")
        if self.mass_low <= 0 or self.mass_high < self.mass_low:
            raise ValueError("mass range must satisfy 0 < mass_low <= mass_high")
        if self.mass_reference_count <= 0:
            raise ValueError("mass_reference_count must be > 0")
        if self.mass_to_size <= 0.0:
            raise ValueError("mass_to_size must be > 0")
        if not 0.0 <= self.spawn_margin_fraction < 0.5:
            raise ValueError("spawn_margin_fraction must be in [0, 0.5)")
        if self.min_softening_distance < 0.0:
            raise ValueError("min_softening_distance must be >= 0")
        if self.contact_cutoff < 0.0:
            raise ValueError("contact_cutoff must be >= 0")
        if self.max_dt <= 0.0:
            raise ValueError("max_dt must be > 0")
        if self.min_visible_size < 0.0:
            raise ValueError("min_visible_size must be >= 0")
        if not 0.0 < self.zoom_step < 1.0:
            raise ValueError("zoom_step must be in (0, 1)")
        if self.pan_divisor <= 0.0:
            raise ValueError("pan_divisor must be > 0")
        if self.frame_interval_ms <= 0:
            raise ValueError("frame_interval_ms must be > 0")


def config_from_dict(data: ConfigDefinition) -> SimulationConfig:
    if not isinstance(data, dict):
        raise ValueError("config must be a JSON object")
    known = {f.name: f for f in fields(SimulationConfig)}
    unknown = sorted(set(data) - set(known))
    if unknown:
        raise ValueError(f"unknown config keys: {', '.join(unknown)}")
    values: dict[str, Any] = {}
    for key, raw in data.items():
        values[key] = _coerce(key, raw, type(known[key].default))
    return SimulationConfig(**values)


def config_to_dict(config: SimulationConfig) -> ConfigDefinition:
    return asdict(config)


def load_config(path: str | Path) -> SimulationConfig:
    config_path = Path(path)
    data = json.loads(config_path.read_text(encoding="utf-8"))
    config = config_from_dict(data)
    logger.info("loaded config from %s", config_path)
    return config


def save_config(path: str | Path, config: SimulationConfig) -> None:
    Path(path).write_text(
        json.dumps(config_to_dict(config), indent=2, sort_keys=True),
        encoding="utf-8",
    )


def clamp_number_of_stars(value: int, config: SimulationConfig) -> int:
    return max(config.min_number_of_stars, min(config.max_number_of_stars, int(value)))


def _coerce(key: str, raw: Any, kind: type) -> Any:
    if kind is str:
        if not isinstance(raw, str):
            raise ValueError(f"{key} must be a string")
        return raw
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ValueError(f"{key} must be a number")
    if kind is int:
        if float(raw) != int(raw):
            raise ValueError(f"{key} must be an integer")
        return int(raw)
    return float(raw)
