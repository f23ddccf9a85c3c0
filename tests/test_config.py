from __future__ import annotations

import json
from pathlib import Path

import pytest

from three_body.io.config import (
    SimulationConfig,
    clamp_number_of_stars,
    config_from_dict,
    config_to_dict,
    load_config,
    save_config,
)


def test_defaults() -> None:
    config = SimulationConfig()
    assert config.gravitational_coefficient == 900.0
    assert config.default_number_of_stars == 3
    assert config.max_dt == 0.1
    assert (config.min_number_of_stars, config.max_number_of_stars) == (1, 1000)


def test_save_and_load(tmp_path: Path) -> None:
    config = SimulationConfig(gravitational_coefficient=450.0, default_number_of_stars=12)
    path = tmp_path / "config.json"
    save_config(path, config)

    assert json.loads(path.read_text(encoding="utf-8"))["default_number_of_stars"] == 12
    assert load_config(path) == config


def test_partial_dict_keeps_defaults() -> None:
    config = config_from_dict({"max_dt": 0.05, "mass_low": 500})
    assert config.max_dt == 0.05
    assert config.mass_low == 500
    assert isinstance(config.mass_low, int)
    assert config.zoom_step == 0.9
    assert config_to_dict(config)["max_dt"] == 0.05


@pytest.mark.parametrize(
    "data",
    [
        {"unknown_key": 1},
        {"max_dt": 0.0},
        {"default_number_of_stars": 2.5},
        {"default_number_of_stars": 5000},
        {"gravitational_coefficient": "strong"},
        {"background_color": 0},
        {"mass_low": True},
        {"mass_low": 5000},
        {"zoom_step": 1.5},
    ],
)
def test_invalid_values_rejected(data: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        config_from_dict(data)


def test_non_object_rejected() -> None:
    with pytest.raises(ValueError):
        config_from_dict([1, 2, 3])  # type: ignore[arg-type]


def test_clamp_number_of_stars() -> None:
    config = SimulationConfig()
    assert clamp_number_of_stars(0, config) == 1
    assert clamp_number_of_stars(-7, config) == 1
    assert clamp_number_of_stars(42, config) == 42
    assert clamp_number_of_stars(5000, config) == 1000


def test_example_config_loads() -> None:
    path = Path(__file__).resolve().parents[1] / "examples" / "configs" / "crowded.json"
    config = load_config(path)
    assert config.default_number_of_stars == 40
    assert config.max_dt == 0.05
