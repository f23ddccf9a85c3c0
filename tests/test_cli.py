from __future__ import annotations

from pathlib import Path

import numpy as np

from three_body.__main__ import main
from three_body.io.config import SimulationConfig, save_config


def test_headless_run_writes_samples(tmp_path: Path) -> None:
    out = tmp_path / "samples.npz"
    code = main(
        ["--headless", "--stars", "3", "--steps", "10", "--seed", "1", "--out", str(out)]
    )

    assert code == 0
    data = np.load(out)
    assert data["positions"].shape == (11, 3, 2)
    assert data["masses"].shape == (3,)


def test_headless_run_uses_config(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    save_config(path, SimulationConfig(default_number_of_stars=5))
    out = tmp_path / "samples.npz"

    code = main(["--headless", "--config", str(path), "--steps", "2", "--out", str(out)])

    assert code == 0
    assert np.load(out)["positions"].shape == (3, 5, 2)


def test_bad_config_exits_with_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    assert main(["--headless", "--config", str(path)]) == 2
    assert main(["--headless", "--config", str(tmp_path / "missing.json")]) == 2
