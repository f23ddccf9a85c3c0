"""Command line entry point: desktop window or headless run."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Sequence

import numpy as np

from . import __version__
from .core.diagnostics import center_of_mass, kinetic_energy, linear_momentum, total_mass
from .core.run import run
from .core.state import SimulationState
from .core.state.initial_conditions import Viewport
from .io.config import SimulationConfig, clamp_number_of_stars, load_config
from .logging_config import setup_logging


logger = logging.getLogger("three_body")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="three_body", description="Interactive 2D N-body gravity simulation."
    )
    parser.add_argument("--version", action="version", version=f"three_body v{__version__}")
    parser.add_argument("--stars", type=int, default=None, help="number of bodies")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--config", type=Path, default=None, help="JSON config file")
    parser.add_argument("--headless", action="store_true", help="run without a window")
    parser.add_argument("--steps", type=int, default=600, help="headless step count")
    parser.add_argument("--dt", type=float, default=1.0 / 60.0, help="headless step size (s)")
    parser.add_argument("--width", type=int, default=1280, help="headless spawn area width")
    parser.add_argument("--height", type=int, default=720, help="headless spawn area height")
    parser.add_argument("--sample-every", type=int, default=None)
    parser.add_argument("--out", type=Path, default=None, help="save samples to .npz")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--log-dir", type=Path, default=None)
    return parser


def run_headless(args: argparse.Namespace, config: SimulationConfig) -> int:
    n = clamp_number_of_stars(
        args.stars if args.stars is not None else config.default_number_of_stars, config
    )
    dt = min(max(args.dt, 0.0), config.max_dt)
    state = SimulationState.random(
        n,
        Viewport(args.width, args.height),
        rng=np.random.default_rng(args.seed),
        config=config,
    )
    sample_every = args.sample_every
    if args.out is not None and sample_every is None:
        sample_every = 1
    logger.info("headless run: stars=%d steps=%d dt=%.4f", n, args.steps, dt)
    result = run(state, dt, args.steps, sample_every=sample_every)
    final = result.final_state

    logger.info("sim time: %.4f s", dt * args.steps)
    logger.info("total mass: %.3f", total_mass(final))
    logger.info("center of mass: %s", center_of_mass(final))
    logger.info("momentum: %s", linear_momentum(final))
    logger.info("kinetic energy: %.6g", kinetic_energy(final))
    if not np.all(np.isfinite(final.positions)):
        logger.warning("non-finite positions after run")

    if args.out is not None and result.time is not None:
        np.savez_compressed(
            args.out,
            time=result.time,
            positions=result.positions,
            velocities=result.velocities,
            masses=final.masses,
            colors=final.colors,
        )
        logger.info("saved samples to %s", args.out)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level.upper(), args.log_dir)

    try:
        config = load_config(args.config) if args.config is not None else SimulationConfig()
    except (OSError, json.JSONDecodeError, ValueError) as exc:
        logger.error("could not load config %s: %s", args.config, exc)
        return 2

    try:
        if args.headless:
            return run_headless(args, config)
        from .app.main import run_app

        return run_app(config=config, number_of_stars=args.stars, seed=args.seed)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
