"""Configuration I/O."""

from .config import (  # noqa: F401
    SimulationConfig,
    clamp_number_of_stars,
    config_from_dict,
    config_to_dict,
    load_config,
    save_config,
)
