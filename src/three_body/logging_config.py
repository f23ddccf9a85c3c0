"""Logging configuration for the application.

Call ``setup_logging()`` once, early, from an entry point::

    from three_body.logging_config import setup_logging
    setup_logging()

Library modules only create module loggers with ``logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path


def setup_logging(
    default_level: int | str = logging.INFO, log_dir: str | Path | None = None
) -> None:
    """Configure console logging and, when ``log_dir`` is given, a rotating file.

    Parameters
    ----------
    default_level : int or str, optional
        Level of the root logger. Default is ``logging.INFO``.
    log_dir : str or Path, optional
        Directory for ``three_body.log``. Created if missing. No file logging
        when omitted.
    """
    handlers: dict[str, dict[str, object]] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": default_level,
            "formatter": "standard",
            "stream": "ext://sys.stderr",
        },
    }
    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "detailed",
            "filename": str(log_path / "three_body.log"),
            "maxBytes": 10485760,  # 10 MB
            "backupCount": 5,
            "encoding": "utf8",
        }

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "loggers": {
            "": {
                "handlers": list(handlers),
                "level": default_level,
            },
            "vispy": {"level": "WARNING"},
        },
    }
    logging.config.dictConfig(config)
    logging.getLogger(__name__).debug("logging configuration applied")
