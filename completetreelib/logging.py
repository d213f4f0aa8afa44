"""Project-wide logging utilities that honour `TreeConfig`."""

from __future__ import annotations

import logging
from typing import Optional

from . import config as ct_config


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger configured according to the runtime configuration."""

    logger_name = "completetreelib" if name is None else f"completetreelib.{name}"
    runtime = ct_config.runtime_config()
    logger = logging.getLogger(logger_name)
    logger.setLevel(runtime.log_level)
    return logger
