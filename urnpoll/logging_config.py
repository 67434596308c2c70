"""
urnpoll.logging_config
======================

Opt-in logging setup for urnpoll.

Library modules only create loggers (``logging.getLogger(__name__)``); they
never attach handlers. An application that wants to see them calls
`setup_logging()`, which applies a TOML file written in the
``logging.config.dictConfig`` schema:

- the file named by the ``URNPOLL_LOG_CFG`` environment variable, or
- ``logging_config.toml`` at the project root.

When neither exists, the ``urnpoll`` logger gets a single `NullHandler` so
nothing is printed and no "no handler" warning is raised.
"""

from __future__ import annotations
import logging
import logging.config
import os
from pathlib import Path

import tomli

ENV_VAR = "URNPOLL_LOG_CFG"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "logging_config.toml"


def _silence(logger_name: str = "urnpoll") -> None:
    """Replace the package logger's handlers with one NullHandler."""
    package_logger = logging.getLogger(logger_name)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.addHandler(logging.NullHandler())


def setup_logging() -> None:
    """Apply the TOML logging configuration, or silence the package logger.

    Raises:
        FileNotFoundError: the configured path exists but is not a file
    """
    cfg_path = Path(os.getenv(ENV_VAR) or DEFAULT_CONFIG_PATH)

    if not cfg_path.exists():
        _silence()
        return
    if not cfg_path.is_file():
        raise FileNotFoundError(f"Logging config not found at {cfg_path}")

    with cfg_path.open("rb") as f:
        logging.config.dictConfig(tomli.load(f))
