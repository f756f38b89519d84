"""Logging setup for the termcalc package logger."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_LOGGER: Optional[logging.Logger] = None


def configure_logging(verbose: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """Attach a RichHandler to the 'termcalc' logger.

    Idempotent: later calls only adjust the level.
    """
    global _LOGGER
    level = logging.DEBUG if verbose else logging.WARNING
    if _LOGGER is not None:
        _LOGGER.setLevel(level)
        return _LOGGER

    logger = logging.getLogger("termcalc")
    logger.setLevel(level)
    logger.propagate = False

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger.handlers.clear()
    logger.addHandler(handler)

    _LOGGER = logger
    return logger
