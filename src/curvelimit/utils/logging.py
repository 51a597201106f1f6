"""Logging setup for the command line and example scripts."""

from __future__ import annotations

import logging
from typing import TextIO

from curvelimit.utils.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: int | str = logging.INFO, *, stream: TextIO | None = None) -> None:
    """Install a root handler and silence matplotlib below warnings.

    Args:
        level: Numeric level or level name such as ``"DEBUG"``.
        stream: Handler stream. Defaults to stderr.

    Raises:
        curvelimit.utils.exceptions.ConfigurationError: If ``level`` is not a
            known level name.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            msg = f"unknown log level: {level!r}"
            raise ConfigurationError(msg)
        level = resolved

    logging.basicConfig(level=level, format=LOG_FORMAT, stream=stream)
    logging.getLogger("matplotlib").setLevel(max(level, logging.WARNING))
