"""
Logging setup (standard library `logging`).
"""

from __future__ import annotations

import logging

from . import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s]: %(message)s"

_HANDLER_NAME = "salary-api"


def configure_logging(level: str | None = None) -> None:
    """
    Install one stream handler on the root logger. Safe to call repeatedly.
    """
    root = logging.getLogger()
    resolved = logging.getLevelName((level or settings.log_level()).upper())
    root.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return None

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)
