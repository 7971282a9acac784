"""
Logging setup for whatever process drives the engine.

The library modules only ever call logging.getLogger(__name__); they never
configure handlers themselves. A trace driver calls configure_logging() once
at startup, the same way a service entry point would.
"""

import logging
from typing import Optional

from config.settings import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Install a root handler at `level` (defaults to settings.LOG_LEVEL)."""
    level_name = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name),
        format=LOG_FORMAT,
    )
