from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "CRAFTSERVER_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_log_level(raw: Optional[str] = None) -> int:
    """Resolve a level name from ``raw`` or the environment, defaulting to INFO."""
    if raw is None:
        raw = os.getenv(LOG_LEVEL_ENV)
    level = getattr(logging, (raw or "INFO").strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    logging.basicConfig(level=resolve_log_level(level), format=LOG_FORMAT)
    return logging.getLogger("craftserver")
