"""Logging setup shared by the API and scripts."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging() -> None:
    level_name = os.getenv("UNMASK_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT)


logger = logging.getLogger("unmask")


def debug_enabled() -> bool:
    return os.getenv("UNMASK_DEBUG", "").lower() in {"1", "true", "yes"}
