"""Logging setup shared by the application entry points."""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path


def setup_logging(level_name: str | None = None) -> None:
    """Configure logging to a file and stderr.

    An explicit ``level_name`` wins over ``TFIDFSEARCH_LOG_LEVEL``.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    name = (level_name or os.getenv("TFIDFSEARCH_LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, name, logging.INFO)
    log_path = Path(os.getenv("TFIDFSEARCH_LOG_FILE", "tfidfsearch.log"))
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    handlers: list[logging.Handler] = [
        logging.FileHandler(log_path, encoding="utf-8"),
        logging.StreamHandler(sys.stderr),
    ]
    root_logger.setLevel(level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)


__all__ = ["setup_logging"]
