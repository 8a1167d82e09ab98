"""Root logger configuration shared by the API server and the CLI."""

from __future__ import annotations

import logging
import sys

from streamscout.config import settings

_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger to write to stderr.

    Existing handlers are replaced so repeated calls (e.g. one per CLI
    invocation in tests) do not stack duplicate output.
    """
    level_name = (level or settings.log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root_logger.addHandler(handler)

    logging.getLogger(__name__).debug("Logging configured at %s", level_name)
