"""Root logger configuration shared by the entrypoints."""

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "INFO"


def configure_logging(level=None) -> None:
    """Configure the root logger from `level` or `LOG_LEVEL` (default `INFO`).

    Unknown level names fall back to `INFO` and are reported with a warning.
    Existing handlers installed by a hosting platform are kept; only the level is
    adjusted in that case.
    """
    requested = (level or os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    resolved = requested if requested in LOG_LEVELS else DEFAULT_LOG_LEVEL
    root = logging.getLogger()

    if root.handlers:
        root.setLevel(resolved)
    else:
        logging.basicConfig(level=resolved, format=LOG_FORMAT)

    if resolved != requested:
        logging.getLogger(__name__).warning(
            "Unknown log level %r, using %s", requested, DEFAULT_LOG_LEVEL
        )
