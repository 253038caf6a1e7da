"""Logging configuration for micrometa."""

import logging
import sys

from micrometa.config import settings

# Single app logger that can be imported throughout the package
logger = logging.getLogger("micrometa")

# Library records (mf2py, httpx) keep timestamps; CLI messages stay short
LIBRARY_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
APP_LOG_FORMAT = "%(name)s: %(levelname)s: %(message)s"


def setup_logging(debug: bool | None = None) -> None:
    """Configure application logging.

    Everything goes to stderr so that JSON written to stdout by the CLI stays
    clean. Third-party loggers only report warnings; the micrometa logger
    gets its own handler and logs at DEBUG or INFO.

    Args:
        debug: Force debug logging on or off; defaults to MICROMETA_DEBUG.

    """
    if debug is None:
        debug = settings.micrometa_debug

    # Clear existing handlers to prevent duplicate log entries on reload
    logging.root.handlers = []
    logger.handlers = []

    logging.basicConfig(level=logging.WARNING, format=LIBRARY_LOG_FORMAT, stream=sys.stderr)

    app_handler = logging.StreamHandler(sys.stderr)
    app_handler.setFormatter(logging.Formatter(APP_LOG_FORMAT))
    logger.addHandler(app_handler)
    logger.propagate = False
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    logger.debug("micrometa logging initialized at %s level", "DEBUG" if debug else "INFO")
