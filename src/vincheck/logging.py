"""Logging configuration for vincheck."""

import logging
from pathlib import Path

import platformdirs


def setup_logging() -> None:
    """Configure logging with file handler for debug output.

    Logs go to the platform user log directory (e.g. ~/.local/state/vincheck/log).
    Console output is handled separately by Rich; this is the debug file log only.
    """
    logger = logging.getLogger("vincheck")
    logger.setLevel(logging.DEBUG)

    # Avoid duplicate handlers on repeated calls
    if logger.handlers:
        return

    try:
        log_dir = Path(platformdirs.user_log_dir("vincheck", ensure_exists=True))
        fh = logging.FileHandler(log_dir / "debug.log", encoding="utf-8")
    except OSError:
        # Read-only home directories (CI, sandboxes) get no file log.
        logger.addHandler(logging.NullHandler())
        return
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(fh)

    logger.debug("Logging initialized → %s", fh.baseFilename)
