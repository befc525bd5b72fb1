# chart_core/logging_setup.py
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Sequence

LIBRARY_LOGGERS = ("chart_core", "chart_qt")

# Set on handlers added by setup_logging so a rerun only replaces its own
_OWNED_ATTR = "_chart_a11y_owned"


def install_null_handler(name: str) -> None:
    """
    Keep a package logger quiet until the embedding application configures logging.

    Called from the package ``__init__`` modules. Adding it twice is harmless.
    """
    logger = logging.getLogger(name)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())


def _owned_handlers(logger: logging.Logger) -> List[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _OWNED_ATTR, False)]


def setup_logging(
    debug: bool = False,
    log_dir: Optional[Path] = None,
    console: bool = True,
    loggers: Sequence[str] = LIBRARY_LOGGERS,
) -> Path:
    """
    Route the accessibility layer's log records to a file (and optionally stderr).

    - Logs to ~/.chart_a11y/a11y.log (rotating, max ~1 MB, 3 backups)
    - Only the chart_core / chart_qt package loggers are touched; the root
      logger and handlers installed by the host application are left alone
    - Records still propagate to the host's own handlers

    Returns the path of the log file.
    """
    log_dir = log_dir or Path.home() / ".chart_a11y"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "a11y.log"

    level = logging.DEBUG if debug else logging.INFO

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=1_000_000,  # ~1 MB
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s - %(message)s")
    )
    file_handler.setLevel(level)
    setattr(file_handler, _OWNED_ATTR, True)

    new_handlers: List[logging.Handler] = [file_handler]
    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            logging.Formatter("[%(levelname)s] %(name)s - %(message)s")
        )
        console_handler.setLevel(level)
        setattr(console_handler, _OWNED_ATTR, True)
        new_handlers.append(console_handler)

    # Replace handlers from an earlier call (dev/REPL reruns)
    stale = set()
    for name in loggers:
        logger = logging.getLogger(name)
        for handler in _owned_handlers(logger):
            logger.removeHandler(handler)
            stale.add(handler)
    for handler in stale:
        handler.close()

    for name in loggers:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in new_handlers:
            logger.addHandler(handler)

    logging.getLogger(loggers[0] if loggers else __name__).info(
        "Logging initialized, log file: %s", log_file
    )
    return log_file
