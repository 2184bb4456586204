# core/logging_config.py

"""
Sets up logging for the Student Roster.

Core modules log through `logging.getLogger(__name__)` and never print. The CLI entry point
calls `setup_logging()` once so file errors from the core reach stderr; per-line load warnings
are shown by the menus themselves.
"""

import logging
import sys

LOGGER_NAMESPACES = ("core", "models", "cli")


def setup_logging(level: int = logging.WARNING, log_file: str | None = None) -> None:
    """
    Configures the package loggers with a console handler and an optional file handler.

    Args:
        level (int): Logging level (e.g. `logging.DEBUG`, `logging.WARNING`).
        log_file (str | None): Optional path to also write log records to.

    Notes:
        - Console output goes to stderr so it does not interleave with menu text on stdout.
        - Existing handlers are cleared first, so calling this twice does not duplicate output.
    """
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for namespace in LOGGER_NAMESPACES:
        logger = logging.getLogger(namespace)
        logger.setLevel(level)

        if logger.hasHandlers():
            logger.handlers.clear()

        for handler in handlers:
            logger.addHandler(handler)

        logger.propagate = False

    logging.getLogger("core").debug("Logging initialized.")
