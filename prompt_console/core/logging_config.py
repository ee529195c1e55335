"""Centralized logging configuration for the console.

Provides plain-text logging to the console and, when a log directory
is configured, separate files for:
- info.log: General console logs (INFO level and above)
- error.log: Error logs only (ERROR level and above)
"""

import logging
import sys

from prompt_console.core.config import Settings, get_settings


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """Configure console logging with file and console handlers.

    Args:
        settings: Console settings. If None, uses global settings.

    Returns:
        The configured root logger.
    """
    settings = settings or get_settings()
    level = logging.DEBUG if settings.log_level == "DEBUG" else logging.INFO

    detailed_formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    simple_formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Streamlit reruns the script on every interaction
    root_logger.handlers.clear()

    if settings.log_dir is not None:
        settings.log_dir.mkdir(parents=True, exist_ok=True)

        info_handler = logging.FileHandler(settings.log_dir / "info.log", encoding="utf-8")
        info_handler.setLevel(logging.INFO)
        info_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(info_handler)

        error_handler = logging.FileHandler(settings.log_dir / "error.log", encoding="utf-8")
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(error_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(simple_formatter)
    root_logger.addHandler(console_handler)

    return root_logger
