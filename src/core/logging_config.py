"""
Logging configuration.
"""

import logging
from typing import Optional, Union

import config

_HANDLER_NAME = "iso-console"


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name only."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]

        formatted = super().format(record)

        if record.levelname in formatted:
            formatted = formatted.replace(
                record.levelname, f"{color}{record.levelname}{reset}", 1
            )

        return formatted


def setup_logging(
    level: Optional[Union[int, str]] = None, *, use_colors: bool = True
) -> logging.Logger:
    """Install the console handler on the root logger.

    Calling it again only updates the level; handlers are never duplicated.

    Args:
        level: Logging level name or number; defaults to config.LOG_LEVEL
        use_colors: Color level names with ANSI codes

    Returns:
        The configured root logger
    """
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(level)
            return root

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    fmt = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    formatter_cls = ColoredFormatter if use_colors else logging.Formatter
    handler.setFormatter(formatter_cls(fmt, datefmt="%H:%M:%S"))
    root.addHandler(handler)
    return root
