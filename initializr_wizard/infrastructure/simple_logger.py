"""Stderr logger adapter built on the standard logging module."""

import logging
import sys
from typing import Any

from initializr_wizard.ports.logger import LoggerPort

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def render(message: str, context: dict[str, Any]) -> str:
    """Append keyword context to a message as ``key=value`` pairs.

    Example:
        >>> render("Archive written", {"archive": "shop.zip", "size": 10})
        'Archive written archive=shop.zip size=10'
    """
    if not context:
        return message
    pairs = " ".join(f"{key}={value}" for key, value in context.items())
    return f"{message} {pairs}"


class SimpleLogger(LoggerPort):
    """Logger writing to stderr so it never interleaves with prompts on stdout.

    Keyword context is rendered into the line and also attached to the
    record, so handlers can read it as attributes.
    """

    def __init__(self, name: str = "initializr_wizard", level: int = logging.WARNING):
        """Initialize the logger.

        Args:
            name: Logger name (default: "initializr_wizard")
            level: Logging level (default: WARNING)
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)

        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self._logger.addHandler(handler)

    @property
    def level(self) -> int:
        return self._logger.level

    def _log(self, level: int, message: str, context: dict[str, Any]) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, render(message, context), extra=context)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)
