"""
Logger adapter backed by the standard library logging module.
"""

import logging
from typing import Any, Optional

from ...core.ports.logger import Logger


DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class StandardLogger(Logger):
    """Logger implementation writing to a console handler."""

    def __init__(
        self,
        name: str = "warehouse_models",
        level: Optional[int] = None,
        log_format: str = DEFAULT_LOG_FORMAT
    ):
        self._logger = logging.getLogger(name)

        # loggers are process-wide, only attach the console handler once
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(log_format))
            self._logger.addHandler(handler)

        if level is not None:
            self.set_level(level)

    @staticmethod
    def _format(message: str, kwargs: dict) -> str:
        if not kwargs:
            return message
        context = " ".join(f"{key}={value}" for key, value in kwargs.items())
        return f"{message} {context}"

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(self._format(message, kwargs))

    def warn(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(self._format(message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(self._format(message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(self._format(message, kwargs))

    def get_logger(self) -> logging.Logger:
        """Return the underlying logging.Logger instance."""
        return self._logger

    def set_level(self, level: int) -> None:
        """Set the level on the logger and all of its handlers."""
        self._logger.setLevel(level)
        for handler in self._logger.handlers:
            handler.setLevel(level)
