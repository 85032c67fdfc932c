from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """
    Port (interface) for logging.
    Implementations append keyword arguments to the message as key=value pairs.
    """

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an informational message."""
        pass

    @abstractmethod
    def warn(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        pass

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        pass
