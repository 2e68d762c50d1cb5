"""Abstract base class for display implementations."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Abstract base for display implementations."""

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        """Display a status message."""

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        """Display a success message."""

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Display an error message."""

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        """Display an informational message."""

    @abstractmethod
    def text_output(self, text: str, **kwargs) -> None:
        """Write plain report text to the primary output stream, verbatim."""

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Write structured data to the primary output stream.

        Args:
            data: JSON-serializable data
            kwargs: format ("json" or "yaml"), indent
        """
