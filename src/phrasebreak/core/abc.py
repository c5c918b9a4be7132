"""Protocol interfaces for dependency injection from the host application."""

from typing import Protocol, List, Any


class Segmenter(Protocol):
    """Anything that splits text into an ordered list of phrases."""

    def segment(self, text: str) -> List[str]:
        """
        Segment text into phrases.

        Args:
            text: Input text to segment

        Returns:
            List[str]: Phrases in order of appearance; joined they equal ``text``
        """
        ...


class Logger(Protocol):
    """Optional structured logging interface."""

    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...

    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...

    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...


class Meter(Protocol):
    """Optional metrics collection interface."""

    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        """Increment a counter metric with optional tags."""
        ...

    def observe(self, name: str, value: float, **tags: str) -> None:
        """Record an observation metric with optional tags."""
        ...
