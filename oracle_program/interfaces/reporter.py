"""Result reporter protocol — success/error reporting back to the host."""
from typing import Protocol


class ResultReporter(Protocol):
    """Abstract interface for reporting exactly one outcome per phase run."""

    def success(self, payload: bytes) -> None: ...

    def error(self, payload: bytes) -> None: ...
