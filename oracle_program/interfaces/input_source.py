"""Input source protocol — task input and reveal retrieval."""
from typing import Protocol

from ..models import RevealRecord


class InputSource(Protocol):
    """Abstract interface for reading what the host hands to a phase."""

    def get_inputs(self) -> bytes: ...

    def get_reveals(self) -> list[RevealRecord]: ...
