"""Host environment implementations."""
from .local import LocalProcess

__all__ = ["LocalProcess"]
