"""Migration destinations."""

from .base import BaseDestination, LoadResult
from .remote_loader import RemoteDestination

__all__ = [
    "BaseDestination",
    "LoadResult",
    "RemoteDestination",
]
