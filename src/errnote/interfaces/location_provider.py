from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple

from .base import implements_methods

__all__ = ["ILocationProvider"]


class ILocationProvider(ABC):
    """Capability of an error that knows the source location it was created at."""

    __slots__ = ()

    @abstractmethod
    def location(self) -> Tuple[str, int]:  # noqa: D401
        """Return ``(file, line)``; an empty *file* means no location."""

    @classmethod
    def __subclasshook__(cls, subclass: type):
        if cls is ILocationProvider:
            return implements_methods(subclass, "location")
        return NotImplemented
