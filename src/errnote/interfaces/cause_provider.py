from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .base import implements_methods

__all__ = ["ICauseProvider"]


class ICauseProvider(ABC):
    """Capability of an error that can name the error it is attributed to.

    :meth:`cause` may return ``None`` even when a cause conceptually exists,
    for example because it has been masked.
    """

    __slots__ = ()

    @abstractmethod
    def cause(self) -> Optional[BaseException]:  # noqa: D401
        """Return the error this one should be classified as, or ``None``."""

    @classmethod
    def __subclasshook__(cls, subclass: type):
        if cls is ICauseProvider:
            return implements_methods(subclass, "cause")
        return NotImplemented
