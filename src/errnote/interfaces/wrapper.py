from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .base import implements_methods

__all__ = ["IWrapper"]


class IWrapper(ABC):
    """Capability of an error that wraps another error.

    Exposed so third-party exception types can take part in
    :func:`errnote.details`; ordinary code should not need to call it.
    """

    __slots__ = ()

    @abstractmethod
    def message(self) -> str:  # noqa: D401
        """Return the text added at this level, without the underlying error's."""

    @abstractmethod
    def underlying(self) -> Optional[BaseException]:  # noqa: D401
        """Return the wrapped error, or ``None`` if there is none."""

    @classmethod
    def __subclasshook__(cls, subclass: type):
        if cls is IWrapper:
            return implements_methods(subclass, "message", "underlying")
        return NotImplemented
