from __future__ import annotations

from typing import NamedTuple, Optional

from .interfaces import ICauseProvider, ILocationProvider, IWrapper

__all__ = ["ChainLink", "Location", "EMPTY_LOCATION"]


class Location(NamedTuple):
    """Source position an annotation was made at."""

    file: str = ""
    line: int = 0

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


EMPTY_LOCATION = Location()


class ChainLink(Exception, ICauseProvider, IWrapper, ILocationProvider):
    """One annotation step in an error chain.

    A link adds *message* on top of *underlying* and decides what the error
    should be classified as:

    * with an explicit *cause*, :func:`errnote.cause` moves to it;
    * when *masked*, the link reports no cause so classification stops here;
    * otherwise classification defers to *underlying*.

    Everything except the location is fixed at construction. The location is
    empty until a constructor or :func:`errnote.set_location` writes it, and
    it is written at most once.
    """

    def __init__(
        self,
        message: str = "",
        underlying: Optional[BaseException] = None,
        cause: Optional[BaseException] = None,
        *,
        masked: bool = False,
    ) -> None:
        super().__init__(message)
        self._message = message
        self._underlying = underlying
        self._cause = cause
        self._masked = masked and cause is None
        self._location = EMPTY_LOCATION
        # Lets the default traceback printer show the wrapped error.
        if isinstance(underlying, BaseException):
            self.__cause__ = underlying

    # ------------------------------------------------------------------
    # Capabilities
    # ------------------------------------------------------------------
    def message(self) -> str:  # noqa: D401
        return self._message

    def underlying(self) -> Optional[BaseException]:  # noqa: D401
        return self._underlying

    def cause(self) -> Optional[BaseException]:  # noqa: D401
        if self._cause is not None:
            return self._cause
        if self._masked:
            return None
        return self._underlying

    def location(self) -> Location:  # noqa: D401
        return self._location

    # ------------------------------------------------------------------
    @property
    def masked(self) -> bool:
        """*True* if this link hides the cause of the error it wraps."""
        return self._masked

    @property
    def cause_override(self) -> Optional[BaseException]:
        """The error this link is explicitly attributed to, if any."""
        return self._cause

    def _set_location(self, location: Location) -> bool:
        if self._location.file:
            return False
        self._location = location
        return True

    def __str__(self) -> str:
        # Iterative so that long chains do not hit the recursion limit.
        parts = []
        link: BaseException = self
        while isinstance(link, ChainLink) and link._underlying is not None:
            if link._message:
                parts.append(link._message)
            link = link._underlying
        if not isinstance(link, ChainLink):
            parts.append(str(link))
        elif link._message:
            parts.append(link._message)
        elif link._cause is not None:
            parts.append(str(link._cause))
        else:
            parts.append("")
        return ": ".join(parts)

    def __repr__(self) -> str:
        parts = [f"message={self._message!r}"]
        if self._underlying is not None:
            parts.append(f"underlying={_short_repr(self._underlying)}")
        if self._cause is not None:
            parts.append(f"cause={_short_repr(self._cause)}")
        if self._masked:
            parts.append("masked=True")
        if self._location.file:
            parts.append(f"location='{self._location}'")
        return f"{type(self).__name__}({', '.join(parts)})"


def _short_repr(err: BaseException) -> str:
    # Nested links are summarised by their own message only.
    if isinstance(err, ChainLink):
        return f"{type(err).__name__}(message={err._message!r}, ...)"
    return repr(err)
