from __future__ import annotations

import inspect
import logging
from typing import Optional

from . import config
from .chain import EMPTY_LOCATION, ChainLink, Location

__all__ = ["caller_location", "set_location", "tag"]

logger = logging.getLogger("errnote")


def caller_location(skip: int = 0) -> Location:
    """Return the location of a frame on the current call stack.

    ``skip=0`` is the line in the function that called
    :func:`caller_location`, ``skip=1`` is the line that called *that*
    function, and so on. Returns an empty location if the stack is not deep
    enough or the interpreter does not expose frames.
    """
    frame = inspect.currentframe()
    try:
        for _ in range(skip + 1):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return EMPTY_LOCATION
        return Location(frame.f_code.co_filename, frame.f_lineno)
    finally:
        del frame


def set_location(err: Optional[BaseException], call_depth: int = 0) -> None:
    """Record where *err* was created, if it does not know yet.

    The location is taken *call_depth* frames above the caller, so ``0``
    tags the line that calls :func:`set_location` and ``1`` the line that
    called the current function. Errors that are not :class:`ChainLink`
    instances, and links that already carry a location, are left alone.
    """
    if not isinstance(err, ChainLink):
        return
    if not err._set_location(caller_location(call_depth + 1)):
        logger.debug("Location of %r already set; ignoring set_location", err)


def tag(link: ChainLink, call_depth: int) -> ChainLink:
    # Used by the constructors: call_depth is counted from *their* caller,
    # i.e. 0 means the line that invoked the constructor.
    if config.config_service.get("capture_locations", True):
        link._set_location(caller_location(call_depth + 2))
    return link
