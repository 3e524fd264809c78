from __future__ import annotations

import logging
from typing import List, NoReturn, Optional

from . import config
from .exceptions import ChainDepthError, InconsistentChainError
from .interfaces import ILocationProvider, IWrapper

__all__ = ["details"]

logger = logging.getLogger("errnote")


def details(err: Optional[BaseException]) -> str:
    """Render every annotation in *err*'s chain, outermost first.

    Each link becomes a ``{file:line: message}`` entry (``{message}`` when
    it has no location)::

        [
            {app/db.py:41: cannot load user}
            {app/db.py:17: connection refused}
        ]

    A wrapper contributes only its own message. The innermost error, or the
    first one that does not wrap anything, contributes its full text.
    """
    if err is None:
        return "[]"
    max_depth: int = config.config_service.get("max_chain_depth", 10000)
    entries: List[str] = []
    seen = set()
    current: BaseException = err
    while True:
        if id(current) in seen:
            _inconsistent(f"underlying chain loops back to {type(current).__name__}")
        if len(entries) >= max_depth:
            _too_deep("underlying", max_depth)
        seen.add(id(current))

        prefix = _location_prefix(current)
        nxt: Optional[BaseException] = None
        if isinstance(current, IWrapper):
            nxt = current.underlying()
        if nxt is None:
            entries.append(f"{{{prefix}{current}}}")
            break
        if not isinstance(nxt, BaseException):
            _inconsistent(f"{type(current).__name__}.underlying() returned non-error {nxt!r}")
        message = current.message()
        if not isinstance(message, str):
            _inconsistent(f"{type(current).__name__}.message() returned {type(message).__name__}, not str")
        entries.append(f"{{{prefix}{message}}}")
        current = nxt

    return "[\n\t" + "\n\t".join(entries) + "\n]"


def _location_prefix(err: BaseException) -> str:
    if not isinstance(err, ILocationProvider):
        return ""
    loc = err.location()
    try:
        file, line = loc
    except (TypeError, ValueError):
        _inconsistent(f"{type(err).__name__}.location() returned {loc!r}, not (file, line)")
    if not isinstance(file, str) or not isinstance(line, int):
        _inconsistent(f"{type(err).__name__}.location() returned {loc!r}, not (file, line)")
    if not file:
        return ""
    return f"{file}:{line}: "


def _inconsistent(reason: str) -> NoReturn:
    logger.error("Inconsistent error chain: %s", reason)
    raise InconsistentChainError(reason, error_code="inconsistent_details")


def _too_deep(relation: str, max_depth: int) -> NoReturn:
    logger.error("Error chain exceeds max_chain_depth=%d following %s", max_depth, relation)
    raise ChainDepthError(f"{relation} chain longer than {max_depth} errors", error_code="chain_too_deep")
