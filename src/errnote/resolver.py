from __future__ import annotations

import logging
from typing import Callable, NoReturn, Optional

from . import config
from .exceptions import ChainDepthError, InconsistentChainError
from .interfaces import ICauseProvider

__all__ = ["cause", "is_"]

logger = logging.getLogger("errnote")


def cause(err: Optional[BaseException]) -> Optional[BaseException]:
    """Return the error *err* should be classified as.

    Follows :meth:`ICauseProvider.cause` from *err* until an error either
    lacks the capability or reports no cause, and returns that error. The
    result is never ``None`` unless *err* is. Masked and absent causes look
    the same from here.
    """
    if err is None:
        return None
    max_depth: int = config.config_service.get("max_chain_depth", 10000)
    seen = {id(err)}
    current = err
    while isinstance(current, ICauseProvider):
        nxt = current.cause()
        if nxt is None or nxt is current:
            break
        if not isinstance(nxt, BaseException):
            _inconsistent(f"{type(current).__name__}.cause() returned non-error {nxt!r}")
        if id(nxt) in seen:
            _inconsistent(f"cause of {type(current).__name__} loops back to an earlier error")
        if len(seen) >= max_depth:
            _too_deep("cause", max_depth)
        seen.add(id(nxt))
        current = nxt
    return current


def is_(target: BaseException) -> Callable[[BaseException], bool]:
    """Return a predicate reporting whether an error *is* *target*.

    Intended as the *should_preserve_cause* argument of :func:`errnote.note`.
    """

    def predicate(err: BaseException) -> bool:
        return err is target

    return predicate


def _inconsistent(reason: str) -> NoReturn:
    logger.error("Inconsistent error chain: %s", reason)
    raise InconsistentChainError(reason, error_code="inconsistent_cause")


def _too_deep(relation: str, max_depth: int) -> NoReturn:
    logger.error("Error chain exceeds max_chain_depth=%d following %s", max_depth, relation)
    raise ChainDepthError(f"{relation} chain longer than {max_depth} errors", error_code="chain_too_deep")
