from __future__ import annotations

from typing import Callable, Optional

from .chain import ChainLink
from .location import tag
from .resolver import cause as resolve_cause

__all__ = ["new", "wrap", "note", "because"]


def new(msg: str, *, call_depth: int = 0) -> ChainLink:
    """Return a new error with message *msg* and no underlying error."""
    return tag(ChainLink(msg), call_depth)


def wrap(err: Optional[BaseException], *, call_depth: int = 0) -> Optional[ChainLink]:
    """Return *err* wrapped with the current location and no extra text.

    Returns ``None`` if *err* is ``None``.
    """
    if err is None:
        return None
    return tag(ChainLink("", err), call_depth)


def note(
    err: Optional[BaseException],
    should_preserve_cause: Optional[Callable[[BaseException], bool]],
    msg: str,
    *,
    call_depth: int = 0,
) -> Optional[ChainLink]:
    """Annotate *err* with *msg*.

    The cause of *err* is kept when *should_preserve_cause* is ``None`` or
    returns *True* for it; otherwise the cause is masked and the new error is
    its own cause. Returns ``None`` if *err* is ``None``.
    """
    if err is None:
        return None
    err_cause = resolve_cause(err)
    if should_preserve_cause is None or should_preserve_cause(err_cause):
        link = ChainLink(msg, err, err_cause)
    else:
        link = ChainLink(msg, err, masked=True)
    return tag(link, call_depth)


def because(
    err: Optional[BaseException],
    cause: Optional[BaseException],
    msg: str,
    *,
    call_depth: int = 0,
) -> Optional[ChainLink]:
    """Annotate *err* with *msg* and attribute it to *cause*.

    *err* may be ``None``, in which case the result has no underlying error
    and displays *msg* (or *cause*'s text if *msg* is empty). With no
    *cause*, the cause of *err* is left in place. Returns ``None`` if both
    *err* and *cause* are ``None``.
    """
    if err is None and cause is None:
        return None
    return tag(ChainLink(msg, err, cause), call_depth)
