"""printf-style variants of the constructors.

The message is ``fmt % args`` when arguments are given and *fmt* verbatim
otherwise, the same rule :mod:`logging` applies to its messages.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from .chain import ChainLink
from .constructors import because, new, note

__all__ = ["newf", "notef", "becausef"]


def _format(fmt: str, args: tuple) -> str:
    return fmt % args if args else fmt


def newf(fmt: str, *args: Any, call_depth: int = 0) -> ChainLink:
    return new(_format(fmt, args), call_depth=call_depth + 1)


def notef(
    err: Optional[BaseException],
    should_preserve_cause: Optional[Callable[[BaseException], bool]],
    fmt: str,
    *args: Any,
    call_depth: int = 0,
) -> Optional[ChainLink]:
    return note(err, should_preserve_cause, _format(fmt, args), call_depth=call_depth + 1)


def becausef(
    err: Optional[BaseException],
    cause: Optional[BaseException],
    fmt: str,
    *args: Any,
    call_depth: int = 0,
) -> Optional[ChainLink]:
    return because(err, cause, _format(fmt, args), call_depth=call_depth + 1)
