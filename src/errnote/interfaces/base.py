from __future__ import annotations

from typing import Any

__all__ = ["implements_methods"]


def implements_methods(subclass: type, *names: str) -> Any:
    """Return *True* if *subclass* defines every method in *names*.

    Mirrors the structural check :mod:`collections.abc` uses: the attribute
    must appear somewhere in the MRO and be callable. A name explicitly set
    to ``None`` opts the class out of the capability.
    """
    mro = subclass.__mro__
    for name in names:
        for klass in mro:
            if name in klass.__dict__:
                if not callable(klass.__dict__[name]):
                    return NotImplemented
                break
        else:
            return NotImplemented
    return True
