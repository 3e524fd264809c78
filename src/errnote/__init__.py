"""Annotate errors with context and call sites, and diagnose them later.

>>> import errnote
>>> err = errnote.new("connection refused")
>>> err = errnote.note(err, None, "cannot load user")
>>> str(err)
'cannot load user: connection refused'
>>> print(errnote.details(err))  # doctest: +SKIP
[
    {app.py:3: cannot load user}
    {app.py:2: connection refused}
]
"""

from __future__ import annotations

import logging

from .chain import ChainLink, Location
from .constructors import because, new, note, wrap
from .exceptions import ChainDepthError, ConfigurationError, ErrnoteError, InconsistentChainError
from .formatted import becausef, newf, notef
from .formatter import details
from .interfaces import ICauseProvider, ILocationProvider, IWrapper
from .location import set_location
from .resolver import cause, is_

logging.getLogger("errnote").addHandler(logging.NullHandler())

__all__ = [
    "new",
    "wrap",
    "note",
    "because",
    "newf",
    "notef",
    "becausef",
    "set_location",
    "cause",
    "details",
    "is_",
    "ChainLink",
    "Location",
    "ICauseProvider",
    "IWrapper",
    "ILocationProvider",
    "ErrnoteError",
    "ConfigurationError",
    "InconsistentChainError",
    "ChainDepthError",
]
