"""Capabilities an error value may support.

Each one is checked independently with :func:`isinstance`; any class that
defines the methods qualifies, whether or not it inherits from the ABC.
"""

from .cause_provider import ICauseProvider
from .location_provider import ILocationProvider
from .wrapper import IWrapper

__all__ = ["ICauseProvider", "ILocationProvider", "IWrapper"]
