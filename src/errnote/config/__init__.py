"""Configuration package.

Exposes a module-level :pydata:`config_service` that loads
:class:`ErrnoteSettings` from the environment when the package is imported.
Reload this package to pick up changed environment variables.
"""

from __future__ import annotations

from .configuration_service import ConfigurationService
from .settings import ErrnoteSettings

config_service = ConfigurationService(settings=ErrnoteSettings())

__all__ = ["config_service", "ConfigurationService", "ErrnoteSettings"]
