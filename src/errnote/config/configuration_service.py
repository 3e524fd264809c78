from __future__ import annotations

from typing import Any

from ..exceptions import ConfigurationError
from .settings import ErrnoteSettings

__all__ = ["ConfigurationService"]


class ConfigurationService:
    """Runtime wrapper around :class:`ErrnoteSettings`."""

    def __init__(self, *, settings: ErrnoteSettings) -> None:
        self._settings = settings
        if not self.validate_configuration():
            raise ConfigurationError("Invalid errnote configuration detected")

    @property
    def settings(self) -> ErrnoteSettings:
        return self._settings

    def get(self, key: str, default: Any = None) -> Any:  # noqa: D401
        """Return the value at dotted *key*, or *default* if it does not exist."""
        parts = key.split(".")
        current: Any = self._settings
        for part in parts:
            if hasattr(current, part):
                current = getattr(current, part)
            else:
                return default
        return current

    def validate_configuration(self) -> bool:  # noqa: D401
        # Settings can be built with model_construct(), which skips validators.
        depth = self._settings.max_chain_depth
        if not isinstance(depth, int) or isinstance(depth, bool) or depth <= 0:
            raise ConfigurationError(
                f"max_chain_depth must be a positive integer, got {depth!r}",
                error_code="invalid_max_chain_depth",
            )
        return True
