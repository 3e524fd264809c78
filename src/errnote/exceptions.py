from __future__ import annotations

from typing import Optional

__all__ = [
    "ErrnoteError",
    "ConfigurationError",
    "InconsistentChainError",
    "ChainDepthError",
]


class ErrnoteError(Exception):
    """Base exception for errors raised by errnote itself."""

    def __init__(self, message: str, *, error_code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self) -> str:  # pragma: no cover – thin wrapper
        return self.message


class ConfigurationError(ErrnoteError):
    """Raised when errnote settings are invalid."""


class InconsistentChainError(ErrnoteError):
    """Raised when an error type breaks the contract of a capability it claims.

    This is a programming error in the offending type, not something callers
    are expected to recover from.
    """


class ChainDepthError(ErrnoteError):
    """Raised when a chain is longer than the configured ``max_chain_depth``."""
