from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["ErrnoteSettings"]


class ErrnoteSettings(BaseSettings):
    """Library settings loaded from ``ERRNOTE_*`` environment variables."""

    # Whether constructors record the call site of each annotation
    capture_locations: bool = Field(True)

    # Upper bound on links visited by cause() and details()
    max_chain_depth: int = Field(10000)

    @field_validator("max_chain_depth")
    def _validate_max_chain_depth(cls, v: int) -> int:  # noqa: D401
        if v <= 0:
            raise ValueError("max_chain_depth must be a positive integer")
        return v

    model_config = SettingsConfigDict(env_prefix="ERRNOTE_", case_sensitive=False, extra="ignore")
