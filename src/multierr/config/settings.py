"""Environment-based configuration using pydantic-settings.

Selects the process-wide default formatter used by composites that carry
no formatter of their own.

Example:
    >>> from multierr.config import get_settings
    >>> settings = get_settings()
    >>> settings.format
    'list'

    # Or with environment variables:
    # MULTIERR_FORMAT=titled
    # MULTIERR_TITLE="validation failed:"
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Self

from pydantic import Field, computed_field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MultierrSettings(BaseSettings):
    """Root settings for multierr.

    Loads configuration from environment variables with MULTIERR_ prefix.

    Example environment variables:
        MULTIERR_FORMAT=prefixed
        MULTIERR_PREFIX="batch: "
    """

    model_config = SettingsConfigDict(
        env_prefix="MULTIERR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_default=True,
    )

    format: Literal["list", "titled", "prefixed"] = Field(
        default="list",
        description="Default formatter strategy",
    )
    title: str | None = Field(default=None, description="Title for the titled strategy")
    prefix: str | None = Field(default=None, description="Line prefix for the prefixed strategy")

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, v: str) -> str:
        """Normalize strategy name to lowercase."""
        return v.strip().lower() if isinstance(v, str) else v

    @model_validator(mode="after")
    def _check_strategy_args(self) -> Self:
        if self.format == "titled" and self.title is None:
            raise ValueError("format 'titled' requires a title")
        if self.format == "prefixed" and not self.prefix:
            raise ValueError("format 'prefixed' requires a non-empty prefix")
        return self

    @computed_field
    @property
    def is_custom(self) -> bool:
        """Whether anything other than the bare list strategy is configured."""
        return self.format != "list"


@lru_cache(maxsize=1)
def get_settings() -> MultierrSettings:
    """Get the global settings instance (cached)."""
    return MultierrSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
