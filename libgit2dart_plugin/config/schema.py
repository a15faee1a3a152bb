"""Configuration schema using Pydantic.

Persisted to ~/.libgit2dart_plugin/config.json (camelCase keys on disk).
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings

from libgit2dart_plugin import CHANNEL_NAME


class ChannelConfig(BaseModel):
    """Method channel configuration."""
    name: str = CHANNEL_NAME
    codec: Literal["json"] = "json"

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("channel name must not be empty")
        return value


class LoggingConfig(BaseModel):
    """Loguru sink configuration."""
    level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    file: bool = False  # Also write a rotating log under ~/.libgit2dart_plugin/logs
    rotation: str = "10 MB"
    retention: str = "14 days"


class Config(BaseSettings):
    """Root configuration for libgit2dart_plugin."""
    channel: ChannelConfig = Field(default_factory=ChannelConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(
        env_prefix="LIBGIT2DART_PLUGIN_",
        env_nested_delimiter="__",
    )
