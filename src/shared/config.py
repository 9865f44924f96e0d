"""Configuration management for the Jules MCP Server.

Supports YAML configuration files and environment variable overrides.
Settings are loaded once at startup and passed explicitly to the app.
"""

import os
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_JULES_API_BASE_URL = "https://jules.googleapis.com/v1alpha"


class ResultFormat(str, Enum):
    """How successful tool results are handed back to the caller."""
    JSON = "json"
    TEXT = "text"


class ServerSettings(BaseSettings):
    """MCP Server configuration."""
    name: str = Field(default="google-jules-mcp-sse")
    version: str = Field(default="1.0.0")
    host: str = Field(default="0.0.0.0")
    port: int = Field(
        default=3000,
        gt=0,
        # "port" also matches a bare PORT variable; env lookup ignores case
        validation_alias=AliasChoices("port", "JULES_MCP_SERVER_PORT"),
    )
    endpoint: str = Field(default="/sse", description="Streamable HTTP endpoint path")
    result_format: ResultFormat = Field(default=ResultFormat.JSON)
    json_response: bool = Field(
        default=False,
        description="Answer with plain JSON instead of an SSE stream",
    )

    model_config = SettingsConfigDict(
        env_prefix="JULES_MCP_SERVER_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )


class UpstreamSettings(BaseSettings):
    """Jules REST API configuration."""
    base_url: str = Field(default=DEFAULT_JULES_API_BASE_URL)
    api_key_header: str = Field(default="X-Goog-Api-Key")

    model_config = SettingsConfigDict(
        env_prefix="JULES_API_",
        env_file=".env",
        extra="ignore"
    )


class Settings(BaseSettings):
    """Main application settings."""
    environment: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    server: ServerSettings = Field(default_factory=ServerSettings)
    upstream: UpstreamSettings = Field(default_factory=UpstreamSettings)

    model_config = SettingsConfigDict(
        env_prefix="JULES_MCP_",
        env_file=".env",
        extra="ignore"
    )

    @property
    def effective_log_level(self) -> str:
        """Log level to configure; ``debug`` forces DEBUG."""
        return "DEBUG" if self.debug else self.log_level

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """
        Load settings from a YAML file, falling back to defaults.

        Environment variables take precedence over values from the file.
        """
        data = load_yaml_config(path)

        server = ServerSettings(
            **without_env_overrides(ServerSettings, data.pop("server", None) or {})
        )
        upstream = UpstreamSettings(
            **without_env_overrides(UpstreamSettings, data.pop("upstream", None) or {})
        )

        return cls(server=server, upstream=upstream, **without_env_overrides(cls, data))


def _env_names(settings_cls: type[BaseSettings], field_name: str) -> list[str]:
    """Environment variable names that can populate a settings field."""
    field = settings_cls.model_fields.get(field_name)
    if field is not None and isinstance(field.validation_alias, AliasChoices):
        return [c for c in field.validation_alias.choices if isinstance(c, str)]
    prefix = settings_cls.model_config.get("env_prefix", "")
    return [f"{prefix}{field_name}"]


def without_env_overrides(
    settings_cls: type[BaseSettings], data: dict[str, Any]
) -> dict[str, Any]:
    """Drop file values for fields that are set in the process environment."""
    environ = {name.upper() for name in os.environ}
    return {
        key: value
        for key, value in data.items()
        if not any(name.upper() in environ for name in _env_names(settings_cls, key))
    }


def load_yaml_config(path: str | Path) -> dict[str, Any]:
    """Load a YAML configuration file."""
    path = Path(path)
    if not path.exists():
        return {}

    with open(path) as f:
        return yaml.safe_load(f) or {}


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    config_path = os.environ.get("JULES_MCP_CONFIG_PATH", "config/settings.yaml")
    return Settings.from_yaml(config_path)
