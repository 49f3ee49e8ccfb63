"""
Configuration.

Two sources, both resolved from the project root (the nearest directory at
or above the working directory holding a ``.project_root`` marker):

- ``config/settings/application.yaml`` and ``logging.yaml``, each checked
  against its schema in ``config_schema``;
- ``CLIENT_REGISTRY_*`` environment variables, or ``config/.env``, which can
  override the bind address and the log level.

Both loaders are cached; tests call ``cache_clear()`` to reload.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, NamedTuple

import yaml
from pydantic import BaseModel, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from client_registry.core.config_schema import ApplicationSchema, LoggingSchema, LogLevel

PROJECT_MARKER = ".project_root"


def find_project_root(start: Path | None = None) -> Path:
    """Return the nearest directory at or above ``start`` holding the marker."""
    origin = (start or Path.cwd()).resolve()
    for candidate in (origin, *origin.parents):
        if (candidate / PROJECT_MARKER).is_file():
            return candidate
    raise RuntimeError(f"Project root not found: no {PROJECT_MARKER} at or above {origin}")


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Read one file from config/settings/. An empty file reads as ``{}``."""
    path = find_project_root() / "config" / "settings" / filename
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise FileNotFoundError(f"Configuration file not found: {path}") from e
    return yaml.safe_load(text) or {}


class Settings(BaseSettings):
    """Environment overrides. Unset values fall back to the YAML files."""

    model_config = SettingsConfigDict(env_prefix="CLIENT_REGISTRY_", extra="ignore")

    server_host: str | None = None
    server_port: int | None = None
    log_level: LogLevel | None = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class AppConfig(NamedTuple):
    application: ApplicationSchema
    logging: LoggingSchema


class ServerAddress(NamedTuple):
    host: str
    port: int


def _validated(schema: type[BaseModel], filename: str) -> Any:
    try:
        return schema.model_validate(load_yaml_config(filename))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {filename}:\n{e}") from e


@lru_cache
def get_app_config() -> AppConfig:
    """Load and validate both YAML files."""
    return AppConfig(
        application=_validated(ApplicationSchema, "application.yaml"),
        logging=_validated(LoggingSchema, "logging.yaml"),
    )


@lru_cache
def get_settings() -> Settings:
    return Settings(_env_file=find_project_root() / "config" / ".env")


def get_server_address() -> ServerAddress:
    """Bind address: environment first, then application.yaml."""
    server = get_app_config().application.server
    settings = get_settings()
    return ServerAddress(
        host=settings.server_host or server.host,
        port=settings.server_port or server.port,
    )
