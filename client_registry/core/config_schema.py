"""
Schemas for the YAML files under config/settings/.

A key the schema does not know is an error, so a misspelt setting fails
at startup instead of being silently ignored.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "console"]


class _Strict(BaseModel):
    model_config = ConfigDict(extra="forbid")


class ServerSchema(_Strict):
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)


class SeedRecordSchema(_Strict):
    """One client inserted at startup. Missing fields stay empty."""

    name: str = ""
    birth_date: str = ""
    address: str = ""
    phone: str = ""


class SeedSchema(_Strict):
    enabled: bool = True
    clients: list[SeedRecordSchema] = Field(default_factory=list)


class ApplicationSchema(_Strict):
    """application.yaml"""

    name: str
    version: str
    description: str = ""
    environment: str = "development"
    docs_enabled: bool = True
    server: ServerSchema = Field(default_factory=ServerSchema)
    cors_origins: list[str] = Field(default_factory=list)
    seed: SeedSchema = Field(default_factory=SeedSchema)


class LoggingSchema(_Strict):
    """logging.yaml"""

    level: LogLevel = "INFO"
    format: LogFormat = "console"
