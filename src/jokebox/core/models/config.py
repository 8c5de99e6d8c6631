"""Configuration Pydantic models: JokeboxConfig and its sections."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_JOKE_URL = "https://official-joke-api.appspot.com/random_joke"


class ApiConfig(BaseModel):
    """Remote joke endpoint settings."""

    model_config = ConfigDict(extra="forbid")

    joke_url: str = Field(default=DEFAULT_JOKE_URL, description="GET endpoint returning one joke")
    request_timeout_seconds: float = Field(
        default=6.0, gt=0, description="Per-request timeout in seconds"
    )


class CacheConfig(BaseModel):
    """Local joke cache settings."""

    model_config = ConfigDict(extra="forbid")

    store_path: str = Field(
        default="data/jokebox_store.json", description="JSON file backing the key-value store"
    )
    key: str = Field(default="cached_jokes", min_length=1, description="Store key for the list")
    max_jokes: int = Field(default=5, ge=1, description="Maximum jokes kept in the list")
    skip_malformed: bool = Field(
        default=True,
        description="Skip unreadable cached entries instead of failing the whole load",
    )


class ConnectivityConfig(BaseModel):
    """Connectivity probe targets."""

    model_config = ConfigDict(extra="forbid")

    addresses: list[str] = Field(
        default_factory=lambda: ["1.1.1.1:53", "8.8.4.4:53", "208.67.222.222:53"],
        description="host:port pairs tried in order; any successful TCP connect means online",
    )
    timeout_seconds: float = Field(default=3.0, gt=0, description="Per-address connect timeout")

    @field_validator("addresses")
    @classmethod
    def _check_addresses(cls, value: list[str]) -> list[str]:
        for addr in value:
            host, sep, port = addr.rpartition(":")
            if not sep or not host or not port.isdigit():
                raise ValueError(f"address must be 'host:port', got {addr!r}")
        return value


class SystemConfig(BaseModel):
    """Non-domain runtime settings."""

    model_config = ConfigDict(extra="forbid")

    log_level: str = Field(default="INFO", description="Root log level")
    log_dir: str = Field(default="logs", description="Directory for rotating log files")
    webui_port: int = Field(default=8080, description="NiceGUI listen port")
    title: str = Field(default="Jokes App", description="Page title")
    theme: Literal["auto", "dark", "light"] = Field(default="auto", description="Colour scheme")


class JokeboxConfig(BaseModel):
    """Top-level configuration loaded from ``jokebox_config.json``."""

    model_config = ConfigDict(extra="forbid")

    api: ApiConfig = Field(default_factory=ApiConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    connectivity: ConnectivityConfig = Field(default_factory=ConnectivityConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)
