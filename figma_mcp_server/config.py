"""
Server configuration.
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_BASE_URL = "https://api.figma.com/v1"
TRANSPORT_TYPES = ("stdio", "sse")
# Names understood by both logging and uvicorn
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class ConfigError(Exception):
    """Invalid or missing configuration."""
    pass


def _int_setting(env: Mapping[str, str], name: str, default: str) -> int:
    raw = env.get(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


@dataclass
class FigmaConfig:
    """Figma API settings."""
    access_token: str
    base_url: str = DEFAULT_BASE_URL
    timeout: int = 30

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "FigmaConfig":
        env = os.environ if env is None else env
        token = env.get("FIGMA_API_TOKEN")
        if not token:
            raise ConfigError("FIGMA_API_TOKEN environment variable is required")
        return cls(
            access_token=token,
            base_url=env.get("FIGMA_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            timeout=_int_setting(env, "FIGMA_REQUEST_TIMEOUT", "30"),
        )


@dataclass
class ServerConfig:
    """Transport and logging settings."""
    transport: str = "stdio"
    host: str = "0.0.0.0"
    port: int = 3000
    api_key: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        env = os.environ if env is None else env
        transport = env.get("TRANSPORT_TYPE", "stdio").lower()
        if transport not in TRANSPORT_TYPES:
            raise ConfigError(
                f"Unknown transport type: {transport} (expected one of {', '.join(TRANSPORT_TYPES)})"
            )

        api_key = env.get("API_KEY") or None
        if transport == "sse" and not api_key:
            raise ConfigError("API_KEY environment variable is required for the sse transport")

        log_level = env.get("LOG_LEVEL", "INFO").upper()
        log_level = LOG_LEVEL_ALIASES.get(log_level, log_level)
        if log_level not in LOG_LEVELS:
            raise ConfigError(
                f"Unknown log level: {log_level} (expected one of {', '.join(LOG_LEVELS)})"
            )

        return cls(
            transport=transport,
            host=env.get("HOST", "0.0.0.0"),
            port=_int_setting(env, "PORT", "3000"),
            api_key=api_key,
            log_level=log_level,
        )


@dataclass
class Config:
    """Main configuration."""
    figma: FigmaConfig
    server: ServerConfig


def load_config(env: Optional[Mapping[str, str]] = None) -> Config:
    """
    Validates the environment at startup.

    Raises:
        ConfigError: If a required setting is missing or malformed.
    """
    return Config(
        figma=FigmaConfig.from_env(env),
        server=ServerConfig.from_env(env),
    )
