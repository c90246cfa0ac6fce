from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, TypeVar

from dotenv import load_dotenv

ENV_PREFIX = "VENDOR_CONSOLE"
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})

Number = TypeVar("Number", int, float)


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ClientConfig:
    env_name: str
    api_base_url: str
    connect_timeout_seconds: float = 5.0
    read_timeout_seconds: float = 15.0
    retries: int = 0
    retry_backoff_seconds: float = 0.3
    max_connections: int = 10
    verify_ssl: bool = True
    page_size: int = 5

    @property
    def normalized_env(self) -> str:
        return self.env_name.lower().strip()


def env_var(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _number(suffix: str, cast: Callable[[str], Number], default: Number, *, above: Number | None = None, at_least: Number | None = None) -> Number:
    """Read one numeric setting; blank or unset means ``default``."""
    name = env_var(suffix)
    raw = (os.getenv(name) or "").strip()
    if not raw:
        value = default
    else:
        try:
            value = cast(raw)
        except ValueError as exc:
            raise ConfigError(f"Invalid {name}: expected {cast.__name__}, got {raw!r}") from exc
    if above is not None and not value > above:
        raise ConfigError(f"Invalid {name}: expected > {above}, got {value}")
    if at_least is not None and not value >= at_least:
        raise ConfigError(f"Invalid {name}: expected >= {at_least}, got {value}")
    return value


def _flag(suffix: str, default: bool) -> bool:
    raw = os.getenv(env_var(suffix))
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _base_url(env_name: str) -> str:
    # A per-environment URL wins, so one .env can describe several deployments.
    for suffix in (f"API_BASE_URL_{env_name.upper()}", "API_BASE_URL"):
        value = (os.getenv(env_var(suffix)) or "").strip()
        if value:
            return value.rstrip("/")
    raise ConfigError(f"Missing required config values: {env_var('API_BASE_URL')}")


def load_config(env_file: str | None = None) -> ClientConfig:
    """Load config from environment with optional .env override."""
    load_dotenv(env_file)

    env_name = (os.getenv(env_var("ENV")) or "dev").strip()
    timeout = _number("TIMEOUT_SECONDS", float, 10.0, above=0.0)
    connect_timeout = _number("CONNECT_TIMEOUT_SECONDS", float, min(timeout, 5.0), above=0.0)
    read_timeout = _number("READ_TIMEOUT_SECONDS", float, max(timeout, connect_timeout), above=0.0)

    return ClientConfig(
        env_name=env_name,
        api_base_url=_base_url(env_name),
        connect_timeout_seconds=connect_timeout,
        read_timeout_seconds=read_timeout,
        retries=_number("RETRIES", int, 0, at_least=0),
        retry_backoff_seconds=_number("RETRY_BACKOFF_SECONDS", float, 0.3, at_least=0.0),
        max_connections=_number("MAX_CONNECTIONS", int, 10, at_least=1),
        verify_ssl=_flag("VERIFY_SSL", True),
        page_size=_number("PAGE_SIZE", int, 5, at_least=1),
    )
