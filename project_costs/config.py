"""Runtime settings read from environment variables.

Env vars:
  PROJECT_COSTS_SOURCE_URL=<http://...>  -> statistics endpoint the dashboard reads
  PROJECT_COSTS_SOURCE_TOKEN=<token>     -> optional bearer token for that endpoint
  PROJECT_COSTS_SOURCE_TIMEOUT=5.0       -> request timeout in seconds
  PROJECT_COSTS_PALETTE=#aaa,#bbb        -> override the series color palette
  PROJECT_COSTS_LOG_LEVEL=INFO           -> logging level for the entry points
  PROJECT_COSTS_API_PORT=8000            -> port for the REST service
  PROJECT_COSTS_DASH_PORT=8050           -> port for the dashboard
  PROJECT_COSTS_DEBUG=1                  -> run servers in debug mode
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

from .engine.colors import DEFAULT_PALETTE

DEFAULT_SOURCE_URL = "http://127.0.0.1:8000/api/statistics/project-costs"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_float(env: Mapping[str, str], key: str, default: float) -> float:
    try:
        return float(env.get(key, default))
    except (TypeError, ValueError):
        return default


def _env_int(env: Mapping[str, str], key: str, default: int) -> int:
    try:
        return int(env.get(key, default))
    except (TypeError, ValueError):
        return default


def _env_palette(env: Mapping[str, str]) -> tuple[str, ...]:
    raw = env.get("PROJECT_COSTS_PALETTE", "")
    colors = tuple(part.strip() for part in raw.split(",") if part.strip())
    return colors or DEFAULT_PALETTE


@dataclass(frozen=True)
class Settings:
    source_url: str = DEFAULT_SOURCE_URL
    source_token: str | None = None
    source_timeout: float = 5.0
    palette: tuple[str, ...] = field(default=DEFAULT_PALETTE)
    log_level: str = "INFO"
    api_port: int = 8000
    dash_port: int = 8050
    debug: bool = False

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if env is None else env
        return cls(
            source_url=env.get("PROJECT_COSTS_SOURCE_URL") or DEFAULT_SOURCE_URL,
            source_token=env.get("PROJECT_COSTS_SOURCE_TOKEN") or None,
            source_timeout=_env_float(env, "PROJECT_COSTS_SOURCE_TIMEOUT", 5.0),
            palette=_env_palette(env),
            log_level=env.get("PROJECT_COSTS_LOG_LEVEL", "INFO"),
            api_port=_env_int(env, "PROJECT_COSTS_API_PORT", 8000),
            dash_port=_env_int(env, "PROJECT_COSTS_DASH_PORT", 8050),
            debug=str(env.get("PROJECT_COSTS_DEBUG", "")).lower() in _TRUTHY,
        )
