"""Centralized runtime configuration for navigator execution."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

from paprika.api.logging import PaprikaLoggingConfig
from paprika.api.navigator import DEFAULT_HISTORY_LIMIT


@dataclass(frozen=True, slots=True)
class RuntimeNavigatorConfig:
    history_limit: int


@dataclass(frozen=True, slots=True)
class RuntimeWindowConfig:
    backend: str
    width: int
    height: int
    title: str
    vsync: bool
    headless_max_frames: int | None


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    navigator: RuntimeNavigatorConfig
    window: RuntimeWindowConfig
    logging: PaprikaLoggingConfig


_RUNTIME_CONFIG: ContextVar[RuntimeConfig | None] = ContextVar("paprika_runtime_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _normalize_window_backend(raw: str) -> str:
    value = str(raw).strip().lower()
    if value in {"glfw", "window", "desktop"}:
        return "glfw"
    if value in {"headless", "none", "null"}:
        return "headless"
    return value


def _normalize_log_format(raw: str, fallback: str) -> str:
    value = str(raw).strip().lower()
    if value not in {"text", "json"}:
        return fallback
    return value


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with paprika-prefixed override."""
    value = _raw("PAPRIKA_LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


def load_runtime_config(*, env: Mapping[str, str] | None = None) -> RuntimeConfig:
    scope_env = env
    backend = _normalize_window_backend(_text("PAPRIKA_WINDOW_BACKEND", "glfw", env=scope_env))
    if _flag("PAPRIKA_HEADLESS", False, env=scope_env):
        backend = "headless"
    max_frames = _int("PAPRIKA_HEADLESS_MAX_FRAMES", 0, minimum=0, env=scope_env)
    log_file = _text("PAPRIKA_LOG_FILE", "", env=scope_env)

    return RuntimeConfig(
        navigator=RuntimeNavigatorConfig(
            history_limit=_int(
                "PAPRIKA_HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT, minimum=0, env=scope_env
            ),
        ),
        window=RuntimeWindowConfig(
            backend=backend,
            width=_int("PAPRIKA_WINDOW_WIDTH", 800, minimum=1, env=scope_env),
            height=_int("PAPRIKA_WINDOW_HEIGHT", 450, minimum=1, env=scope_env),
            title=_text("PAPRIKA_WINDOW_TITLE", "paprika", env=scope_env),
            vsync=_flag("PAPRIKA_RENDER_VSYNC", True, env=scope_env),
            headless_max_frames=max_frames if max_frames > 0 else None,
        ),
        logging=PaprikaLoggingConfig(
            level_name=resolve_log_level_name(env=scope_env),
            console_format=_normalize_log_format(
                _text("PAPRIKA_LOG_FORMAT", "text", env=scope_env), "text"
            ),
            file_path=log_file if log_file else None,
            file_format=_normalize_log_format(
                _text("PAPRIKA_LOG_FILE_FORMAT", "json", env=scope_env), "json"
            ),
        ),
    )


def initialize_runtime_config(*, env: Mapping[str, str] | None = None) -> RuntimeConfig:
    config = load_runtime_config(env=env)
    _RUNTIME_CONFIG.set(config)
    return config


def set_runtime_config(config: RuntimeConfig) -> RuntimeConfig:
    _RUNTIME_CONFIG.set(config)
    return config


def get_runtime_config() -> RuntimeConfig:
    config = _RUNTIME_CONFIG.get()
    if config is not None:
        return config
    return initialize_runtime_config()


__all__ = [
    "RuntimeConfig",
    "RuntimeNavigatorConfig",
    "RuntimeWindowConfig",
    "get_runtime_config",
    "initialize_runtime_config",
    "load_runtime_config",
    "resolve_log_level_name",
    "set_runtime_config",
]
