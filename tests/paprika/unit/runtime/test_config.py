from __future__ import annotations

from paprika.runtime import config as config_module
from paprika.runtime.config import (
    get_runtime_config,
    initialize_runtime_config,
    load_runtime_config,
    resolve_log_level_name,
)


def test_load_runtime_config_defaults() -> None:
    cfg = load_runtime_config(env={})
    assert cfg.navigator.history_limit == 10
    assert cfg.window.backend == "glfw"
    assert (cfg.window.width, cfg.window.height) == (800, 450)
    assert cfg.window.title == "paprika"
    assert cfg.window.vsync is True
    assert cfg.window.headless_max_frames is None
    assert cfg.logging.level_name == "INFO"
    assert cfg.logging.console_format == "text"
    assert cfg.logging.file_path is None
    assert cfg.logging.file_format == "json"


def test_load_runtime_config_parses_values() -> None:
    cfg = load_runtime_config(
        env={
            "PAPRIKA_HISTORY_LIMIT": "15",
            "PAPRIKA_WINDOW_BACKEND": "HEADLESS",
            "PAPRIKA_HEADLESS_MAX_FRAMES": "120",
            "PAPRIKA_WINDOW_WIDTH": "1024",
            "PAPRIKA_WINDOW_HEIGHT": "768",
            "PAPRIKA_WINDOW_TITLE": "demo",
            "PAPRIKA_RENDER_VSYNC": "off",
            "PAPRIKA_LOG_LEVEL": "debug",
            "PAPRIKA_LOG_FORMAT": "json",
            "PAPRIKA_LOG_FILE": "logs/paprika.jsonl",
            "PAPRIKA_LOG_FILE_FORMAT": "text",
        }
    )
    assert cfg.navigator.history_limit == 15
    assert cfg.window.backend == "headless"
    assert cfg.window.headless_max_frames == 120
    assert (cfg.window.width, cfg.window.height) == (1024, 768)
    assert cfg.window.title == "demo"
    assert cfg.window.vsync is False
    assert cfg.logging.level_name == "DEBUG"
    assert cfg.logging.console_format == "json"
    assert cfg.logging.file_path == "logs/paprika.jsonl"
    assert cfg.logging.file_format == "text"


def test_headless_flag_overrides_backend() -> None:
    cfg = load_runtime_config(env={"PAPRIKA_WINDOW_BACKEND": "glfw", "PAPRIKA_HEADLESS": "1"})
    assert cfg.window.backend == "headless"


def test_invalid_values_fall_back_and_clamp() -> None:
    cfg = load_runtime_config(
        env={
            "PAPRIKA_HISTORY_LIMIT": "-4",
            "PAPRIKA_WINDOW_WIDTH": "wide",
            "PAPRIKA_HEADLESS_MAX_FRAMES": "-1",
            "PAPRIKA_RENDER_VSYNC": "maybe",
            "PAPRIKA_LOG_FORMAT": "xml",
        }
    )
    assert cfg.navigator.history_limit == 0
    assert cfg.window.width == 800
    assert cfg.window.headless_max_frames is None
    assert cfg.window.vsync is True
    assert cfg.logging.console_format == "text"


def test_resolve_log_level_prefers_paprika_prefix(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("PAPRIKA_LOG_LEVEL", "error")
    assert resolve_log_level_name() == "ERROR"
    monkeypatch.delenv("PAPRIKA_LOG_LEVEL")
    assert resolve_log_level_name() == "WARNING"


def test_runtime_config_is_cached_after_initialize(monkeypatch) -> None:
    monkeypatch.setenv("PAPRIKA_HISTORY_LIMIT", "4")
    initialized = initialize_runtime_config()
    monkeypatch.setenv("PAPRIKA_HISTORY_LIMIT", "9")
    try:
        assert get_runtime_config() is initialized
        assert get_runtime_config().navigator.history_limit == 4
    finally:
        config_module._RUNTIME_CONFIG.set(None)
