"""Runtime-owned public entrypoint for navigator execution."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from paprika.api.host import HostBackend
from paprika.api.navigator import CancellationSignal
from paprika.api.page import Page
from paprika.runtime.config import RuntimeConfig, initialize_runtime_config
from paprika.runtime.logging import configure_logging, shutdown_logging
from paprika.runtime.navigator import RuntimeNavigator
from paprika.window.factory import create_host_backend

_LOG = logging.getLogger("paprika.runtime")

HOST_VALUE_KEY = "host"
CONFIG_VALUE_KEY = "config"


def run_app(
    *,
    default_page: Page | None = None,
    config: RuntimeConfig | None = None,
    host: HostBackend | None = None,
    cancellation: CancellationSignal | None = None,
    values: Mapping[str, object] | None = None,
) -> int:
    """Compose logging, host and navigator, run until close, then tear down.

    The host and runtime config are published to pages as shared values
    under ``"host"`` and ``"config"``.
    """
    runtime_config = config or initialize_runtime_config()
    configure_logging(runtime_config.logging)
    owned_host = host is None
    active_host: HostBackend | None = host
    navigator: RuntimeNavigator | None = None
    try:
        if active_host is None:
            active_host = create_host_backend(runtime_config)
        navigator = RuntimeNavigator.from_config(
            runtime_config,
            default_page=default_page,
            cancellation=cancellation,
        )
        navigator.set_value(HOST_VALUE_KEY, active_host)
        navigator.set_value(CONFIG_VALUE_KEY, runtime_config)
        for key, value in (values or {}).items():
            navigator.set_value(key, value)
        _LOG.info(
            "app_start",
            extra={
                "backend": runtime_config.window.backend,
                "history_limit": runtime_config.navigator.history_limit,
            },
        )
        return navigator.run(active_host)
    finally:
        try:
            if navigator is not None:
                navigator.close()
        finally:
            if owned_host and active_host is not None:
                active_host.close()
            _LOG.info("app_stop")
            shutdown_logging()


__all__ = ["CONFIG_VALUE_KEY", "HOST_VALUE_KEY", "run_app"]
