"""Paprika runtime modules."""

from paprika.runtime.cancellation import NEVER_CANCELLED, CancellationToken
from paprika.runtime.config import RuntimeConfig, get_runtime_config, load_runtime_config
from paprika.runtime.context import NavigatorContext
from paprika.runtime.lifecycle import draw_page, mount_page, unmount_page, update_page
from paprika.runtime.logging import configure_logging, setup_logging
from paprika.runtime.navigator import Navigator, RuntimeNavigator

__all__ = [
    "CancellationToken",
    "NEVER_CANCELLED",
    "Navigator",
    "NavigatorContext",
    "RuntimeConfig",
    "RuntimeNavigator",
    "configure_logging",
    "draw_page",
    "get_runtime_config",
    "load_runtime_config",
    "mount_page",
    "setup_logging",
    "unmount_page",
    "update_page",
]
