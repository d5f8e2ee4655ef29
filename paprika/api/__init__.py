"""Public paprika API contracts."""

from paprika.api.host import HostBackend, create_host
from paprika.api.logging import PaprikaLoggingConfig, get_logger
from paprika.api.navigator import (
    DEFAULT_HISTORY_LIMIT,
    CancellationSignal,
    Navigator,
    create_navigator,
)
from paprika.api.page import BasePage, Page

__all__ = [
    "BasePage",
    "CancellationSignal",
    "DEFAULT_HISTORY_LIMIT",
    "HostBackend",
    "Navigator",
    "Page",
    "PaprikaLoggingConfig",
    "create_host",
    "create_navigator",
    "get_logger",
]
