"""Public navigator API contracts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from paprika.api.page import Page

if TYPE_CHECKING:
    from paprika.api.host import HostBackend

DEFAULT_HISTORY_LIMIT = 10


@runtime_checkable
class CancellationSignal(Protocol):
    """Polled cancellation source; `threading.Event` satisfies it."""

    def is_set(self) -> bool:
        """Return whether cancellation was requested."""


class Navigator(Protocol):
    """Bounded page history with exclusive active-page mounting."""

    @property
    def history_limit(self) -> int:
        """Return retained page bound."""

    @property
    def default_page(self) -> Page | None:
        """Return fallback page for an empty history."""

    def push(self, page: Page) -> None:
        """Make `page` active, superseding the current one."""

    def pop(self) -> Page | None:
        """Remove active page and reactivate the previous one."""

    def current(self) -> Page | None:
        """Return active page."""

    def pages(self) -> tuple[Page, ...]:
        """Return oldest-first history snapshot."""

    def set_value(self, key: str, value: object) -> None:
        """Store a shared value, replacing any previous one."""

    def get_value(self, key: str, default: object | None = None) -> object | None:
        """Return a shared value or `default`."""

    def require_value(self, key: str) -> object:
        """Return a shared value or raise KeyError."""

    def cancel(self) -> None:
        """Request the run loop to stop at the next frame boundary."""

    def run(self, host: HostBackend) -> int:
        """Drive update/draw frames until close or cancellation."""

    def close(self) -> None:
        """Unmount the active page and drop history and shared values."""


def create_navigator(
    *,
    history_limit: int = DEFAULT_HISTORY_LIMIT,
    default_page: Page | None = None,
    cancellation: CancellationSignal | None = None,
) -> Navigator:
    """Create default navigator implementation."""
    from paprika.runtime.navigator import RuntimeNavigator

    return RuntimeNavigator(
        history_limit=history_limit,
        default_page=default_page,
        cancellation=cancellation,
    )


__all__ = [
    "CancellationSignal",
    "DEFAULT_HISTORY_LIMIT",
    "Navigator",
    "create_navigator",
]
