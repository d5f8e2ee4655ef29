"""Host rendering backend contracts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from paprika.runtime.config import RuntimeConfig


class HostBackend(Protocol):
    """Frame bracketing surface the navigator run loop drives.

    Drawing primitives, input polling and frame pacing stay behind this port;
    the navigator only asks whether to stop and brackets each frame.
    """

    def should_close(self) -> bool:
        """Return whether the host window asked to close."""

    def begin_frame(self) -> None:
        """Start one frame."""

    def end_frame(self) -> None:
        """Finish and present one frame."""

    def close(self) -> None:
        """Release window and backend resources."""


def create_host(config: RuntimeConfig | None = None) -> HostBackend:
    """Create the host backend selected by runtime configuration."""
    from paprika.window.factory import create_host_backend

    return create_host_backend(config)


__all__ = ["HostBackend", "create_host"]
