"""Cooperative cancellation for the navigator run loop."""

from __future__ import annotations

import threading


class CancellationToken:
    """Settable cancellation flag, safe to trigger from another thread."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation; idempotent."""
        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


class _NeverCancelled:
    """Signal that never fires."""

    def is_set(self) -> bool:
        return False


NEVER_CANCELLED = _NeverCancelled()

__all__ = ["CancellationToken", "NEVER_CANCELLED"]
