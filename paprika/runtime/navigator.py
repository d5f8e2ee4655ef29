"""Bounded page history and the frame-loop driver."""

from __future__ import annotations

import logging

from paprika.api.host import HostBackend
from paprika.api.navigator import DEFAULT_HISTORY_LIMIT, CancellationSignal
from paprika.api.page import Page
from paprika.runtime.cancellation import NEVER_CANCELLED, CancellationToken
from paprika.runtime.config import RuntimeConfig
from paprika.runtime.context import NavigatorContext
from paprika.runtime.lifecycle import draw_page, mount_page, unmount_page, update_page

_LOG = logging.getLogger("paprika.navigator")


def _page_name(page: Page | None) -> str | None:
    return None if page is None else type(page).__name__


class RuntimeNavigator:
    """Linear page history with exactly one mounted (active) page.

    The last entry of the history is the active page. Pushing supersedes it,
    popping reactivates the previous entry. When the history is at capacity the
    oldest entry is dropped without lifecycle callbacks, since only the active
    page is ever mounted.

    A ``history_limit`` of 0 keeps no past pages: the active page is still held
    so it can be updated and drawn, but pushing discards it and popping leaves
    the history empty.
    """

    def __init__(
        self,
        *,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
        default_page: Page | None = None,
        cancellation: CancellationSignal | None = None,
        context: NavigatorContext | None = None,
    ) -> None:
        if isinstance(history_limit, bool) or not isinstance(history_limit, int):
            raise ValueError(f"history_limit must be an int, got {history_limit!r}")
        if history_limit < 0:
            raise ValueError("history_limit must be >= 0")
        if default_page is not None and not isinstance(default_page, Page):
            raise TypeError(f"default_page does not implement Page: {default_page!r}")
        self._history_limit = history_limit
        self._default_page = default_page
        self._cancellation: CancellationSignal = cancellation or NEVER_CANCELLED
        self._stop = CancellationToken()
        self._context = context if context is not None else NavigatorContext()
        self._pages: list[Page] = []

    @classmethod
    def from_config(
        cls,
        config: RuntimeConfig,
        *,
        default_page: Page | None = None,
        cancellation: CancellationSignal | None = None,
    ) -> RuntimeNavigator:
        return cls(
            history_limit=config.navigator.history_limit,
            default_page=default_page,
            cancellation=cancellation,
        )

    @property
    def history_limit(self) -> int:
        return self._history_limit

    @property
    def retains_history(self) -> bool:
        """Return whether popping can reactivate an earlier page."""
        return self._history_limit > 1

    @property
    def default_page(self) -> Page | None:
        return self._default_page

    @property
    def context(self) -> NavigatorContext:
        return self._context

    @property
    def depth(self) -> int:
        return len(self._pages)

    def _capacity(self) -> int:
        # The active page always occupies one slot, even with no history.
        return max(1, self._history_limit)

    def push(self, page: Page) -> None:
        """Make ``page`` the active page."""
        if not isinstance(page, Page):
            raise TypeError(f"cannot push non-page object: {page!r}")
        unmount_page(self, self.current())
        while len(self._pages) >= self._capacity():
            evicted = self._pages.pop(0)
            _LOG.debug(
                "navigator_evict",
                extra={"page": _page_name(evicted), "depth": len(self._pages)},
            )
        self._pages.append(page)
        _LOG.debug("navigator_push", extra={"page": _page_name(page), "depth": len(self._pages)})
        mount_page(self, page)

    def pop(self) -> Page | None:
        """Remove the active page and return it, or None when history is empty."""
        if not self._pages:
            return None
        last_page = self._pages[-1]
        unmount_page(self, last_page)
        self._pages.pop()
        _LOG.debug(
            "navigator_pop", extra={"page": _page_name(last_page), "depth": len(self._pages)}
        )
        if self._pages:
            mount_page(self, self._pages[-1])
        return last_page

    def current(self) -> Page | None:
        if not self._pages:
            return None
        return self._pages[-1]

    def pages(self) -> tuple[Page, ...]:
        """Return oldest-first history snapshot."""
        return tuple(self._pages)

    def set_value(self, key: str, value: object) -> None:
        self._context.set(key, value)

    def get_value(self, key: str, default: object | None = None) -> object | None:
        return self._context.get(key, default)

    def require_value(self, key: str) -> object:
        return self._context.require(key)

    def cancel(self) -> None:
        """Stop the run loop at the next frame boundary.

        A supplied cancellation signal that can itself be cancelled is
        cancelled too, so other loops sharing it stop as well.
        """
        self._stop.cancel()
        cancel_signal = getattr(self._cancellation, "cancel", None)
        if callable(cancel_signal):
            cancel_signal()

    @property
    def cancelled(self) -> bool:
        return self._stop.is_set() or self._cancellation.is_set()

    def run(self, host: HostBackend) -> int:
        """Update and draw the active page once per frame until stopped.

        Returns the number of frames bracketed by the host, including idle
        frames run while no page was available.
        """
        frames = 0
        _LOG.info(
            "navigator_run_start",
            extra={
                "history_limit": self._history_limit,
                "page": _page_name(self._default_page),
            },
        )
        while not host.should_close():
            if self.cancelled:
                _LOG.info("navigator_run_cancelled", extra={"frames": frames})
                break
            page = self.current()
            if page is None and self._default_page is not None:
                self.push(self._default_page)
                page = self._default_page
            if page is None:
                # Idle until a page exists; keep the host pumping events.
                host.begin_frame()
                host.end_frame()
                frames += 1
                continue
            update_page(self, page)
            host.begin_frame()
            draw_page(self, page)
            host.end_frame()
            frames += 1
        _LOG.info("navigator_run_stop", extra={"frames": frames, "depth": len(self._pages)})
        return frames

    def close(self) -> None:
        """Unmount the active page and drop history and shared values."""
        active = self.current()
        if active is not None:
            unmount_page(self, active)
        self._pages.clear()
        self._context.clear()


Navigator = RuntimeNavigator
