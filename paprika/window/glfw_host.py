"""GLFW-backed host window for the navigator run loop."""

from __future__ import annotations

import logging
from typing import Any

from paprika.api.host import HostBackend
from paprika.runtime.errors import host_teardown_errors, log_host_error

_LOG = logging.getLogger("paprika.window")


def _import_glfw() -> Any:
    try:
        import glfw
    except ImportError as exc:
        raise RuntimeError("glfw window backend requires the 'glfw' package") from exc
    return glfw


class GlfwHost(HostBackend):
    """Window with a GL context; polls events on begin and swaps on end.

    Key presses seen while polling stay visible through the next page update,
    which runs before the following ``begin_frame``.
    """

    def __init__(
        self,
        *,
        width: int,
        height: int,
        title: str,
        vsync: bool = True,
        glfw_module: Any | None = None,
    ) -> None:
        self._glfw = glfw_module if glfw_module is not None else _import_glfw()
        self._pressed: set[int] = set()
        self._title = title
        if not self._glfw.init():
            raise RuntimeError("glfw initialization failed")
        window = self._glfw.create_window(int(width), int(height), title, None, None)
        if not window:
            self._glfw.terminate()
            raise RuntimeError(f"glfw could not create a {width}x{height} window")
        self._window: Any | None = window
        self._glfw.make_context_current(window)
        self._glfw.swap_interval(1 if vsync else 0)
        self._glfw.set_key_callback(window, self._on_key)
        _LOG.info(
            "glfw_window_open",
            extra={"backend": "glfw", "width": int(width), "height": int(height), "vsync": vsync},
        )

    @property
    def title(self) -> str:
        return self._title

    def _on_key(self, window: Any, key: int, scancode: int, action: int, mods: int) -> None:
        _ = (window, scancode, mods)
        if action == self._glfw.PRESS:
            self._pressed.add(key)

    def key_pressed(self, key: int) -> bool:
        """Return whether ``key`` went down during the last event poll."""
        return key in self._pressed

    def set_title(self, title: str) -> None:
        if self._window is None or title == self._title:
            return
        self._title = title
        self._glfw.set_window_title(self._window, title)

    def should_close(self) -> bool:
        if self._window is None:
            return True
        return bool(self._glfw.window_should_close(self._window))

    def request_close(self) -> None:
        if self._window is not None:
            self._glfw.set_window_should_close(self._window, True)

    def begin_frame(self) -> None:
        self._pressed.clear()
        self._glfw.poll_events()

    def end_frame(self) -> None:
        if self._window is not None:
            self._glfw.swap_buffers(self._window)

    def close(self) -> None:
        window = self._window
        if window is None:
            return
        self._window = None
        tolerated = host_teardown_errors(self._glfw)
        try:
            self._glfw.destroy_window(window)
        except tolerated:
            log_host_error(_LOG, "glfw_destroy_window_failed", backend="glfw")
        try:
            self._glfw.terminate()
        except tolerated:
            log_host_error(_LOG, "glfw_terminate_failed", backend="glfw")
        _LOG.info("glfw_window_closed", extra={"backend": "glfw"})


__all__ = ["GlfwHost"]
