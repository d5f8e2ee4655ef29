"""Host backend selection and factory helpers."""

from __future__ import annotations

from paprika.api.host import HostBackend
from paprika.runtime.config import RuntimeConfig, get_runtime_config
from paprika.window.glfw_host import GlfwHost
from paprika.window.headless import HeadlessHost


def create_host_backend(config: RuntimeConfig | None = None) -> HostBackend:
    window = (config or get_runtime_config()).window
    if window.backend == "headless":
        return HeadlessHost(max_frames=window.headless_max_frames)
    if window.backend == "glfw":
        return GlfwHost(
            width=window.width,
            height=window.height,
            title=window.title,
            vsync=window.vsync,
        )
    raise RuntimeError(f"Unsupported PAPRIKA_WINDOW_BACKEND: {window.backend!r}")


__all__ = ["create_host_backend"]
