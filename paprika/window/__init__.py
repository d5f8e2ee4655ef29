"""Host backend adapters."""

from paprika.window.factory import create_host_backend
from paprika.window.glfw_host import GlfwHost
from paprika.window.headless import HeadlessHost

__all__ = ["GlfwHost", "HeadlessHost", "create_host_backend"]
