"""Host backend exception policy."""

from __future__ import annotations

import logging
from typing import Any, TypeAlias

HostErrors: TypeAlias = tuple[type[BaseException], ...]

# Failures a host may raise while tearing down an already-broken window.
BASE_HOST_ERRORS: HostErrors = (RuntimeError, OSError)


def host_teardown_errors(backend_module: Any) -> HostErrors:
    """Return tolerated teardown errors, including the backend's own error type.

    GLFW bindings raise ``GLFWError`` when error reporting is set to raise.
    """
    backend_error = getattr(backend_module, "GLFWError", None)
    if isinstance(backend_error, type) and issubclass(backend_error, Exception):
        return (*BASE_HOST_ERRORS, backend_error)
    return BASE_HOST_ERRORS


def log_host_error(logger: logging.Logger, event: str, *, backend: str) -> None:
    """Log a tolerated host failure with its traceback."""
    logger.warning(event, exc_info=True, extra={"backend": backend})
