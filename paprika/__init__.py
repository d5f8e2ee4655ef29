"""Page navigation for frame-based render loops."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from paprika.api.page import Page


def run(*, default_page: "Page | None" = None) -> int:
    """Run a navigator with environment-driven host and logging."""
    from paprika.runtime.entrypoint import run_app

    return run_app(default_page=default_page)


__all__ = ["run"]
