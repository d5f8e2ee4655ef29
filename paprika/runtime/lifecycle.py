"""Page lifecycle dispatch tolerant of an absent page."""

from __future__ import annotations

from paprika.api.navigator import Navigator
from paprika.api.page import Page


def mount_page(nav: Navigator, page: Page | None) -> None:
    if page is None:
        return
    page.mount(nav)


def unmount_page(nav: Navigator, page: Page | None) -> None:
    if page is None:
        return
    page.unmount(nav)


def update_page(nav: Navigator, page: Page | None) -> None:
    if page is None:
        return
    page.update(nav)


def draw_page(nav: Navigator, page: Page | None) -> None:
    if page is None:
        return
    page.draw(nav)


__all__ = ["draw_page", "mount_page", "unmount_page", "update_page"]
