"""Public page lifecycle contract."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from paprika.api.navigator import Navigator


@runtime_checkable
class Page(Protocol):
    """One logical screen driven by the navigator.

    A page is mounted when it becomes the active page and unmounted when it
    stops being active. While active it is updated and then drawn once per
    frame. Every hook receives the owning navigator so a page can read shared
    values or push/pop from its own update.
    """

    def mount(self, nav: Navigator) -> None:
        """Acquire per-page resources; called once per active period."""

    def unmount(self, nav: Navigator) -> None:
        """Release whatever mount acquired; safe when mount acquired nothing."""

    def update(self, nav: Navigator) -> None:
        """Advance page state; may push or pop, effective next frame."""

    def draw(self, nav: Navigator) -> None:
        """Render current state; must not push or pop."""


class BasePage:
    """Page with no-op hooks, for pages that only need some of them."""

    def mount(self, nav: Navigator) -> None:
        _ = nav

    def unmount(self, nav: Navigator) -> None:
        _ = nav

    def update(self, nav: Navigator) -> None:
        _ = nav

    def draw(self, nav: Navigator) -> None:
        _ = nav


__all__ = ["BasePage", "Page"]
