"""Demo pages navigated with the arrow keys."""

from __future__ import annotations

import logging

from paprika.api.navigator import Navigator
from paprika.api.page import BasePage
from paprika.runtime.entrypoint import HOST_VALUE_KEY

_LOG = logging.getLogger("paprika.demo")

# GLFW key codes
KEY_RIGHT = 262
KEY_LEFT = 263


class CounterPage(BasePage):
    """Numbered page: right arrow opens the next one, left arrow goes back."""

    def __init__(self, number: int = 1) -> None:
        self.number = number

    def __repr__(self) -> str:
        return f"CounterPage({self.number})"

    def mount(self, nav: Navigator) -> None:
        _LOG.debug("demo_page_mount number=%d", self.number)

    def unmount(self, nav: Navigator) -> None:
        _LOG.debug("demo_page_unmount number=%d", self.number)

    def update(self, nav: Navigator) -> None:
        key_pressed = getattr(nav.get_value(HOST_VALUE_KEY), "key_pressed", None)
        if not callable(key_pressed):
            return
        if key_pressed(KEY_RIGHT):
            nav.push(CounterPage(self.number + 1))
        elif key_pressed(KEY_LEFT):
            nav.pop()

    def draw(self, nav: Navigator) -> None:
        set_title = getattr(nav.get_value(HOST_VALUE_KEY), "set_title", None)
        if callable(set_title):
            set_title(self.label())

    def label(self) -> str:
        return f"This is page {self.number}"


__all__ = ["CounterPage", "KEY_LEFT", "KEY_RIGHT"]
