from __future__ import annotations

from paprika.demo.pages import KEY_LEFT, KEY_RIGHT, CounterPage
from paprika.runtime.entrypoint import HOST_VALUE_KEY
from paprika.runtime.navigator import Navigator


class _KeyHost:
    def __init__(self) -> None:
        self.pressed: set[int] = set()
        self.title = ""

    def key_pressed(self, key: int) -> bool:
        return key in self.pressed

    def set_title(self, title: str) -> None:
        self.title = title


def _nav_with_host() -> tuple[Navigator, _KeyHost]:
    nav = Navigator(history_limit=15)
    host = _KeyHost()
    nav.set_value(HOST_VALUE_KEY, host)
    return nav, host


def test_right_arrow_pushes_next_page() -> None:
    nav, host = _nav_with_host()
    nav.push(CounterPage(1))
    host.pressed = {KEY_RIGHT}
    nav.current().update(nav)
    current = nav.current()
    assert isinstance(current, CounterPage)
    assert current.number == 2
    assert nav.depth == 2


def test_left_arrow_pops_back() -> None:
    nav, host = _nav_with_host()
    first = CounterPage(1)
    nav.push(first)
    nav.push(CounterPage(2))
    host.pressed = {KEY_LEFT}
    nav.current().update(nav)
    assert nav.current() is first


def test_draw_sets_window_title() -> None:
    nav, host = _nav_with_host()
    page = CounterPage(3)
    nav.push(page)
    page.draw(nav)
    assert host.title == "This is page 3"


def test_counter_page_ignores_hosts_without_keyboard() -> None:
    nav = Navigator()
    page = CounterPage(1)
    nav.push(page)
    page.update(nav)
    page.draw(nav)
    assert nav.pages() == (page,)
