from __future__ import annotations

import pytest

from paprika.runtime.lifecycle import draw_page, mount_page, unmount_page, update_page
from paprika.runtime.navigator import Navigator


@pytest.mark.parametrize("dispatch", [mount_page, unmount_page, update_page, draw_page])
def test_dispatch_to_absent_page_is_noop(dispatch) -> None:
    dispatch(Navigator(), None)


def test_dispatch_calls_matching_hook(make_page, calls) -> None:
    nav = Navigator()
    page = make_page("a")
    mount_page(nav, page)
    update_page(nav, page)
    draw_page(nav, page)
    unmount_page(nav, page)
    assert calls == [("mount", "a"), ("update", "a"), ("draw", "a"), ("unmount", "a")]


def test_dispatch_passes_owning_navigator() -> None:
    seen: list[object] = []

    class _Page:
        def mount(self, nav) -> None:
            seen.append(nav)

        def unmount(self, nav) -> None:
            seen.append(nav)

        def update(self, nav) -> None:
            seen.append(nav)

        def draw(self, nav) -> None:
            seen.append(nav)

    nav = Navigator()
    page = _Page()
    for dispatch in (mount_page, update_page, draw_page, unmount_page):
        dispatch(nav, page)
    assert seen == [nav] * 4
