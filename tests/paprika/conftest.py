from __future__ import annotations

from collections.abc import Callable

import pytest


class RecordingPage:
    def __init__(self, name: str, log: list[tuple[str, str]]) -> None:
        self.name = name
        self._log = log
        self.on_update: Callable[[object], None] | None = None
        self.on_draw: Callable[[object], None] | None = None

    def __repr__(self) -> str:
        return f"RecordingPage({self.name!r})"

    def mount(self, nav) -> None:
        self._log.append(("mount", self.name))

    def unmount(self, nav) -> None:
        self._log.append(("unmount", self.name))

    def update(self, nav) -> None:
        self._log.append(("update", self.name))
        if self.on_update is not None:
            self.on_update(nav)

    def draw(self, nav) -> None:
        self._log.append(("draw", self.name))
        if self.on_draw is not None:
            self.on_draw(nav)


class FakeHost:
    def __init__(self, log: list[tuple[str, str]], *, max_frames: int | None = None) -> None:
        self._log = log
        self._max_frames = max_frames
        self.frames = 0
        self.close_requested = False
        self.closed = False

    def should_close(self) -> bool:
        if self.close_requested:
            return True
        return self._max_frames is not None and self.frames >= self._max_frames

    def begin_frame(self) -> None:
        self._log.append(("begin_frame", ""))

    def end_frame(self) -> None:
        self._log.append(("end_frame", ""))
        self.frames += 1

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def calls() -> list[tuple[str, str]]:
    return []


@pytest.fixture
def make_page(calls) -> Callable[[str], RecordingPage]:
    def _make(name: str) -> RecordingPage:
        return RecordingPage(name, calls)

    return _make


@pytest.fixture
def make_host(calls) -> Callable[..., FakeHost]:
    def _make(*, max_frames: int | None = None) -> FakeHost:
        return FakeHost(calls, max_frames=max_frames)

    return _make
