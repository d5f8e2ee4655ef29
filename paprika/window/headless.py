"""Windowless host backend."""

from __future__ import annotations

from paprika.api.host import HostBackend


class HeadlessHost(HostBackend):
    """Frame counter that closes after an optional frame budget."""

    def __init__(self, *, max_frames: int | None = None) -> None:
        if max_frames is not None and max_frames < 0:
            raise ValueError("max_frames must be >= 0")
        self._max_frames = max_frames
        self._close_requested = False
        self._in_frame = False
        self.frames = 0

    def should_close(self) -> bool:
        if self._close_requested:
            return True
        return self._max_frames is not None and self.frames >= self._max_frames

    def request_close(self) -> None:
        self._close_requested = True

    def begin_frame(self) -> None:
        if self._in_frame:
            raise RuntimeError("begin_frame called twice without end_frame")
        self._in_frame = True

    def end_frame(self) -> None:
        if not self._in_frame:
            raise RuntimeError("end_frame called without begin_frame")
        self._in_frame = False
        self.frames += 1

    def close(self) -> None:
        self._close_requested = True


__all__ = ["HeadlessHost"]
