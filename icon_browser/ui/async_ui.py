from __future__ import annotations

import threading
from typing import Callable

import wx


def is_window_alive(win: wx.Window | None) -> bool:
    """
    Guard used before touching wx objects from deferred callbacks.
    """
    if not win:
        return False
    try:
        return not win.IsBeingDeleted()
    except RuntimeError:
        # wrapped C/C++ object has been deleted
        return False


class UiRepeater:
    """
    Periodic callback helper that does NOT use wx.Timer.

    Calls `callback()` on the UI thread every `interval_ms` until `stop()` is
    called or the owner closes. The worker thread only sleeps and posts
    `wx.CallAfter`; it never touches widgets.
    """

    def __init__(self, owner: wx.Window, *, interval_ms: int, callback: Callable[[], None]):
        self._owner = owner
        self._interval_s = max(1, int(interval_ms)) / 1000.0
        self._callback = callback
        self._stop = threading.Event()

        owner.Bind(wx.EVT_CLOSE, self._on_owner_close)

        def loop() -> None:
            while not self._stop.wait(self._interval_s):
                if not is_window_alive(self._owner):
                    break
                try:
                    wx.CallAfter(self._fire)
                except RuntimeError:
                    break

        threading.Thread(target=loop, daemon=True).start()

    @property
    def running(self) -> bool:
        return not self._stop.is_set()

    def stop(self) -> None:
        if self._stop.is_set():
            return
        self._stop.set()
        if is_window_alive(self._owner):
            self._owner.Unbind(wx.EVT_CLOSE, handler=self._on_owner_close)

    def _fire(self) -> None:
        # Drop ticks queued before stop().
        if self._stop.is_set() or not is_window_alive(self._owner):
            return
        self._callback()

    def _on_owner_close(self, evt: wx.CloseEvent) -> None:
        self.stop()
        evt.Skip()
