from __future__ import annotations

from typing import Any, Callable

import wx

from ..focus import FocusChangeDetector


class WxTextField:
    """
    `EditableText` view of a `wx.TextCtrl`.

    wx routes events to the control itself, so `on_event` only lets the native
    handler run; the adapter exists so the detector can poll `is_focused`.
    """

    def __init__(self, ctrl: wx.TextCtrl):
        self.ctrl = ctrl

    def min_size(self) -> tuple[int, int]:
        sz = self.ctrl.GetBestSize()
        return (sz.width, sz.height)

    def layout(self, width: int, height: int) -> tuple[int, int]:
        self.ctrl.SetSize(width, height)
        sz = self.ctrl.GetSize()
        return (sz.width, sz.height)

    def hit_test(self, x: int, y: int) -> bool:
        return self.ctrl.HitTest(wx.Point(x, y))[0] != wx.TE_HT_UNKNOWN

    def on_event(self, event: Any) -> Any:
        if isinstance(event, wx.Event):
            event.Skip()
        return event

    def draw(self, canvas: Any) -> None:
        self.ctrl.Refresh()

    def is_focused(self) -> bool:
        return self.ctrl.HasFocus()


def wrap_search_field(ctrl: wx.TextCtrl, on_focus_changed: Callable[[bool], None]) -> FocusChangeDetector:
    """
    Attach a FocusChangeDetector to a search box.

    Focus events are forwarded as they arrive; the focus poll runs once, after
    the current batch of pending events has been dispatched.
    """
    detector = FocusChangeDetector(WxTextField(ctrl), on_focus_changed, focused=ctrl.HasFocus())
    pending = {"queued": False}

    def end_pass() -> None:
        pending["queued"] = False
        if not ctrl:
            return
        detector.end_pass()

    def on_focus_event(evt: wx.FocusEvent) -> None:
        detector.handle_event(evt)
        if not pending["queued"]:
            pending["queued"] = True
            wx.CallAfter(end_pass)

    ctrl.Bind(wx.EVT_SET_FOCUS, on_focus_event)
    ctrl.Bind(wx.EVT_KILL_FOCUS, on_focus_event)
    return detector
