from __future__ import annotations

from typing import Callable

import wx

from ..animation import CopyKind
from ..catalog import IconRecord, codepoint_to_char
from ..config import Config
from ..debug import debug_log
from ..state import AppState
from .async_ui import UiRepeater, is_window_alive
from .focus_text import wrap_search_field


APP_TITLE = "Material Icon Browser"

SPACING_SMALL = 5
SPACING_NORMAL = 10
SPACING_LARGE = 20

ICON_SIZE_BIG = 72
ICON_SIZE_MEDIUM = 26
ICON_SIZE_SMALL = 18
ICON_SIZE_TINY = 11
ICON_SIZE_TOOLBAR = 18

SIDEBAR_WIDTH = 200

CODEPOINT_COPY = 57677
CODEPOINT_SUCCESS = 59693
CODEPOINT_GRID = 59824
CODEPOINT_LIST = 57921
CODEPOINT_SEARCH = 59574
CODEPOINT_CLOSE = 58829
CODEPOINT_CLOSE_CIRCLE = 58825

COLOUR_SUCCESS = wx.Colour(46, 160, 67)
COLOUR_SELECTED_BG = wx.Colour(220, 232, 250)


def glyph(codepoint: int | None) -> str:
    if codepoint is None:
        return ""
    try:
        return codepoint_to_char(codepoint)
    except ValueError:
        return ""


def copy_to_clipboard(text: str) -> bool:
    if not wx.TheClipboard.Open():
        debug_log("clipboard open failed")
        return False
    try:
        return bool(wx.TheClipboard.SetData(wx.TextDataObject(text)))
    finally:
        wx.TheClipboard.Close()


class IconBrowserFrame(wx.Frame):
    """
    Sidebar (categories) | toolbar + icon grid/list | optional preview.

    Everything on screen is derived from `self.state`; handlers call one
    AppState transition and then re-render the affected part.
    """

    def __init__(self, parent: wx.Window | None, state: AppState, cfg: Config):
        super().__init__(parent, title=APP_TITLE, size=(cfg.window_width, cfg.window_height))
        self.SetMinSize((cfg.min_width, cfg.min_height))
        self.state = state
        self._cfg = cfg
        self._repeater: UiRepeater | None = None
        self._search_detector = None
        self._last_per_row = state.items_per_row()

        self._icon_face = cfg.icon_font_face
        self._bold = self.GetFont().Bold()

        root = wx.BoxSizer(wx.HORIZONTAL)
        self._sidebar = wx.ScrolledWindow(self, style=wx.VSCROLL)
        self._sidebar.SetScrollRate(0, 12)
        self._sidebar.SetMinSize((SIDEBAR_WIDTH, -1))
        root.Add(self._sidebar, 0, wx.EXPAND)
        root.Add(wx.StaticLine(self, style=wx.LI_VERTICAL), 0, wx.EXPAND)

        right = wx.BoxSizer(wx.VERTICAL)
        self._toolbar = wx.Panel(self)
        right.Add(self._toolbar, 0, wx.EXPAND)
        right.Add(wx.StaticLine(self), 0, wx.EXPAND)

        body = wx.BoxSizer(wx.HORIZONTAL)
        self._content = wx.ScrolledWindow(self, style=wx.VSCROLL)
        self._content.SetScrollRate(0, 16)
        body.Add(self._content, 1, wx.EXPAND)
        self._preview = wx.Panel(self)
        body.Add(self._preview, 1, wx.EXPAND)
        right.Add(body, 1, wx.EXPAND)
        root.Add(right, 1, wx.EXPAND)
        self.SetSizer(root)

        self.Bind(wx.EVT_SIZE, self._on_size)
        self.Bind(wx.EVT_CHAR_HOOK, self._on_char_hook)
        self.Bind(wx.EVT_CLOSE, self._on_close)

        self.state.resize(cfg.window_width, cfg.window_height)
        self.render_all()

    # ---- fonts ----
    def _icon_font(self, size: int) -> wx.Font:
        return wx.Font(wx.FontInfo(size).FaceName(self._icon_face))

    def _icon_text(self, parent: wx.Window, codepoint: int | None, size: int) -> wx.StaticText:
        t = wx.StaticText(parent, label=glyph(codepoint))
        t.SetFont(self._icon_font(size))
        return t

    def _clickable(self, parent: wx.Window, on_click: Callable[[], None]) -> None:
        def handler(evt: wx.MouseEvent) -> None:
            on_click()

        parent.Bind(wx.EVT_LEFT_UP, handler)
        for child in parent.GetChildren():
            child.Bind(wx.EVT_LEFT_UP, handler)

    def _icon_button(self, parent: wx.Window, codepoint: int, size: int, on_click: Callable[[], None], *, enabled: bool = True) -> wx.Button:
        b = wx.Button(parent, label=glyph(codepoint), style=wx.BORDER_NONE | wx.BU_EXACTFIT)
        b.SetFont(self._icon_font(size))
        b.Enable(enabled)
        b.Bind(wx.EVT_BUTTON, lambda _evt: on_click())
        return b

    # ---- rendering ----
    def render_all(self) -> None:
        self.Freeze()
        try:
            self._render_sidebar()
            self._render_toolbar()
            self._render_content()
            self._render_preview()
            self.Layout()
            self._apply_scroll_reset()
        finally:
            self.Thaw()

    def _apply_scroll_reset(self) -> None:
        if self.state.take_scroll_reset():
            self._content.Scroll(0, 0)

    def _render_sidebar(self) -> None:
        self._sidebar.DestroyChildren()
        s = wx.BoxSizer(wx.VERTICAL)
        heading = wx.StaticText(self._sidebar, label="CATEGORIES")
        heading.SetFont(self._bold.Smaller())
        heading.SetForegroundColour(wx.SystemSettings.GetColour(wx.SYS_COLOUR_GRAYTEXT))
        s.Add(heading, 0, wx.ALL, SPACING_NORMAL)

        for entry in self.state.category_entries():
            row = wx.Panel(self._sidebar)
            rs = wx.BoxSizer(wx.HORIZONTAL)
            cp = CODEPOINT_GRID if entry.name is None else entry.codepoint
            rs.Add(self._icon_text(row, cp, ICON_SIZE_TINY), 0, wx.ALIGN_CENTER_VERTICAL | wx.RIGHT, SPACING_NORMAL)
            label = wx.StaticText(row, label=entry.label)
            if entry.selected:
                label.SetFont(self._bold)
                row.SetBackgroundColour(COLOUR_SELECTED_BG)
            rs.Add(label, 1, wx.ALIGN_CENTER_VERTICAL)
            row.SetSizer(rs)
            self._clickable(row, lambda name=entry.name: self._on_category(name))
            s.Add(row, 0, wx.EXPAND | wx.LEFT | wx.RIGHT | wx.BOTTOM, SPACING_SMALL)

        self._sidebar.SetSizer(s)
        self._sidebar.FitInside()

    def _render_toolbar(self) -> None:
        tb = self._toolbar
        tb.DestroyChildren()
        self._search_detector = None
        s = wx.BoxSizer(wx.HORIZONTAL)

        labels = wx.BoxSizer(wx.VERTICAL)
        heading = wx.StaticText(tb, label=self.state.heading_label())
        heading.SetFont(self._bold)
        labels.Add(heading, 0)
        labels.Add(wx.StaticText(tb, label=self.state.count_label()), 0)
        s.Add(labels, 0, wx.ALIGN_CENTER_VERTICAL | wx.ALL, SPACING_NORMAL)
        s.AddStretchSpacer(1)

        grid_view = self.state.grid_view
        s.Add(self._icon_button(tb, CODEPOINT_GRID, ICON_SIZE_TOOLBAR, lambda: self._on_grid_view(True), enabled=not grid_view), 0, wx.ALIGN_CENTER_VERTICAL)
        s.Add(self._icon_button(tb, CODEPOINT_LIST, ICON_SIZE_TOOLBAR, lambda: self._on_grid_view(False), enabled=grid_view), 0, wx.ALIGN_CENTER_VERTICAL | wx.RIGHT, SPACING_LARGE)

        if not self.state.search_visible:
            s.Add(self._icon_button(tb, CODEPOINT_SEARCH, ICON_SIZE_TOOLBAR, lambda: self._on_search_visible(True)), 0, wx.ALIGN_CENTER_VERTICAL | wx.RIGHT, SPACING_LARGE)
        else:
            field = wx.TextCtrl(tb, value=self.state.search_text, size=(200, -1))
            field.SetHint("Search")
            field.SetInsertionPointEnd()
            field.Bind(wx.EVT_TEXT, self._on_search_text)
            self._search_detector = wrap_search_field(field, self._on_search_focus_changed)
            s.Add(field, 0, wx.ALIGN_CENTER_VERTICAL)
            s.Add(self._icon_button(tb, CODEPOINT_CLOSE, ICON_SIZE_TOOLBAR, lambda: self._on_search_visible(False)), 0, wx.ALIGN_CENTER_VERTICAL | wx.RIGHT, SPACING_LARGE)

        tb.SetSizer(s)
        tb.Layout()

    def _focus_search(self) -> None:
        det = self._search_detector
        if det is not None and det.content.ctrl:
            det.content.ctrl.SetFocus()

    def _render_content(self) -> None:
        c = self._content
        c.DestroyChildren()
        selected = self.state.selected_codepoint
        outer = wx.BoxSizer(wx.VERTICAL)

        if self.state.grid_view:
            per_row = self.state.items_per_row()
            self._last_per_row = per_row
            grid = wx.GridSizer(cols=per_row, vgap=SPACING_LARGE, hgap=SPACING_LARGE)
            for row in self.state.rows():
                for item in row:
                    if item is None:
                        grid.AddStretchSpacer(1)
                        continue
                    grid.Add(self._grid_cell(c, item, item.codepoint == selected), 1, wx.EXPAND)
            outer.Add(grid, 0, wx.EXPAND | wx.ALL, SPACING_LARGE)
        else:
            for item in self.state.visible_items():
                outer.Add(self._list_row(c, item, item.codepoint == selected), 0, wx.EXPAND | wx.LEFT | wx.RIGHT | wx.TOP, SPACING_SMALL)

        hints = self.state.suggestions()
        if hints:
            outer.Add(wx.StaticText(c, label="No icons found. Did you mean: " + ", ".join(hints) + "?"), 0, wx.ALL, SPACING_LARGE)

        c.SetSizer(outer)
        c.FitInside()

    def _grid_cell(self, parent: wx.Window, item: IconRecord, selected: bool) -> wx.Panel:
        cell = wx.Panel(parent, style=wx.BORDER_SIMPLE)
        s = wx.BoxSizer(wx.VERTICAL)
        s.Add(self._icon_text(cell, item.codepoint, ICON_SIZE_MEDIUM), 0, wx.ALIGN_CENTER | wx.TOP, SPACING_NORMAL)
        name = wx.StaticText(cell, label=item.name, style=wx.ST_ELLIPSIZE_END)
        if selected:
            name.SetFont(self._bold)
            cell.SetBackgroundColour(COLOUR_SELECTED_BG)
        s.Add(name, 0, wx.ALIGN_CENTER | wx.ALL, SPACING_NORMAL)
        cell.SetSizer(s)
        self._clickable(cell, lambda cp=item.codepoint: self._on_codepoint(cp))
        return cell

    def _list_row(self, parent: wx.Window, item: IconRecord, selected: bool) -> wx.Panel:
        row = wx.Panel(parent)
        s = wx.BoxSizer(wx.HORIZONTAL)
        s.Add(self._icon_text(row, item.codepoint, ICON_SIZE_SMALL), 0, wx.ALIGN_CENTER_VERTICAL | wx.RIGHT, SPACING_NORMAL)
        name = wx.StaticText(row, label=item.name)
        if selected:
            name.SetFont(self._bold)
            row.SetBackgroundColour(COLOUR_SELECTED_BG)
        s.Add(name, 1, wx.ALIGN_CENTER_VERTICAL)
        row.SetSizer(s)
        self._clickable(row, lambda cp=item.codepoint: self._on_codepoint(cp))
        return row

    def _render_preview(self) -> None:
        p = self._preview
        p.DestroyChildren()
        item = self.state.selected_item()
        if item is None:
            p.Hide()
            return
        p.Show()
        s = wx.BoxSizer(wx.VERTICAL)
        s.AddStretchSpacer(1)
        s.Add(self._icon_text(p, item.codepoint, ICON_SIZE_BIG), 0, wx.ALIGN_CENTER | wx.ALL, SPACING_NORMAL)
        for kind, label, value in (
            (CopyKind.NAME, "Name:", item.name),
            (CopyKind.HEX_CODEPOINT, "Codepoint (hex):", item.hex_codepoint()),
            (CopyKind.CODEPOINT, "Codepoint (u32):", str(item.codepoint)),
        ):
            s.Add(self._copy_row(p, kind, label, value), 0, wx.EXPAND | wx.LEFT | wx.RIGHT | wx.BOTTOM, SPACING_NORMAL)
        s.Add(self._icon_button(p, CODEPOINT_CLOSE_CIRCLE, ICON_SIZE_SMALL, lambda: self._on_codepoint(None)), 0, wx.ALIGN_CENTER | wx.ALL, SPACING_NORMAL)
        s.AddStretchSpacer(1)
        p.SetSizer(s)
        p.Layout()

    def _copy_row(self, parent: wx.Window, kind: CopyKind, label: str, value: str) -> wx.BoxSizer:
        copied = self.state.copy_indicator(kind)
        btn = self._icon_button(parent, CODEPOINT_SUCCESS if copied else CODEPOINT_COPY, ICON_SIZE_SMALL, lambda: self._on_copy(kind))
        if copied:
            btn.SetForegroundColour(COLOUR_SUCCESS)
        s = wx.BoxSizer(wx.HORIZONTAL)
        s.Add(btn, 0, wx.ALIGN_CENTER_VERTICAL | wx.RIGHT, SPACING_NORMAL)
        s.Add(wx.StaticText(parent, label=label), 0, wx.ALIGN_CENTER_VERTICAL | wx.RIGHT, SPACING_NORMAL)
        s.Add(wx.StaticText(parent, label=value), 1, wx.ALIGN_CENTER_VERTICAL)
        return s

    # ---- handlers ----
    def _after(self, fn: Callable[[], None]) -> None:
        # Re-render outside the handler of the widget that is about to be destroyed.
        def run() -> None:
            if is_window_alive(self):
                fn()

        wx.CallAfter(run)

    def _on_category(self, name: str | None) -> None:
        self.state.select_category(name)
        self._after(self.render_all)

    def _on_codepoint(self, codepoint: int | None) -> None:
        self.state.select_codepoint(codepoint)
        self._after(self.render_all)

    def _on_grid_view(self, grid_view: bool) -> None:
        self.state.set_grid_view(grid_view)
        self._after(self.render_all)

    def _on_search_visible(self, visible: bool) -> None:
        self.state.set_search_visible(visible)

        def rerender() -> None:
            self.render_all()
            if visible:
                self._focus_search()

        self._after(rerender)

    def _on_search_text(self, evt: wx.CommandEvent) -> None:
        self.state.set_search_text(evt.GetString())
        self.Freeze()
        try:
            # The toolbar holds the text field; only refresh its labels.
            self._render_content()
            self._render_preview()
            self._render_sidebar()
            self._refresh_toolbar_labels()
            self.Layout()
            self._apply_scroll_reset()
        finally:
            self.Thaw()

    def _refresh_toolbar_labels(self) -> None:
        texts = [w for w in self._toolbar.GetChildren() if isinstance(w, wx.StaticText)]
        if len(texts) >= 2:
            texts[0].SetLabel(self.state.heading_label())
            texts[1].SetLabel(self.state.count_label())
            self._toolbar.Layout()

    def _on_search_focus_changed(self, focused: bool) -> None:
        was_visible = self.state.search_visible
        self.state.on_search_focus_changed(focused)
        if was_visible and not self.state.search_visible:
            self._after(self.render_all)

    def _on_copy(self, kind: CopyKind) -> None:
        try:
            text = self.state.copy(kind)
        except LookupError:
            return
        copy_to_clipboard(text)
        self._sync_animation_timer()
        self._after(self._render_preview_and_layout)

    def _render_preview_and_layout(self) -> None:
        self._render_preview()
        self.Layout()

    def _on_animation_tick(self) -> None:
        was_running = self.state.needs_animation_timer
        self.state.animation_tick()
        if was_running and not self.state.needs_animation_timer:
            self._sync_animation_timer()
            self._render_preview_and_layout()

    def _sync_animation_timer(self) -> None:
        """
        The tick repeater exists only while an animation is in flight.
        """
        if self.state.needs_animation_timer:
            if self._repeater is None or not self._repeater.running:
                self._repeater = UiRepeater(self, interval_ms=self._cfg.copy_animation_tick_ms, callback=self._on_animation_tick)
        elif self._repeater is not None:
            self._repeater.stop()
            self._repeater = None

    def _on_size(self, evt: wx.SizeEvent) -> None:
        evt.Skip()
        sz = evt.GetSize()
        self.state.resize(sz.width, sz.height)
        if self.state.grid_view and self.state.items_per_row() != self._last_per_row:
            self._after(self._render_content_and_layout)

    def _render_content_and_layout(self) -> None:
        self._render_content()
        self.Layout()

    def _on_char_hook(self, evt: wx.KeyEvent) -> None:
        key = evt.GetKeyCode()
        if key == wx.WXK_ESCAPE:
            self.state.escape()
            self._after(self.render_all)
            return
        if key == ord("F") and evt.GetModifiers() == wx.MOD_CONTROL:
            if self.state.search_visible:
                self._focus_search()
            else:
                self._on_search_visible(True)
            return
        evt.Skip()

    def _on_close(self, evt: wx.CloseEvent) -> None:
        if self._repeater is not None:
            self._repeater.stop()
            self._repeater = None
        evt.Skip()
