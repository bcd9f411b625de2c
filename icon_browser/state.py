"""
Application state for the icon browser.

`AppState` is the single long-lived container the UI owns. Everything the
window renders is derived from it (visible items, grid rows, labels, copy
indicator), and every user action is one transition method. The catalog,
filter, layout and animation modules stay pure; this is where their inputs
live between calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from . import animation
from .animation import AnimationState, CopyKind
from .catalog import CatalogIndex, IconRecord
from .debug import debug_log
from .filtering import QueryState, VisibleItems, suggest_names, visible_items
from .layout import arrange_rows, items_per_row


ALL_LABEL = "All"
SEARCH_ALL_LABEL = "Search All"


def capitalized(s: str) -> str:
    if not s:
        return s
    return s[0].upper() + s[1:]


@dataclass(frozen=True)
class CategoryEntry:
    name: str | None  # None is the "All" entry
    label: str
    codepoint: int | None
    selected: bool


@dataclass
class AppState:
    catalog: CatalogIndex = field(default_factory=CatalogIndex.empty)
    selected_category: str | None = None
    search_text: str = ""
    search_visible: bool = False
    selected_codepoint: int | None = None
    grid_view: bool = True
    window_size: tuple[int, int] = (1000, 600)
    copy_animation: AnimationState | None = None
    animation_steps: int = 100
    # Set by transitions that replace the listing; the view scrolls back to the top once.
    scroll_reset: bool = False

    # ---- derived ----
    @property
    def query(self) -> QueryState:
        return QueryState(selected_category=self.selected_category, search_text=self.search_text)

    @property
    def searching(self) -> bool:
        return bool(self.search_text)

    @property
    def detail_panel_open(self) -> bool:
        return self.selected_codepoint is not None

    @property
    def needs_animation_timer(self) -> bool:
        return self.copy_animation is not None

    def visible_items(self) -> VisibleItems:
        return visible_items(self.catalog, self.query)

    def visible_count(self) -> int:
        return self.visible_items().count()

    def items_per_row(self) -> int:
        return items_per_row(self.window_size[0], self.detail_panel_open)

    def rows(self) -> list[tuple[IconRecord | None, ...]]:
        return arrange_rows(self.visible_items(), self.items_per_row())

    def selected_item(self) -> IconRecord | None:
        if self.selected_codepoint is None:
            return None
        return self.catalog.lookup(self.selected_codepoint)

    def category_entries(self) -> list[CategoryEntry]:
        """
        Sidebar rows: "All" first, then every category with its representative glyph.
        While searching, only "All" is highlighted since search ignores the category.
        """
        searching = self.searching
        out = [
            CategoryEntry(
                name=None,
                label=ALL_LABEL,
                codepoint=None,
                selected=self.selected_category is None or searching,
            )
        ]
        for name in self.catalog.categories:
            out.append(
                CategoryEntry(
                    name=name,
                    label=capitalized(name),
                    codepoint=self.catalog.representative(name),
                    selected=(name == self.selected_category) and not searching,
                )
            )
        return out

    def heading_label(self) -> str:
        if self.searching:
            return SEARCH_ALL_LABEL
        if self.selected_category is None:
            return ALL_LABEL
        return capitalized(self.selected_category)

    def count_label(self) -> str:
        return f"{self.visible_count()} icons"

    def suggestions(self, limit: int = 5) -> list[str]:
        if not self.searching or self.visible_count():
            return []
        return suggest_names(self.catalog, self.search_text, limit=limit)

    def copy_indicator(self, kind: CopyKind) -> bool:
        anim = self.copy_animation
        return anim is not None and anim.copy_kind is kind

    # ---- transitions ----
    def set_catalog(self, catalog: CatalogIndex) -> None:
        self.catalog = catalog
        if self.selected_category is not None and self.selected_category not in catalog.categories:
            self.selected_category = None
        if self.selected_codepoint is not None and catalog.lookup(self.selected_codepoint) is None:
            self.selected_codepoint = None

    def select_category(self, name: str | None) -> None:
        self.selected_category = name
        self.selected_codepoint = None
        self.search_visible = False
        self.search_text = ""
        self.scroll_reset = True

    def set_search_text(self, text: str) -> None:
        self.search_text = text
        self.selected_codepoint = None
        self.scroll_reset = True

    def set_search_visible(self, visible: bool) -> None:
        self.search_visible = visible
        self.selected_codepoint = None
        if not visible:
            self.search_text = ""

    def on_search_focus_changed(self, focused: bool) -> None:
        # An empty search box that loses focus folds back into the toolbar button.
        if not focused and self.search_visible and not self.search_text:
            self.search_visible = False
            self.search_text = ""

    def set_grid_view(self, grid_view: bool) -> None:
        self.grid_view = grid_view
        self.selected_codepoint = None
        self.search_visible = False
        self.search_text = ""
        self.scroll_reset = True

    def take_scroll_reset(self) -> bool:
        pending = self.scroll_reset
        self.scroll_reset = False
        return pending

    def select_codepoint(self, codepoint: int | None) -> None:
        self.selected_codepoint = codepoint

    def resize(self, width: int, height: int) -> None:
        self.window_size = (int(width), int(height))

    def escape(self) -> None:
        if self.selected_codepoint is not None:
            self.selected_codepoint = None
        elif self.search_visible:
            self.search_visible = False
            self.search_text = ""

    def copy(self, kind: CopyKind) -> str:
        """
        Clipboard text for the selected icon; (re)starts the copied indicator.
        """
        item = self.selected_item()
        if item is None:
            raise LookupError("no icon selected")
        if kind is CopyKind.NAME:
            text = item.name
        elif kind is CopyKind.CODEPOINT:
            text = str(item.codepoint)
        else:
            text = item.hex_codepoint()
        self.copy_animation = animation.start(kind, self.animation_steps)
        debug_log(f"copy {kind.value}={text!r}")
        return text

    def animation_tick(self) -> None:
        anim = self.copy_animation
        if anim is None:
            return
        anim = animation.tick(anim)
        self.copy_animation = None if animation.is_done(anim) else anim
