"""
Focus-change detection for a wrapped single-line text field.

The wrapper owns the field and forwards sizing, hit-testing, event handling and
painting to it unchanged. The one thing it adds: after a dispatch pass it
compares the field's live focus flag with the last value it saw, and reports
an edge through `on_focus_changed`. Focus is polled once per pass, so several
focus events inside a single pass collapse into at most one notification
carrying the net state.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Protocol


class EditableText(Protocol):
    def min_size(self) -> tuple[int, int]: ...

    def layout(self, width: int, height: int) -> tuple[int, int]: ...

    def hit_test(self, x: int, y: int) -> bool: ...

    def on_event(self, event: Any) -> Any: ...

    def draw(self, canvas: Any) -> None: ...

    def is_focused(self) -> bool: ...


class FocusChangeDetector:
    def __init__(self, content: EditableText, on_focus_changed: Callable[[bool], None], *, focused: bool = False):
        self._content = content
        self._on_focus_changed = on_focus_changed
        self._last_known_focused = bool(focused)

    @property
    def content(self) -> EditableText:
        return self._content

    @property
    def focused(self) -> bool:
        return self._last_known_focused

    # ---- forwarded verbatim ----
    def min_size(self) -> tuple[int, int]:
        return self._content.min_size()

    def layout(self, width: int, height: int) -> tuple[int, int]:
        return self._content.layout(width, height)

    def hit_test(self, x: int, y: int) -> bool:
        return self._content.hit_test(x, y)

    def draw(self, canvas: Any) -> None:
        self._content.draw(canvas)

    def is_focused(self) -> bool:
        return self._content.is_focused()

    # ---- dispatch ----
    def handle_event(self, event: Any) -> Any:
        return self._content.on_event(event)

    def end_pass(self) -> bool | None:
        """
        Poll the wrapped field once. Returns the new focus value if it changed, else None.
        """
        now = bool(self._content.is_focused())
        if now == self._last_known_focused:
            return None
        self._last_known_focused = now
        self._on_focus_changed(now)
        return now

    def dispatch(self, events: Iterable[Any]) -> list[Any]:
        statuses = [self.handle_event(ev) for ev in events]
        self.end_pass()
        return statuses
