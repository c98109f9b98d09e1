"""NavigationStrip - the secondary option strip above the detail pane.

Clicks are reported as the column inside the content region so the
navigation controller can hit-test them.

CSS Classes: widget-navigation-strip
"""

from __future__ import annotations

from typing import ClassVar

from rich.text import Text
from textual import events
from textual.message import Message
from textual.widgets import Static


class NavigationStrip(Static):
    """One-line strip of secondary options."""

    _DEFAULT_CLASSES: ClassVar[str] = "widget-navigation-strip"

    class Clicked(Message):
        """Posted with the content column of a click."""

        def __init__(self, column: int) -> None:
            super().__init__()
            self.column = column

    def __init__(self, *, id: str | None = None, classes: str = "") -> None:
        super().__init__(
            "",
            id=id,
            classes=" ".join(c for c in (self._DEFAULT_CLASSES, classes) if c),
            markup=False,
        )
        self.border_title = "Navigation"
        self._shown = Text()

    def show(self, text: Text) -> None:
        """Replace the strip with a rendered option line."""
        self._shown = text
        self.update(text)

    @property
    def plain_text(self) -> str:
        return self._shown.plain

    def on_click(self, event: events.Click) -> None:
        offset = event.get_content_offset(self)
        if offset is None:
            return
        event.stop()
        self.post_message(self.Clicked(offset.x))


__all__ = ["NavigationStrip"]
