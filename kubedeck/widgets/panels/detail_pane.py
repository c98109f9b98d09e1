"""DetailPane - scrollable output of the active detail query.

Implements the ViewSurface protocol on top of RichLog. Output is written
as Rich Text, never parsed as markup.

CSS Classes: widget-detail-pane
"""

from __future__ import annotations

from typing import ClassVar

from rich.text import Text
from textual.widgets import RichLog

from kubedeck.models.state.panels import TextBuffer


class DetailPane(RichLog):
    """Detail pane widget."""

    _DEFAULT_CLASSES: ClassVar[str] = "widget-detail-pane"

    def __init__(self, *, id: str | None = None, classes: str = "") -> None:
        super().__init__(
            id=id,
            classes=" ".join(c for c in (self._DEFAULT_CLASSES, classes) if c),
            wrap=False,
            markup=False,
            highlight=False,
            auto_scroll=False,
        )
        self.border_title = "Detail"
        self._shown = Text()

    def set_scroll_origin(self, x: int, y: int) -> None:
        self.scroll_to(x, y, animate=False)

    def trigger_redraw(self) -> None:
        self.refresh()

    def show_buffer(self, buffer: TextBuffer) -> None:
        """Replace the pane content with a rendered buffer."""
        self.clear()
        self._shown = buffer.content
        if buffer.plain:
            self.write(buffer.content, scroll_end=False)
        self.trigger_redraw()

    @property
    def plain_text(self) -> str:
        """Plain text of the last buffer shown."""
        return self._shown.plain


__all__ = ["DetailPane"]
