"""ResourcePanel - one primary view panel listing kubectl table rows.

Each line of the listing is one option. The table header line is shown
but cannot be picked. Picking a row posts :class:`ResourcePanel.RowSelected`
with the row's plain text.

CSS Classes: widget-resource-panel
"""

from __future__ import annotations

from typing import ClassVar

from rich.text import Text
from textual.message import Message
from textual.widgets import OptionList
from textual.widgets.option_list import Option


class ResourcePanel(OptionList):
    """Focusable panel for one primary view."""

    _DEFAULT_CLASSES: ClassVar[str] = "widget-resource-panel"

    class RowSelected(Message):
        """Posted when the user picks a row."""

        def __init__(self, panel: ResourcePanel, text: str) -> None:
            super().__init__()
            self.panel = panel
            self.text = text

        @property
        def panel_name(self) -> str:
            return self.panel.panel_name

    def __init__(
        self,
        panel_name: str,
        title: str,
        *,
        header_rows: int = 1,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        super().__init__(
            id=id or f"panel-{panel_name}",
            classes=" ".join(c for c in (self._DEFAULT_CLASSES, classes) if c),
        )
        self.panel_name = panel_name
        self.header_rows = header_rows
        self.border_title = title
        self._rows: list[Text] = []

    @property
    def lines(self) -> list[Text]:
        return list(self._rows)

    def show_content(self, content: Text) -> None:
        """Replace the listing, keeping the cursor row when still valid."""
        highlighted = self.highlighted
        lines = [line for line in content.split("\n") if line.plain.strip()]
        self._rows = lines
        self.clear_options()
        self.add_options(
            [
                Option(line, disabled=index < self.header_rows)
                for index, line in enumerate(lines)
            ]
        )
        if highlighted is not None and self.header_rows <= highlighted < len(lines):
            self.highlighted = highlighted

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        prompt = event.option.prompt
        text = prompt.plain if isinstance(prompt, Text) else str(prompt)
        self.post_message(self.RowSelected(self, text.rstrip()))


__all__ = ["ResourcePanel"]
