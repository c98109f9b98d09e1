"""Panel state and the surface protocol render routines paint into."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from rich.text import Text


class PanelNotFoundError(LookupError):
    """Raised when a named panel is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"panel {name!r} is not registered")
        self.name = name


@dataclass
class Panel:
    """A named on-screen panel with a single selection slot."""

    name: str
    selection: str | None = None

    def set_selection(self, text: str | None) -> None:
        self.selection = text or None

    def clear_selection(self) -> None:
        self.selection = None


@runtime_checkable
class ViewSurface(Protocol):
    """Write target for panel and detail rendering."""

    def clear(self) -> None: ...

    def write(self, text: str | Text) -> None: ...

    def set_scroll_origin(self, x: int, y: int) -> None: ...

    def trigger_redraw(self) -> None: ...


@dataclass
class TextBuffer:
    """In-memory ViewSurface.

    Render routines run in worker threads against a buffer; the screen
    copies the finished buffer onto the real widget.
    """

    content: Text = field(default_factory=Text)
    scroll_origin: tuple[int, int] = (0, 0)
    redraws: int = 0

    def clear(self) -> None:
        self.content = Text()

    def write(self, text: str | Text) -> None:
        self.content.append_text(text if isinstance(text, Text) else Text(text))

    def set_scroll_origin(self, x: int, y: int) -> None:
        self.scroll_origin = (x, y)

    def trigger_redraw(self) -> None:
        self.redraws += 1

    @property
    def plain(self) -> str:
        return self.content.plain


__all__ = ["Panel", "PanelNotFoundError", "TextBuffer", "ViewSurface"]
