"""Dashboard screen presenter - worker rendering and cross-thread messages."""

from __future__ import annotations

import logging
import time

from textual.message import Message

from kubedeck.constants.enums import PrimaryView
from kubedeck.controllers.dashboard import DashboardController
from kubedeck.models.state.panels import TextBuffer

logger = logging.getLogger(__name__)


# ============================================================================
# Worker Messages for Cross-thread Communication
# ============================================================================


class DetailRendered(Message):
    """Message carrying a rendered detail pane buffer."""

    def __init__(self, buffer: TextBuffer, generation: int, duration_ms: float) -> None:
        super().__init__()
        self.buffer = buffer
        self.generation = generation
        self.duration_ms = duration_ms


class PanelRendered(Message):
    """Message carrying a rendered primary panel listing."""

    def __init__(self, view: PrimaryView, buffer: TextBuffer) -> None:
        super().__init__()
        self.view = view
        self.buffer = buffer


# ============================================================================
# Rendering helpers (run inside thread workers)
# ============================================================================


def render_detail(controller: DashboardController) -> tuple[TextBuffer, float]:
    """Run the active detail routine against a fresh buffer."""
    started = time.monotonic()
    buffer = TextBuffer()
    controller.detail_refresh(buffer)
    duration_ms = (time.monotonic() - started) * 1000
    logger.debug(
        "render_detail - %s in %.0fms",
        controller.navigation.active_path,
        duration_ms,
    )
    return buffer, duration_ms


def render_panel(controller: DashboardController, view: PrimaryView) -> TextBuffer:
    """Render one primary panel listing into a fresh buffer."""
    buffer = TextBuffer()
    controller.panel_refresh(view, buffer)
    return buffer


__all__ = ["DetailRendered", "PanelRendered", "render_detail", "render_panel"]
