"""Detail pane dispatch and primary panel listings."""

from kubedeck.controllers.detail.dispatcher import (
    DetailDispatcher,
    RenderRoutine,
    please_select,
)
from kubedeck.controllers.detail.listing import PanelListPresenter

__all__ = ["DetailDispatcher", "PanelListPresenter", "RenderRoutine", "please_select"]
