"""Primary panel listings.

Fills the Cluster Info, Namespace, Service, Deployment and Pod panels.
Listings span all namespaces until a namespace is picked in the
Namespace panel.
"""

from __future__ import annotations

import logging

from rich.text import Text

from kubedeck.constants.enums import PrimaryView
from kubedeck.constants.values import COLOR_HIGHLIGHT, CURRENT_CONTEXT_PREFIX
from kubedeck.controllers.kubectl.controller import ResourceQueryService
from kubedeck.models.state.panels import PanelNotFoundError, ViewSurface
from kubedeck.models.state.selection_store import SelectionStore
from kubedeck.utils.highlight import highlight_selected
from kubedeck.utils.row_parser import selected_namespace

logger = logging.getLogger(__name__)

# kubectl kind and extra flags for each listing panel.
_LISTINGS: dict[PrimaryView, tuple[str, dict[str, str]]] = {
    PrimaryView.SERVICE: ("services", {}),
    PrimaryView.DEPLOYMENT: ("deployments", {}),
    PrimaryView.POD: ("pods", {"output": "wide"}),
}


class PanelListPresenter:
    """Renders the content of primary view panels."""

    def __init__(self, store: SelectionStore, query: ResourceQueryService) -> None:
        self.store = store
        self.query = query

    def render(self, view: PrimaryView, surface: ViewSurface) -> None:
        surface.clear()
        try:
            if view is PrimaryView.CLUSTER_INFO:
                self.render_cluster_info(surface)
            elif view is PrimaryView.NAMESPACE:
                self._paint(view, surface, self.query.fetch("namespaces"))
            else:
                self._paint(view, surface, self.listing(view))
        except PanelNotFoundError as exc:
            logger.warning("render - %s: %s", view.title, exc)

    def render_cluster_info(self, surface: ViewSurface) -> None:
        context = self.query.current_context()
        if not context:
            return
        text = Text(CURRENT_CONTEXT_PREFIX)
        text.append(context, style=COLOR_HIGHLIGHT)
        surface.write(text)
        surface.trigger_redraw()

    def listing(self, view: PrimaryView) -> str:
        """Fetch the table for a Service, Deployment or Pod panel."""
        kind, flags = _LISTINGS[view]
        namespace = selected_namespace(
            self.store.get_selection(PrimaryView.NAMESPACE.panel_name)
        )
        if namespace:
            return self.query.fetch(kind, flags=flags, namespace=namespace)
        return self.query.fetch(kind, flags={"all-namespaces": "true", **flags})

    def _paint(self, view: PrimaryView, surface: ViewSurface, content: str) -> None:
        selected = self.store.get_selection(view.panel_name)
        surface.write(highlight_selected(content, selected))
        surface.trigger_redraw()


__all__ = ["PanelListPresenter"]
