"""Dashboard facade over navigation, selection, and detail dispatch.

The rendering substrate registers three callbacks against UI events:

- navigation strip redraw -> :meth:`DashboardController.navigation_redraw`
- navigation strip click -> :meth:`DashboardController.navigation_click`
- detail pane refresh -> :meth:`DashboardController.detail_refresh`

plus focus and row-selection notifications.
"""

from __future__ import annotations

import logging

from rich.text import Text

from kubedeck.constants.enums import PrimaryView
from kubedeck.constants.values import LOGS_TAIL
from kubedeck.controllers.detail.dispatcher import DetailDispatcher
from kubedeck.controllers.detail.listing import PanelListPresenter
from kubedeck.controllers.kubectl.controller import ResourceQueryService
from kubedeck.controllers.navigation.controller import NavigationController
from kubedeck.models.state.panels import PanelNotFoundError, ViewSurface
from kubedeck.models.state.selection_store import SelectionStore

logger = logging.getLogger(__name__)


class DashboardController:
    """Owns the dashboard state for one screen."""

    def __init__(
        self,
        query: ResourceQueryService,
        detail: ViewSurface | None = None,
        store: SelectionStore | None = None,
        logs_tail: int = LOGS_TAIL,
    ) -> None:
        self.query = query
        self.store = store or SelectionStore()
        self.navigation = NavigationController(detail=detail)
        self.dispatcher = DetailDispatcher(
            self.navigation,
            self.store,
            query,
            logs_tail=logs_tail,
        )
        self.lists = PanelListPresenter(self.store, query)

    def attach_detail(self, detail: ViewSurface) -> None:
        """Bind the surface whose scroll origin resets on option change."""
        self.navigation.detail = detail

    @property
    def active_view(self) -> PrimaryView | None:
        return self.navigation.active_view

    # =========================================================================
    # Focus and selection
    # =========================================================================

    def on_panel_focus(self, panel_name: str | None) -> bool:
        """Handle a panel gaining focus.

        Returns:
            True if the active primary view changed.
        """
        view = PrimaryView.from_panel_name(panel_name)
        if view is not None:
            self.store.clear_on_focus(view.panel_name)
        return self.navigation.on_focus_change(view)

    def on_row_selected(self, panel_name: str, text: str | None) -> None:
        """Store the row picked in ``panel_name``."""
        try:
            if panel_name == PrimaryView.NAMESPACE.panel_name:
                self.store.set_namespace_scope(text)
            else:
                self.store.set_selection(panel_name, text)
        except PanelNotFoundError as exc:
            logger.warning("on_row_selected - %s", exc)
            return
        logger.debug("on_row_selected - %s selected %r", panel_name, text)

    def selection(self, panel_name: str) -> str | None:
        try:
            return self.store.get_selection(panel_name)
        except PanelNotFoundError:
            return None

    # =========================================================================
    # Callbacks
    # =========================================================================

    def navigation_redraw(self) -> Text:
        """Render the navigation strip, defaulting to Cluster Info."""
        if self.navigation.active_view is None:
            self.navigation.on_focus_change(None)
        return self.navigation.render()

    def navigation_click(self, column: int) -> str:
        """Select the option under ``column``."""
        return self.navigation.click(column)

    def cycle_option(self, step: int) -> str:
        """Move the active option by ``step``, wrapping around the strip."""
        options = self.navigation.options
        if not options:
            return ""
        index = (self.navigation.active_option_index + step) % len(options)
        return self.navigation.select_option(index)

    def detail_refresh(self, surface: ViewSurface) -> None:
        self.dispatcher.render(surface)

    def panel_refresh(self, view: PrimaryView, surface: ViewSurface) -> None:
        self.lists.render(view, surface)

    def is_periodic(self) -> bool:
        """Whether the active option is a metrics view worth auto-refreshing."""
        option = self.navigation.active_option
        return option is not None and option.is_top


__all__ = ["DashboardController"]
