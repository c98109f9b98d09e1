"""Dashboard screen - primary panels, navigation strip and detail pane.

Layout::

    +-----------------+--------------------------------------+
    | Cluster Info    | Config   Deployments   Pods          |
    | Namespace       +--------------------------------------+
    | Service         |                                      |
    | Deployment      |  detail pane                         |
    | Pod             |                                      |
    +-----------------+--------------------------------------+

kubectl runs inside thread workers against in-memory buffers; finished
buffers come back to the event loop as messages and are copied onto the
widgets there.
"""

from __future__ import annotations

import logging
from functools import partial

from textual import events, on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.timer import Timer
from textual.widgets import Footer, Header

from kubedeck.constants.defaults import AUTO_REFRESH_DEFAULT, REFRESH_INTERVAL_DEFAULT
from kubedeck.constants.enums import PrimaryView
from kubedeck.constants.screens.dashboard import (
    DETAIL_PANE_ID,
    FUNCTION_VIEWS,
    LISTING_VIEWS,
    NAVIGATION_STRIP_ID,
    PANEL_GRID_ID,
    PANEL_NAMESPACE,
)
from kubedeck.constants.values import LOGS_TAIL
from kubedeck.controllers.dashboard import DashboardController
from kubedeck.controllers.kubectl.controller import ResourceQueryService
from kubedeck.keyboard.navigation import DASHBOARD_SCREEN_BINDINGS
from kubedeck.screens.dashboard.presenter import (
    DetailRendered,
    PanelRendered,
    render_detail,
    render_panel,
)
from kubedeck.widgets import DetailPane, NavigationStrip, ResourcePanel

logger = logging.getLogger(__name__)


class DashboardScreen(Screen[None]):
    """Single-screen dashboard driven by :class:`DashboardController`."""

    BINDINGS = DASHBOARD_SCREEN_BINDINGS
    CSS_PATH = "../../css/screens/dashboard_screen.tcss"

    def __init__(
        self,
        query: ResourceQueryService,
        *,
        logs_tail: int = LOGS_TAIL,
        auto_refresh: bool = AUTO_REFRESH_DEFAULT,
        refresh_interval: float = REFRESH_INTERVAL_DEFAULT,
    ) -> None:
        super().__init__()
        self.controller = DashboardController(query, logs_tail=logs_tail)
        self._auto_refresh = auto_refresh
        self._refresh_interval = refresh_interval
        self._refresh_timer: Timer | None = None
        self._detail_generation = 0

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id=PANEL_GRID_ID):
            with Vertical(id="panel-column"):
                for view in FUNCTION_VIEWS:
                    yield ResourcePanel(
                        view.panel_name,
                        view.title,
                        header_rows=0 if view is PrimaryView.CLUSTER_INFO else 1,
                    )
            with Vertical(id="detail-column"):
                yield NavigationStrip(id=NAVIGATION_STRIP_ID)
                yield DetailPane(id=DETAIL_PANE_ID)
        yield Footer()

    def on_mount(self) -> None:
        self.controller.attach_detail(self.detail_pane)
        self.redraw_navigation()
        self.refresh_panels()
        self.panel(PrimaryView.CLUSTER_INFO).focus()
        if self._auto_refresh:
            self._refresh_timer = self.set_interval(
                self._refresh_interval, self._on_refresh_tick
            )

    def on_unmount(self) -> None:
        if self._refresh_timer is not None:
            self._refresh_timer.stop()
            self._refresh_timer = None
        self.workers.cancel_all()

    # =========================================================================
    # Widget access
    # =========================================================================

    @property
    def detail_pane(self) -> DetailPane:
        return self.query_one(f"#{DETAIL_PANE_ID}", DetailPane)

    @property
    def navigation_strip(self) -> NavigationStrip:
        return self.query_one(f"#{NAVIGATION_STRIP_ID}", NavigationStrip)

    def panel(self, view: PrimaryView) -> ResourcePanel:
        return self.query_one(f"#panel-{view.panel_name}", ResourcePanel)

    # =========================================================================
    # Rendering
    # =========================================================================

    def redraw_navigation(self) -> None:
        self.navigation_strip.show(self.controller.navigation_redraw())

    def refresh_detail(self) -> None:
        """Re-run the active detail routine in a worker."""
        self._detail_generation += 1
        self.run_worker(
            partial(self._detail_worker, self._detail_generation),
            thread=True,
            name="dashboard-detail",
            group="dashboard-detail",
            exclusive=True,
        )

    def refresh_panels(self, views: tuple[PrimaryView, ...] = FUNCTION_VIEWS) -> None:
        """Reload the listings of ``views`` in workers."""
        for view in views:
            self.run_worker(
                partial(self._panel_worker, view),
                thread=True,
                name=f"dashboard-panel-{view.panel_name}",
                group=f"dashboard-panel-{view.panel_name}",
                exclusive=True,
            )

    def _detail_worker(self, generation: int) -> None:
        buffer, duration_ms = render_detail(self.controller)
        self.app.call_from_thread(
            self.post_message, DetailRendered(buffer, generation, duration_ms)
        )

    def _panel_worker(self, view: PrimaryView) -> None:
        buffer = render_panel(self.controller, view)
        self.app.call_from_thread(self.post_message, PanelRendered(view, buffer))

    def on_detail_rendered(self, event: DetailRendered) -> None:
        if event.generation != self._detail_generation:
            logger.debug(
                "on_detail_rendered - dropping stale generation %d", event.generation
            )
            return
        self.detail_pane.show_buffer(event.buffer)

    def on_panel_rendered(self, event: PanelRendered) -> None:
        try:
            panel = self.panel(event.view)
        except NoMatches:
            return
        panel.show_content(event.buffer.content)

    def _on_refresh_tick(self) -> None:
        if self.controller.is_periodic():
            self.refresh_detail()

    # =========================================================================
    # Event handlers
    # =========================================================================

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        widget = event.widget
        if not isinstance(widget, ResourcePanel):
            self.controller.on_panel_focus(widget.id)
            return
        self.controller.on_panel_focus(widget.panel_name)
        self.redraw_navigation()
        self.refresh_detail()

    @on(ResourcePanel.RowSelected)
    def _on_row_selected(self, event: ResourcePanel.RowSelected) -> None:
        self.controller.on_row_selected(event.panel_name, event.text)
        if event.panel_name == PANEL_NAMESPACE:
            self.refresh_panels(LISTING_VIEWS)
        else:
            view = PrimaryView.from_panel_name(event.panel_name)
            if view is not None:
                self.refresh_panels((view,))
        self.refresh_detail()

    @on(NavigationStrip.Clicked)
    def _on_navigation_clicked(self, event: NavigationStrip.Clicked) -> None:
        if self.controller.navigation_click(event.column):
            self.redraw_navigation()
            self.refresh_detail()

    # =========================================================================
    # Actions
    # =========================================================================

    def action_refresh(self) -> None:
        self.refresh_panels()
        self.refresh_detail()

    def action_next_option(self) -> None:
        if self.controller.cycle_option(1):
            self.redraw_navigation()
            self.refresh_detail()

    def action_previous_option(self) -> None:
        if self.controller.cycle_option(-1):
            self.redraw_navigation()
            self.refresh_detail()

    def action_all_namespaces(self) -> None:
        """Drop the namespace scope and list every namespace again."""
        self.controller.on_row_selected(PANEL_NAMESPACE, None)
        self.refresh_panels(LISTING_VIEWS)
        self.refresh_detail()

    def action_focus_panel(self, panel_name: str) -> None:
        view = PrimaryView.from_panel_name(panel_name)
        if view is None:
            return
        self.panel(view).focus()

    def action_focus_detail(self) -> None:
        self.detail_pane.focus()


__all__ = ["DashboardScreen"]
