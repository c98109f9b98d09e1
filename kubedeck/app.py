"""Main application class for KubeDeck TUI."""

from __future__ import annotations

import logging

from textual.app import App
from textual.binding import Binding

from kubedeck.constants import APP_TITLE
from kubedeck.controllers.kubectl.controller import (
    KubectlController,
    ResourceQueryService,
)
from kubedeck.keyboard.app import APP_BINDINGS
from kubedeck.models.state.app_settings import AppSettings

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "1-5 focus a panel, 0 the detail pane. "
    "Enter picks a row. [ and ] or a click switch the detail view. "
    "a lists all namespaces, r refreshes, q quits."
)


class KubeDeckApp(App[None]):
    """Main TUI application for KubeDeck."""

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS

    settings: AppSettings

    def __init__(
        self,
        settings: AppSettings | None = None,
        query: ResourceQueryService | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.settings = settings or AppSettings()
        self.query_service = query or KubectlController(
            context=self.settings.context,
            kubectl_path=self.settings.kubectl_path,
            request_timeout=self.settings.request_timeout,
        )

    def on_mount(self) -> None:
        """Called when app is mounted."""
        from kubedeck.screens import DashboardScreen

        context = self.settings.context
        self.sub_title = context or ""
        logger.info("Starting dashboard (context=%s)", context or "<current>")
        self.push_screen(
            DashboardScreen(
                self.query_service,
                logs_tail=self.settings.logs_tail,
                auto_refresh=self.settings.auto_refresh,
                refresh_interval=self.settings.refresh_interval,
            )
        )

    def action_show_help(self) -> None:
        self.notify(HELP_TEXT, title="Keys", timeout=8)


__all__ = ["HELP_TEXT", "KubeDeckApp"]
