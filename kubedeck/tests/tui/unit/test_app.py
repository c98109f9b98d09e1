"""Tests for the KubeDeckApp class."""

from __future__ import annotations

from unittest.mock import MagicMock

from kubedeck.app import HELP_TEXT, KubeDeckApp
from kubedeck.controllers.kubectl.controller import KubectlController
from kubedeck.models.state.app_settings import AppSettings


class TestKubeDeckApp:
    """Tests for KubeDeckApp construction."""

    def test_title_and_css(self) -> None:
        assert KubeDeckApp.TITLE == "KubeDeck"
        assert KubeDeckApp.CSS_PATH == "css/app.tcss"

    def test_default_query_service_from_settings(self) -> None:
        settings = AppSettings(
            context="prod-eu", kubectl_path="/opt/kubectl", request_timeout="5s"
        )
        app = KubeDeckApp(settings=settings)

        assert isinstance(app.query_service, KubectlController)
        assert app.query_service.context == "prod-eu"
        assert app.query_service.kubectl_path == "/opt/kubectl"
        assert app.query_service.request_timeout == "5s"

    def test_injected_query_service(self) -> None:
        query = MagicMock()
        app = KubeDeckApp(query=query)
        assert app.query_service is query
        assert app.settings == AppSettings()

    def test_help_mentions_keys(self) -> None:
        for key in ("1-5", "[", "]", "q"):
            assert key in HELP_TEXT
