"""Shared fixtures for KubeDeck tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from kubedeck.controllers.kubectl.controller import KubectlController
from kubedeck.controllers.navigation.controller import NavigationController
from kubedeck.models.state.panels import TextBuffer
from kubedeck.models.state.selection_store import SelectionStore


@pytest.fixture
def mock_query() -> MagicMock:
    """Resource query service double with plain-text answers."""
    query = MagicMock(spec=KubectlController)
    query.fetch.return_value = "fetch output"
    query.describe.return_value = "describe output"
    query.logs.return_value = "log output"
    query.top_node.return_value = "top node output"
    query.top_pod.return_value = "top pod output"
    query.current_context.return_value = "kind-dev"
    return query


@pytest.fixture
def store() -> SelectionStore:
    return SelectionStore()


@pytest.fixture
def navigation() -> NavigationController:
    return NavigationController()


@pytest.fixture
def buffer() -> TextBuffer:
    return TextBuffer()
