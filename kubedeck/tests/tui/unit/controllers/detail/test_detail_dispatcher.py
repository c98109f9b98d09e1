"""Tests for detail pane dispatch."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest
from rich.style import Style

from kubedeck.constants.enums import PrimaryView, SecondaryOption
from kubedeck.constants.screens.dashboard import (
    PANEL_DEPLOYMENT,
    PANEL_NAMESPACE,
    PANEL_POD,
    PANEL_SERVICE,
    VIEW_NAVIGATION,
)
from kubedeck.constants.values import COLOR_HIGHLIGHT
from kubedeck.controllers.detail.dispatcher import DetailDispatcher
from kubedeck.controllers.navigation.controller import NavigationController
from kubedeck.models.core.navigation import NavigationPath
from kubedeck.models.state.panels import TextBuffer
from kubedeck.models.state.selection_store import SelectionStore

NAMESPACE_ROW = "default       Active   12d"
POD_ROW = "web-1   1/1     Running   0          3h"
LOG_FLAGS = {"all-containers": "true", "tail": "200", "prefix": "true"}


@pytest.fixture
def dispatcher(
    navigation: NavigationController,
    store: SelectionStore,
    mock_query: MagicMock,
) -> DetailDispatcher:
    return DetailDispatcher(navigation, store, mock_query)


def activate(
    navigation: NavigationController,
    view: PrimaryView,
    option: SecondaryOption,
) -> None:
    navigation.on_focus_change(view)
    navigation.select_option(navigation.options.index(option))


class TestRouting:
    """Tests for the route table."""

    def test_every_navigation_pair_is_bound(self, dispatcher: DetailDispatcher) -> None:
        expected = {
            NavigationPath(view, option)
            for view, options in VIEW_NAVIGATION.items()
            for option in options
        }
        assert set(dispatcher.routes) == expected
        assert len(dispatcher.routes) == 18

    def test_route_for_none(self, dispatcher: DetailDispatcher) -> None:
        assert dispatcher.route_for(None) is None

    def test_unbound_pair(self, dispatcher: DetailDispatcher) -> None:
        path = NavigationPath(PrimaryView.CLUSTER_INFO, SecondaryOption.LOG)
        assert dispatcher.route_for(path) is None

    def test_no_active_view_clears_only(
        self,
        dispatcher: DetailDispatcher,
        buffer: TextBuffer,
        mock_query: MagicMock,
    ) -> None:
        buffer.write("stale")
        dispatcher.render(buffer)
        assert buffer.plain == ""
        assert mock_query.method_calls == []

    def test_missing_panel_is_logged(
        self,
        navigation: NavigationController,
        mock_query: MagicMock,
        buffer: TextBuffer,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        dispatcher = DetailDispatcher(
            navigation, SelectionStore(panel_names=(PANEL_POD,)), mock_query
        )
        activate(navigation, PrimaryView.POD, SecondaryOption.LOG)

        with caplog.at_level(logging.WARNING, logger="kubedeck"):
            dispatcher.render(buffer)

        assert "not registered" in caplog.text
        mock_query.logs.assert_not_called()


class TestClusterInfo:
    """Cluster Info routines."""

    def test_nodes(
        self, dispatcher, navigation, buffer, mock_query: MagicMock
    ) -> None:
        activate(navigation, PrimaryView.CLUSTER_INFO, SecondaryOption.NODES)
        dispatcher.render(buffer)
        mock_query.fetch.assert_called_once_with("nodes")
        assert buffer.plain == "fetch output"
        assert buffer.redraws == 1

    def test_top_nodes(
        self, dispatcher, navigation, buffer, mock_query: MagicMock
    ) -> None:
        activate(navigation, PrimaryView.CLUSTER_INFO, SecondaryOption.TOP_NODES)
        dispatcher.render(buffer)
        mock_query.top_node.assert_called_once_with()
        assert buffer.plain == "top node output"


class TestNamespace:
    """Namespace routines."""

    def test_config_requires_namespace(
        self, dispatcher, navigation, buffer, mock_query: MagicMock
    ) -> None:
        activate(navigation, PrimaryView.NAMESPACE, SecondaryOption.CONFIG)
        dispatcher.render(buffer)
        assert buffer.plain == "Please select a namespace."
        mock_query.fetch.assert_not_called()

    def test_config(
        self, dispatcher, navigation, store, buffer, mock_query: MagicMock
    ) -> None:
        store.set_selection(PANEL_NAMESPACE, NAMESPACE_ROW)
        activate(navigation, PrimaryView.NAMESPACE, SecondaryOption.CONFIG)
        dispatcher.render(buffer)
        mock_query.fetch.assert_called_once_with("namespaces", "default", {"output": "yaml"})

    def test_deployments_all_namespaces(
        self, dispatcher, navigation, buffer, mock_query: MagicMock
    ) -> None:
        activate(navigation, PrimaryView.NAMESPACE, SecondaryOption.DEPLOYMENTS)
        dispatcher.render(buffer)
        mock_query.fetch.assert_called_once_with(
            "deployments", flags={"all-namespaces": "true"}
        )

    def test_pods_scoped(
        self, dispatcher, navigation, store, buffer, mock_query: MagicMock
    ) -> None:
        store.set_selection(PANEL_NAMESPACE, NAMESPACE_ROW)
        activate(navigation, PrimaryView.NAMESPACE, SecondaryOption.PODS)
        dispatcher.render(buffer)
        mock_query.fetch.assert_called_once_with(
            "pods", flags={"output": "wide"}, namespace="default"
        )

    def test_pods_all_namespaces(
        self, dispatcher, navigation, buffer, mock_query: MagicMock
    ) -> None:
        activate(navigation, PrimaryView.NAMESPACE, SecondaryOption.PODS)
        dispatcher.render(buffer)
        mock_query.fetch.assert_called_once_with(
            "pods", flags={"all-namespaces": "true", "output": "wide"}
        )


class TestPod:
    """Pod routines."""

    def test_log_in_selected_namespace(
        self, dispatcher, navigation, store, buffer, mock_query: MagicMock
    ) -> None:
        store.set_selection(PANEL_NAMESPACE, NAMESPACE_ROW)
        store.set_selection(PANEL_POD, POD_ROW)
        activate(navigation, PrimaryView.POD, SecondaryOption.LOG)

        dispatcher.render(buffer)

        mock_query.logs.assert_called_once_with("web-1", LOG_FLAGS, namespace="default")
        assert buffer.plain == "log output"

    def test_log_across_namespaces(
        self, dispatcher, navigation, store, buffer, mock_query: MagicMock
    ) -> None:
        store.set_selection(PANEL_POD, "kube-system   coredns-1   1/1   Running")
        activate(navigation, PrimaryView.POD, SecondaryOption.LOG)

        dispatcher.render(buffer)

        mock_query.logs.assert_called_once_with(
            "coredns-1", LOG_FLAGS, namespace="kube-system"
        )

    def test_log_tail_setting(
        self, navigation, store, buffer, mock_query: MagicMock
    ) -> None:
        dispatcher = DetailDispatcher(navigation, store, mock_query, logs_tail=50)
        store.set_selection(PANEL_POD, "default   web-1   1/1")
        activate(navigation, PrimaryView.POD, SecondaryOption.LOG)

        dispatcher.render(buffer)

        assert mock_query.logs.call_args.args[1]["tail"] == "50"

    def test_unselected(
        self, dispatcher, navigation, buffer, mock_query: MagicMock
    ) -> None:
        activate(navigation, PrimaryView.POD, SecondaryOption.LOG)
        dispatcher.render(buffer)
        assert buffer.plain == "Please select a pod."
        mock_query.logs.assert_not_called()

    def test_config(
        self, dispatcher, navigation, store, buffer, mock_query: MagicMock
    ) -> None:
        store.set_selection(PANEL_NAMESPACE, NAMESPACE_ROW)
        store.set_selection(PANEL_POD, POD_ROW)
        activate(navigation, PrimaryView.POD, SecondaryOption.CONFIG)
        dispatcher.render(buffer)
        mock_query.fetch.assert_called_once_with(
            "pod", "web-1", {"output": "yaml"}, namespace="default"
        )

    def test_top(
        self, dispatcher, navigation, store, buffer, mock_query: MagicMock
    ) -> None:
        store.set_selection(PANEL_NAMESPACE, NAMESPACE_ROW)
        store.set_selection(PANEL_POD, POD_ROW)
        activate(navigation, PrimaryView.POD, SecondaryOption.TOP)
        dispatcher.render(buffer)
        mock_query.top_pod.assert_called_once_with("web-1", namespace="default")

    def test_describe(
        self, dispatcher, navigation, store, buffer, mock_query: MagicMock
    ) -> None:
        store.set_selection(PANEL_NAMESPACE, NAMESPACE_ROW)
        store.set_selection(PANEL_POD, POD_ROW)
        activate(navigation, PrimaryView.POD, SecondaryOption.DESCRIBE)
        dispatcher.render(buffer)
        mock_query.describe.assert_called_once_with("pod", "web-1", namespace="default")
        assert buffer.plain == "describe output"

    def test_selected_row_highlighted(
        self, dispatcher, navigation, store, buffer, mock_query: MagicMock
    ) -> None:
        store.set_selection(PANEL_NAMESPACE, NAMESPACE_ROW)
        store.set_selection(PANEL_POD, POD_ROW)
        mock_query.describe.return_value = f"Name: web-1\n{POD_ROW}\n"
        activate(navigation, PrimaryView.POD, SecondaryOption.DESCRIBE)

        dispatcher.render(buffer)

        highlighted = [
            buffer.plain[span.start:span.end]
            for span in buffer.content.spans
            if Style.parse(str(span.style)) == Style.parse(COLOR_HIGHLIGHT)
        ]
        assert highlighted == [POD_ROW]


class TestDeployment:
    """Deployment routines."""

    def test_config(
        self, dispatcher, navigation, store, buffer, mock_query: MagicMock
    ) -> None:
        store.set_selection(PANEL_NAMESPACE, "prod   Active   40d")
        store.set_selection(PANEL_DEPLOYMENT, "api   2/2   2   2   5d")
        activate(navigation, PrimaryView.DEPLOYMENT, SecondaryOption.CONFIG)

        dispatcher.render(buffer)

        mock_query.fetch.assert_called_once_with(
            "deployment", "api", {"output": "yaml"}, namespace="prod"
        )

    def test_describe(
        self, dispatcher, navigation, store, buffer, mock_query: MagicMock
    ) -> None:
        store.set_selection(PANEL_DEPLOYMENT, "prod   api   2/2   2   2   5d")
        activate(navigation, PrimaryView.DEPLOYMENT, SecondaryOption.DESCRIBE)
        dispatcher.render(buffer)
        mock_query.describe.assert_called_once_with("deployment", "api", namespace="prod")

    def test_pods_by_match_labels(
        self, dispatcher, navigation, store, buffer, mock_query: MagicMock
    ) -> None:
        store.set_selection(PANEL_DEPLOYMENT, "prod   api   2/2   2   2   5d")
        mock_query.fetch.side_effect = ['\'{"app":"api","tier":"backend"}\'', "pods"]
        activate(navigation, PrimaryView.DEPLOYMENT, SecondaryOption.PODS)

        dispatcher.render(buffer)

        first, second = mock_query.fetch.call_args_list
        assert first.args == (
            "deployment",
            "api",
            {"output": "jsonpath='{.spec.selector.matchLabels}'"},
        )
        assert first.kwargs == {"namespace": "prod"}
        assert second.args == ("pods",)
        assert second.kwargs == {
            "flags": {"selector": "app=api,tier=backend", "output": "wide"},
            "namespace": "prod",
        }
        assert buffer.plain == "pods"

    def test_pods_log(
        self, dispatcher, navigation, store, buffer, mock_query: MagicMock
    ) -> None:
        store.set_selection(PANEL_DEPLOYMENT, "prod   api   2/2")
        mock_query.fetch.return_value = "'{\"app\":\"api\"}'"
        activate(navigation, PrimaryView.DEPLOYMENT, SecondaryOption.PODS_LOG)

        dispatcher.render(buffer)

        mock_query.logs.assert_called_once_with(
            flags={"selector": "app=api", **LOG_FLAGS}, namespace="prod"
        )

    def test_top_pods(
        self, dispatcher, navigation, store, buffer, mock_query: MagicMock
    ) -> None:
        store.set_selection(PANEL_DEPLOYMENT, "prod   api   2/2")
        mock_query.fetch.return_value = "'{\"app\":\"api\"}'"
        activate(navigation, PrimaryView.DEPLOYMENT, SecondaryOption.TOP_PODS)

        dispatcher.render(buffer)

        mock_query.top_pod.assert_called_once_with(
            flags={"selector": "app=api"}, namespace="prod"
        )


class TestService:
    """Service routines."""

    def test_pods_unselected(
        self, dispatcher, navigation, buffer, mock_query: MagicMock
    ) -> None:
        activate(navigation, PrimaryView.SERVICE, SecondaryOption.PODS)
        dispatcher.render(buffer)
        assert buffer.plain == "Please select a service."
        assert mock_query.method_calls == []

    def test_pods_by_selector(
        self, dispatcher, navigation, store, buffer, mock_query: MagicMock
    ) -> None:
        store.set_selection(PANEL_NAMESPACE, NAMESPACE_ROW)
        store.set_selection(PANEL_SERVICE, "web   ClusterIP   10.0.0.1   <none>   80/TCP")
        mock_query.fetch.side_effect = ["'{\"app\":\"web\"}'", "pods"]
        activate(navigation, PrimaryView.SERVICE, SecondaryOption.PODS)

        dispatcher.render(buffer)

        first, second = mock_query.fetch.call_args_list
        assert first.args == ("service", "web", {"output": "jsonpath='{.spec.selector}'"})
        assert first.kwargs == {"namespace": "default"}
        assert second.kwargs["flags"]["selector"] == "app=web"

    def test_empty_selector_output(
        self, dispatcher, navigation, store, buffer, mock_query: MagicMock
    ) -> None:
        store.set_selection(PANEL_SERVICE, "default   web   ClusterIP")
        mock_query.fetch.return_value = ""
        activate(navigation, PrimaryView.SERVICE, SecondaryOption.PODS_LOG)

        dispatcher.render(buffer)

        assert buffer.plain == "Pods not found."
        mock_query.logs.assert_not_called()

    def test_selector_without_labels(
        self, dispatcher, navigation, store, buffer, mock_query: MagicMock
    ) -> None:
        store.set_selection(PANEL_SERVICE, "default   kubernetes   ClusterIP")
        mock_query.fetch.return_value = "''"
        activate(navigation, PrimaryView.SERVICE, SecondaryOption.TOP_PODS)

        dispatcher.render(buffer)

        assert buffer.plain == "Please select a service."
        mock_query.top_pod.assert_not_called()

    def test_config(
        self, dispatcher, navigation, store, buffer, mock_query: MagicMock
    ) -> None:
        store.set_selection(PANEL_SERVICE, "default   web   ClusterIP")
        activate(navigation, PrimaryView.SERVICE, SecondaryOption.CONFIG)
        dispatcher.render(buffer)
        mock_query.fetch.assert_called_once_with(
            "service", "web", {"output": "yaml"}, namespace="default"
        )


ALL_PATHS = [
    NavigationPath(view, option)
    for view, options in VIEW_NAVIGATION.items()
    for option in options
]


def selector_aware_fetch(kind, name=None, flags=None, namespace=None):
    if flags and flags.get("output", "").startswith("jsonpath"):
        return '{"app":"web"}'
    return f"{kind} listing"


class TestRepeatedRender:
    """Rendering the same path twice is side-effect free."""

    @pytest.mark.parametrize(
        "path", ALL_PATHS, ids=[f"{p.view.title}-{p.option.label}" for p in ALL_PATHS]
    )
    def test_render_twice_is_identical(
        self,
        path: NavigationPath,
        dispatcher: DetailDispatcher,
        navigation: NavigationController,
        store: SelectionStore,
        mock_query: MagicMock,
    ) -> None:
        mock_query.fetch.side_effect = selector_aware_fetch
        store.set_selection(PANEL_NAMESPACE, NAMESPACE_ROW)
        store.set_selection(PANEL_SERVICE, "web   ClusterIP   10.0.0.1")
        store.set_selection(PANEL_DEPLOYMENT, "api   2/2   2   2")
        store.set_selection(PANEL_POD, POD_ROW)
        activate(navigation, path.view, path.option)
        state = (navigation.active_view, navigation.active_option_index)
        selections = {
            name: store.get_selection(name)
            for name in (PANEL_NAMESPACE, PANEL_SERVICE, PANEL_DEPLOYMENT, PANEL_POD)
        }

        first = TextBuffer()
        dispatcher.render(first)
        first_calls = list(mock_query.method_calls)
        mock_query.reset_mock()
        second = TextBuffer()
        dispatcher.render(second)

        assert mock_query.method_calls == first_calls
        assert second.plain == first.plain
        assert (navigation.active_view, navigation.active_option_index) == state
        assert {name: store.get_selection(name) for name in selections} == selections
