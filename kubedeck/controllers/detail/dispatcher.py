"""Detail pane dispatch.

Maps the active ``(PrimaryView, SecondaryOption)`` pair to a render
routine. Each routine resolves the selection, issues its kubectl query
through the resource query service, and paints the returned text with
the active view's selected row highlighted.

Incomplete selections never raise: they paint a "Please select" or
"Pods not found." placeholder instead.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from kubedeck.constants.enums import PrimaryView, SecondaryOption
from kubedeck.constants.screens.dashboard import SELECTOR_JSONPATH
from kubedeck.constants.values import LOGS_TAIL, PLEASE_SELECT_TEMPLATE, PODS_NOT_FOUND
from kubedeck.controllers.kubectl.controller import ResourceQueryService
from kubedeck.controllers.navigation.controller import NavigationController
from kubedeck.controllers.selection.resolver import SelectionContextResolver
from kubedeck.models.core.navigation import NavigationPath, SelectionContext
from kubedeck.models.state.panels import PanelNotFoundError, ViewSurface
from kubedeck.models.state.selection_store import SelectionStore
from kubedeck.utils.highlight import highlight_selected
from kubedeck.utils.label_selector import extract_label_terms, join_label_terms

logger = logging.getLogger(__name__)

RenderRoutine = Callable[[ViewSurface], None]

_NAMESPACE_RESOURCE = "namespace"


def please_select(surface: ViewSurface, resource: str) -> None:
    surface.write(PLEASE_SELECT_TEMPLATE.format(resource=resource))


class DetailDispatcher:
    """Renders the detail pane for the active navigation path."""

    def __init__(
        self,
        navigation: NavigationController,
        store: SelectionStore,
        query: ResourceQueryService,
        logs_tail: int = LOGS_TAIL,
    ) -> None:
        self.navigation = navigation
        self.store = store
        self.query = query
        self.logs_tail = logs_tail
        self.resolver = SelectionContextResolver(store)

        view, opt = PrimaryView, SecondaryOption
        self._routes: dict[NavigationPath, RenderRoutine] = {
            NavigationPath(view.CLUSTER_INFO, opt.NODES): self.render_cluster_nodes,
            NavigationPath(view.CLUSTER_INFO, opt.TOP_NODES): self.render_top_nodes,
            NavigationPath(view.NAMESPACE, opt.CONFIG): self.render_namespace_config,
            NavigationPath(view.NAMESPACE, opt.DEPLOYMENTS): self.render_namespace_deployments,
            NavigationPath(view.NAMESPACE, opt.PODS): self.render_namespace_pods,
            NavigationPath(view.SERVICE, opt.CONFIG): self.render_config,
            NavigationPath(view.SERVICE, opt.PODS): self.render_labels_pods,
            NavigationPath(view.SERVICE, opt.PODS_LOG): self.render_pods_logs,
            NavigationPath(view.SERVICE, opt.TOP_PODS): self.render_top_pods,
            NavigationPath(view.DEPLOYMENT, opt.CONFIG): self.render_config,
            NavigationPath(view.DEPLOYMENT, opt.PODS): self.render_labels_pods,
            NavigationPath(view.DEPLOYMENT, opt.PODS_LOG): self.render_pods_logs,
            NavigationPath(view.DEPLOYMENT, opt.DESCRIBE): self.render_describe,
            NavigationPath(view.DEPLOYMENT, opt.TOP_PODS): self.render_top_pods,
            NavigationPath(view.POD, opt.LOG): self.render_pod_logs,
            NavigationPath(view.POD, opt.CONFIG): self.render_config,
            NavigationPath(view.POD, opt.TOP): self.render_pod_top,
            NavigationPath(view.POD, opt.DESCRIBE): self.render_describe,
        }

    # =========================================================================
    # Dispatch
    # =========================================================================

    @property
    def routes(self) -> dict[NavigationPath, RenderRoutine]:
        return dict(self._routes)

    def route_for(self, path: NavigationPath | None) -> RenderRoutine | None:
        if path is None:
            return None
        return self._routes.get(path)

    def render(self, surface: ViewSurface) -> None:
        """Refresh ``surface`` for the active navigation path."""
        surface.clear()
        if self.navigation.active_view is None:
            return
        path = self.navigation.active_path
        routine = self.route_for(path)
        if routine is None:
            logger.debug("render - no routine bound to %s", path)
            return
        try:
            routine(surface)
        except PanelNotFoundError as exc:
            logger.warning("render - %s: %s", path, exc)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _paint(self, surface: ViewSurface, content: str) -> None:
        selected = None
        view = self.navigation.active_view
        if view is not None:
            selected = self.store.get_selection(view.panel_name)
        surface.write(highlight_selected(content, selected))
        surface.trigger_redraw()

    def _log_flags(self, selector: str | None = None) -> dict[str, str]:
        flags: dict[str, str] = {}
        if selector is not None:
            flags["selector"] = selector
        flags["all-containers"] = "true"
        flags["tail"] = str(self.logs_tail)
        flags["prefix"] = "true"
        return flags

    def _resolve_active(self, surface: ViewSurface) -> SelectionContext | None:
        """Resolve the active view's row, painting a placeholder when unselected."""
        view = self.navigation.active_view
        if view is None or not view.resource_kind:
            return None
        context = self.resolver.resolve(view)
        if not context.is_selected:
            please_select(surface, context.kind)
            return None
        return context

    def _resolve_label_selector(self, surface: ViewSurface) -> tuple[str, str] | None:
        """Resolve ``(namespace, selector)`` of the active Service/Deployment."""
        view = self.navigation.active_view
        if view is None:
            return None
        json_path = SELECTOR_JSONPATH.get(view)
        if json_path is None:
            return None
        context = self._resolve_active(surface)
        if context is None:
            return None

        label_json = self.query.fetch(
            context.kind,
            context.name,
            {"output": json_path},
            namespace=context.namespace or None,
        )
        if not label_json:
            surface.write(PODS_NOT_FOUND)
            return None
        terms = extract_label_terms(label_json)
        if not terms:
            please_select(surface, context.kind)
            return None
        return context.namespace, join_label_terms(terms)

    # =========================================================================
    # Cluster info
    # =========================================================================

    def render_cluster_nodes(self, surface: ViewSurface) -> None:
        self._paint(surface, self.query.fetch("nodes"))

    def render_top_nodes(self, surface: ViewSurface) -> None:
        self._paint(surface, self.query.top_node())

    # =========================================================================
    # Namespace
    # =========================================================================

    def render_namespace_config(self, surface: ViewSurface) -> None:
        namespace = self.resolver.resolve_namespace()
        if not namespace:
            please_select(surface, _NAMESPACE_RESOURCE)
            return
        self._paint(surface, self.query.fetch("namespaces", namespace, {"output": "yaml"}))

    def _render_namespace_listing(
        self,
        surface: ViewSurface,
        kind: str,
        flags: dict[str, str],
    ) -> None:
        namespace = self.resolver.resolve_namespace()
        if namespace:
            content = self.query.fetch(kind, flags=flags, namespace=namespace)
        else:
            content = self.query.fetch(kind, flags={"all-namespaces": "true", **flags})
        self._paint(surface, content)

    def render_namespace_deployments(self, surface: ViewSurface) -> None:
        self._render_namespace_listing(surface, "deployments", {})

    def render_namespace_pods(self, surface: ViewSurface) -> None:
        self._render_namespace_listing(surface, "pods", {"output": "wide"})

    # =========================================================================
    # Single resource
    # =========================================================================

    def render_config(self, surface: ViewSurface) -> None:
        if self.navigation.active_view is PrimaryView.NAMESPACE:
            self.render_namespace_config(surface)
            return
        context = self._resolve_active(surface)
        if context is None:
            return
        self._paint(
            surface,
            self.query.fetch(
                context.kind,
                context.name,
                {"output": "yaml"},
                namespace=context.namespace or None,
            ),
        )

    def render_describe(self, surface: ViewSurface) -> None:
        if self.navigation.active_view is PrimaryView.NAMESPACE:
            self.render_namespace_config(surface)
            return
        context = self._resolve_active(surface)
        if context is None:
            return
        self._paint(
            surface,
            self.query.describe(context.kind, context.name, namespace=context.namespace or None),
        )

    def render_pod_logs(self, surface: ViewSurface) -> None:
        context = self._resolve_active(surface)
        if context is None:
            return
        self._paint(
            surface,
            self.query.logs(
                context.name,
                self._log_flags(),
                namespace=context.namespace or None,
            ),
        )

    def render_pod_top(self, surface: ViewSurface) -> None:
        context = self._resolve_active(surface)
        if context is None:
            return
        self._paint(
            surface,
            self.query.top_pod(context.name, namespace=context.namespace or None),
        )

    # =========================================================================
    # Label selector
    # =========================================================================

    def render_labels_pods(self, surface: ViewSurface) -> None:
        resolved = self._resolve_label_selector(surface)
        if resolved is None:
            return
        namespace, selector = resolved
        self._paint(
            surface,
            self.query.fetch(
                "pods",
                flags={"selector": selector, "output": "wide"},
                namespace=namespace or None,
            ),
        )

    def render_pods_logs(self, surface: ViewSurface) -> None:
        resolved = self._resolve_label_selector(surface)
        if resolved is None:
            return
        namespace, selector = resolved
        self._paint(
            surface,
            self.query.logs(flags=self._log_flags(selector), namespace=namespace or None),
        )

    def render_top_pods(self, surface: ViewSurface) -> None:
        resolved = self._resolve_label_selector(surface)
        if resolved is None:
            return
        namespace, selector = resolved
        self._paint(
            surface,
            self.query.top_pod(flags={"selector": selector}, namespace=namespace or None),
        )


__all__ = ["DetailDispatcher", "RenderRoutine", "please_select"]
