"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# View Enums
# =============================================================================

class PrimaryView(Enum):
    """Top-level resource panels, valued by their panel name."""

    CLUSTER_INFO = "cluster-info"
    NAMESPACE = "namespace"
    SERVICE = "service"
    DEPLOYMENT = "deployment"
    POD = "pod"

    @property
    def panel_name(self) -> str:
        return self.value

    @property
    def title(self) -> str:
        """Panel title shown in the border."""
        return _VIEW_TITLES[self]

    @property
    def resource_kind(self) -> str:
        """kubectl resource kind, empty for views without a generic kind."""
        return _VIEW_RESOURCE_KINDS.get(self, "")

    @classmethod
    def from_panel_name(cls, name: str | None) -> "PrimaryView | None":
        """Return the view bound to a panel name, or None for other panels."""
        if not name:
            return None
        for view in cls:
            if view.value == name:
                return view
        return None


_VIEW_TITLES: dict[PrimaryView, str] = {
    PrimaryView.CLUSTER_INFO: "Cluster Info",
    PrimaryView.NAMESPACE: "Namespace",
    PrimaryView.SERVICE: "Service",
    PrimaryView.DEPLOYMENT: "Deployment",
    PrimaryView.POD: "Pod",
}

_VIEW_RESOURCE_KINDS: dict[PrimaryView, str] = {
    PrimaryView.SERVICE: "service",
    PrimaryView.DEPLOYMENT: "deployment",
    PrimaryView.POD: "pod",
}


class SecondaryOption(Enum):
    """Sub-view labels shown in the navigation strip."""

    NODES = "Nodes"
    TOP_NODES = "Top Nodes"
    CONFIG = "Config"
    DEPLOYMENTS = "Deployments"
    PODS = "Pods"
    PODS_LOG = "Pods Log"
    TOP_PODS = "Top Pods"
    DESCRIBE = "Describe"
    LOG = "Log"
    TOP = "Top"

    @property
    def label(self) -> str:
        return self.value

    @property
    def is_top(self) -> bool:
        """Metrics views that are refreshed periodically."""
        return self in (
            SecondaryOption.TOP,
            SecondaryOption.TOP_NODES,
            SecondaryOption.TOP_PODS,
        )


# =============================================================================
# Selection Enums
# =============================================================================

class SelectionScope(Enum):
    """How the selected row of the active view was resolved."""

    UNSELECTED = "unselected"
    NAMESPACE = "namespace"
    ALL_NAMESPACES = "all_namespaces"


__all__ = [
    "PrimaryView",
    "SecondaryOption",
    "SelectionScope",
]
