"""Dashboard screen constants - panel names, navigation options, widget IDs."""

from typing import Final

from kubedeck.constants.enums import PrimaryView, SecondaryOption

# ============================================================================
# Panel names
# ============================================================================

PANEL_CLUSTER_INFO: Final = PrimaryView.CLUSTER_INFO.panel_name
PANEL_NAMESPACE: Final = PrimaryView.NAMESPACE.panel_name
PANEL_SERVICE: Final = PrimaryView.SERVICE.panel_name
PANEL_DEPLOYMENT: Final = PrimaryView.DEPLOYMENT.panel_name
PANEL_POD: Final = PrimaryView.POD.panel_name
PANEL_NAVIGATION: Final = "navigation"
PANEL_DETAIL: Final = "detail"

# Panels whose focus drives the navigation strip, in layout order.
FUNCTION_VIEWS: Final[tuple[PrimaryView, ...]] = (
    PrimaryView.CLUSTER_INFO,
    PrimaryView.NAMESPACE,
    PrimaryView.SERVICE,
    PrimaryView.DEPLOYMENT,
    PrimaryView.POD,
)

# Panels whose row listing comes from kubectl.
LISTING_VIEWS: Final[tuple[PrimaryView, ...]] = (
    PrimaryView.NAMESPACE,
    PrimaryView.SERVICE,
    PrimaryView.DEPLOYMENT,
    PrimaryView.POD,
)

ALL_PANELS: Final[tuple[str, ...]] = (
    *(view.panel_name for view in FUNCTION_VIEWS),
    PANEL_NAVIGATION,
    PANEL_DETAIL,
)

# ============================================================================
# Navigation options per view (declaration order is strip order)
# ============================================================================

VIEW_NAVIGATION: Final[dict[PrimaryView, tuple[SecondaryOption, ...]]] = {
    PrimaryView.CLUSTER_INFO: (
        SecondaryOption.NODES,
        SecondaryOption.TOP_NODES,
    ),
    PrimaryView.NAMESPACE: (
        SecondaryOption.CONFIG,
        SecondaryOption.DEPLOYMENTS,
        SecondaryOption.PODS,
    ),
    PrimaryView.SERVICE: (
        SecondaryOption.CONFIG,
        SecondaryOption.PODS,
        SecondaryOption.PODS_LOG,
        SecondaryOption.TOP_PODS,
    ),
    PrimaryView.DEPLOYMENT: (
        SecondaryOption.CONFIG,
        SecondaryOption.PODS,
        SecondaryOption.PODS_LOG,
        SecondaryOption.DESCRIBE,
        SecondaryOption.TOP_PODS,
    ),
    PrimaryView.POD: (
        SecondaryOption.LOG,
        SecondaryOption.CONFIG,
        SecondaryOption.TOP,
        SecondaryOption.DESCRIBE,
    ),
}

# ============================================================================
# Label selector jsonpath per view
# ============================================================================

SELECTOR_JSONPATH: Final[dict[PrimaryView, str]] = {
    PrimaryView.SERVICE: "jsonpath='{.spec.selector}'",
    PrimaryView.DEPLOYMENT: "jsonpath='{.spec.selector.matchLabels}'",
}

# ============================================================================
# Widget IDs
# ============================================================================

NAVIGATION_STRIP_ID: Final = "navigation-strip"
DETAIL_PANE_ID: Final = "detail-pane"
PANEL_GRID_ID: Final = "panel-grid"

__all__ = [
    "ALL_PANELS",
    "DETAIL_PANE_ID",
    "FUNCTION_VIEWS",
    "LISTING_VIEWS",
    "NAVIGATION_STRIP_ID",
    "PANEL_CLUSTER_INFO",
    "PANEL_DEPLOYMENT",
    "PANEL_DETAIL",
    "PANEL_GRID_ID",
    "PANEL_NAMESPACE",
    "PANEL_NAVIGATION",
    "PANEL_POD",
    "PANEL_SERVICE",
    "SELECTOR_JSONPATH",
    "VIEW_NAVIGATION",
]
