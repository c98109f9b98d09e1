"""Screen-specific constants subpackage.

Re-exports all screen-specific constants for convenient imports.
"""

from kubedeck.constants.screens.dashboard import (
    ALL_PANELS,
    DETAIL_PANE_ID,
    FUNCTION_VIEWS,
    LISTING_VIEWS,
    NAVIGATION_STRIP_ID,
    PANEL_CLUSTER_INFO,
    PANEL_DEPLOYMENT,
    PANEL_DETAIL,
    PANEL_GRID_ID,
    PANEL_NAMESPACE,
    PANEL_NAVIGATION,
    PANEL_POD,
    PANEL_SERVICE,
    SELECTOR_JSONPATH,
    VIEW_NAVIGATION,
)

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
