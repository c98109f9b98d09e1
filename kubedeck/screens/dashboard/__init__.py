"""Dashboard screen module exports."""

from kubedeck.screens.dashboard.dashboard_screen import DashboardScreen
from kubedeck.screens.dashboard.presenter import (
    DetailRendered,
    PanelRendered,
    render_detail,
    render_panel,
)

__all__ = [
    "DashboardScreen",
    "DetailRendered",
    "PanelRendered",
    "render_detail",
    "render_panel",
]
