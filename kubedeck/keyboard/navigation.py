"""Screen-specific keyboard bindings."""

from textual.binding import Binding

# ============================================================================
# Dashboard screen bindings
# ============================================================================

DASHBOARD_SCREEN_BINDINGS: list[Binding] = [
    Binding("r", "refresh", "Refresh"),
    Binding("right_square_bracket", "next_option", "Next view"),
    Binding("left_square_bracket", "previous_option", "Prev view"),
    Binding("a", "all_namespaces", "All namespaces"),
    Binding("1", "focus_panel('cluster-info')", "Cluster", show=False),
    Binding("2", "focus_panel('namespace')", "Namespace", show=False),
    Binding("3", "focus_panel('service')", "Service", show=False),
    Binding("4", "focus_panel('deployment')", "Deployment", show=False),
    Binding("5", "focus_panel('pod')", "Pod", show=False),
    Binding("0", "focus_detail", "Detail", show=False),
]

__all__ = [
    "DASHBOARD_SCREEN_BINDINGS",
]
