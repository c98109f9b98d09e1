"""Dashboard panel widgets."""

from kubedeck.widgets.panels.detail_pane import DetailPane
from kubedeck.widgets.panels.navigation_strip import NavigationStrip
from kubedeck.widgets.panels.resource_panel import ResourcePanel

__all__ = ["DetailPane", "NavigationStrip", "ResourcePanel"]
