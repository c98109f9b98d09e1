"""Widgets module for the KubeDeck TUI.

This module provides the dashboard widgets:
- panels: ResourcePanel, NavigationStrip, DetailPane
"""

from kubedeck.widgets.panels import DetailPane, NavigationStrip, ResourcePanel

__all__ = [
    "DetailPane",
    "NavigationStrip",
    "ResourcePanel",
]
