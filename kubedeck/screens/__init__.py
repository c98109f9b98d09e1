"""KubeDeck TUI Screens.

Domain Structure:
    - dashboard/ - Primary panels, navigation strip and detail pane

Note: keybindings live in the keyboard/ package:
    - kubedeck.keyboard.DASHBOARD_SCREEN_BINDINGS
"""

from __future__ import annotations

from kubedeck.screens.dashboard import DashboardScreen

__all__ = ["DashboardScreen"]
