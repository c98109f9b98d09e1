"""Keyboard bindings module.

This module provides all keyboard bindings for the KubeDeck TUI.
Bindings are organized into two categories:

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen-specific bindings (*_SCREEN_BINDINGS)
"""

from kubedeck.keyboard.app import APP_BINDINGS
from kubedeck.keyboard.navigation import DASHBOARD_SCREEN_BINDINGS

__all__ = [
    "APP_BINDINGS",
    # Screen-specific bindings
    "DASHBOARD_SCREEN_BINDINGS",
]
