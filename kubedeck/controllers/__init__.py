"""Controllers module for KubeDeck TUI.

This module provides the navigation and detail dispatch controllers and
the kubectl resource query service they drive.
"""

from __future__ import annotations

# Base classes
from kubedeck.controllers.base import BaseController, CommandResult

# Dashboard facade
from kubedeck.controllers.dashboard import DashboardController

# Detail dispatch
from kubedeck.controllers.detail import DetailDispatcher, PanelListPresenter

# kubectl
from kubedeck.controllers.kubectl import (
    KubectlController,
    KubectlRequest,
    ResourceQueryService,
)

# Navigation
from kubedeck.controllers.navigation import NavigationController

# Selection
from kubedeck.controllers.selection import SelectionContextResolver

__all__ = [
    # Base
    "BaseController",
    "CommandResult",
    # Domain Controllers
    "DashboardController",
    "DetailDispatcher",
    "KubectlController",
    "KubectlRequest",
    "NavigationController",
    "PanelListPresenter",
    "ResourceQueryService",
    "SelectionContextResolver",
]
