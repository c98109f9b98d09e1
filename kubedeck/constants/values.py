"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "KubeDeck"

# ============================================================================
# Colors (Rich style names)
# ============================================================================

COLOR_ACTIVE: Final = "green"
COLOR_INACTIVE: Final = "white"
COLOR_HIGHLIGHT: Final = "green"

# ============================================================================
# Navigation strip
# ============================================================================

OPT_SEPARATOR: Final = "   "

# ============================================================================
# kubectl
# ============================================================================

KUBECTL_BINARY: Final = "kubectl"
LOGS_TAIL: Final = 200

# ============================================================================
# Detail pane messages
# ============================================================================

PLEASE_SELECT_TEMPLATE: Final = "Please select a {resource}."
PODS_NOT_FOUND: Final = "Pods not found."
CURRENT_CONTEXT_PREFIX: Final = "Current Context: "

__all__ = [
    "APP_TITLE",
    "COLOR_ACTIVE",
    "COLOR_HIGHLIGHT",
    "COLOR_INACTIVE",
    "CURRENT_CONTEXT_PREFIX",
    "KUBECTL_BINARY",
    "LOGS_TAIL",
    "OPT_SEPARATOR",
    "PLEASE_SELECT_TEMPLATE",
    "PODS_NOT_FOUND",
]
