"""Core models."""

from kubedeck.models.core.navigation import NavigationPath, SelectionContext

__all__ = ["NavigationPath", "SelectionContext"]
