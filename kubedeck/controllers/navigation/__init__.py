"""Navigation strip controller."""

from kubedeck.controllers.navigation.controller import NavigationController

__all__ = ["NavigationController"]
