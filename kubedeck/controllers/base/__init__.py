"""Base controller classes."""

from kubedeck.controllers.base.base_controller import BaseController, CommandResult

__all__ = ["BaseController", "CommandResult"]
