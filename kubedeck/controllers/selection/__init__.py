"""Selection context resolution."""

from kubedeck.controllers.selection.resolver import (
    SelectionContextResolver,
    resolve_selection,
)

__all__ = ["SelectionContextResolver", "resolve_selection"]
