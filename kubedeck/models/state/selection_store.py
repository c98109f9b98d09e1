"""Per-panel selection slots."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from kubedeck.constants.enums import PrimaryView
from kubedeck.constants.screens.dashboard import ALL_PANELS, FUNCTION_VIEWS
from kubedeck.models.state.panels import Panel, PanelNotFoundError

logger = logging.getLogger(__name__)


class SelectionStore:
    """Holds the selection slot of every panel on the dashboard.

    The Namespace panel's selection is the global namespace scope, so it
    survives focus changes; every other function panel loses its pick
    when a sibling panel gains focus.
    """

    def __init__(self, panel_names: Iterable[str] = ALL_PANELS) -> None:
        self._panels: dict[str, Panel] = {name: Panel(name) for name in panel_names}

    def lookup(self, name: str) -> Panel:
        """Return the panel with the given name.

        Raises:
            PanelNotFoundError: If no such panel is registered.
        """
        try:
            return self._panels[name]
        except KeyError:
            raise PanelNotFoundError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._panels

    def set_selection(self, name: str, text: str | None) -> None:
        self.lookup(name).set_selection(text)

    def get_selection(self, name: str) -> str | None:
        return self.lookup(name).selection

    def set_namespace_scope(self, text: str | None) -> bool:
        """Set the Namespace selection, dropping picks made under the old scope.

        Service, Deployment and Pod rows are laid out per scope, so their
        picks are cleared whenever the scope changes.

        Returns:
            True if the namespace scope changed.
        """
        namespace = self.lookup(PrimaryView.NAMESPACE.panel_name)
        previous = namespace.selection
        namespace.set_selection(text)
        if namespace.selection == previous:
            return False
        for view in FUNCTION_VIEWS:
            panel = self._panels.get(view.panel_name)
            if view.resource_kind and panel is not None:
                panel.clear_selection()
        logger.debug("set_namespace_scope - scope is now %r", namespace.selection)
        return True

    def clear_on_focus(self, focused: str) -> None:
        """Clear stale selections of sibling function panels."""
        if PrimaryView.from_panel_name(focused) is None:
            return
        for view in FUNCTION_VIEWS:
            name = view.panel_name
            if name == focused or view is PrimaryView.NAMESPACE:
                continue
            panel = self._panels.get(name)
            if panel is None:
                logger.warning(
                    "clear_on_focus - focused %s, panel %s is not registered",
                    focused,
                    name,
                )
                continue
            panel.clear_selection()


__all__ = ["SelectionStore"]
