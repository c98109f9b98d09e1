"""Resolution of the effective namespace and resource name.

The active view's selected row is parsed positionally:

- Namespace panel has a selection: the listing is scoped to that
  namespace, so the row's first field is the resource name.
- Namespace panel has no selection: the listing spans all namespaces,
  so the row's first two fields are namespace and name.
"""

from __future__ import annotations

from kubedeck.constants.enums import PrimaryView, SelectionScope
from kubedeck.models.core.navigation import SelectionContext
from kubedeck.models.state.selection_store import SelectionStore
from kubedeck.utils.row_parser import selected_field, selected_namespace


class SelectionContextResolver:
    """Derives a SelectionContext from the selection store."""

    def __init__(self, store: SelectionStore) -> None:
        self._store = store

    def namespace_selection(self) -> str | None:
        return self._store.get_selection(PrimaryView.NAMESPACE.panel_name)

    def resolve_namespace(self) -> str:
        """Bare namespace name from the Namespace panel, or ``""``."""
        return selected_namespace(self.namespace_selection())

    def resolve(self, view: PrimaryView, kind: str | None = None) -> SelectionContext:
        """Resolve the selected row of ``view``.

        Args:
            view: Active primary view.
            kind: Resource kind override; defaults to the view's own kind.

        Raises:
            PanelNotFoundError: If the view's panel or the Namespace panel
                is not registered.
        """
        resource_kind = kind if kind is not None else view.resource_kind
        selected = self._store.get_selection(view.panel_name)
        namespace_row = self.namespace_selection()
        return resolve_selection(resource_kind, selected, namespace_row)


def resolve_selection(
    kind: str,
    selected: str | None,
    namespace_row: str | None,
) -> SelectionContext:
    """Pure resolution from row texts, shared by the resolver and tests."""
    if not selected:
        return SelectionContext.unselected(kind)

    if namespace_row:
        namespace = selected_namespace(namespace_row)
        name = selected_field(selected, 0)
        if not namespace or not name:
            return SelectionContext.unselected(kind)
        return SelectionContext(
            scope=SelectionScope.NAMESPACE,
            kind=kind,
            namespace=namespace,
            name=name,
        )

    namespace = selected_field(selected, 0)
    name = selected_field(selected, 1)
    if not name:
        return SelectionContext.unselected(kind)
    return SelectionContext(
        scope=SelectionScope.ALL_NAMESPACES,
        kind=kind,
        namespace=namespace,
        name=name,
    )


__all__ = ["SelectionContextResolver", "resolve_selection"]
