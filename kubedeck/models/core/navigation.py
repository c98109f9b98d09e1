"""Navigation path and resolved selection models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from kubedeck.constants.enums import PrimaryView, SecondaryOption, SelectionScope


class NavigationPath(NamedTuple):
    """Dispatch key: the active primary view and its active option."""

    view: PrimaryView
    option: SecondaryOption

    def __str__(self) -> str:
        return f"{self.view.title} + {self.option.label}"


@dataclass(frozen=True)
class SelectionContext:
    """Effective namespace and resource name for the active view's row.

    ``namespace`` is empty in all-namespaces mode when the row carries no
    namespace field.
    """

    scope: SelectionScope
    kind: str = ""
    namespace: str = ""
    name: str = ""

    @property
    def is_selected(self) -> bool:
        return self.scope is not SelectionScope.UNSELECTED

    @classmethod
    def unselected(cls, kind: str = "") -> SelectionContext:
        return cls(scope=SelectionScope.UNSELECTED, kind=kind)


__all__ = ["NavigationPath", "SelectionContext"]
