"""Field extraction from rendered kubectl table rows.

Selections are stored as the raw text of a table row, so namespace and
name are recovered positionally: ``kubectl get -A`` rows start with
``NAMESPACE NAME``; single-namespace rows start with ``NAME``.
"""

from __future__ import annotations

# Table headers are never valid resource names.
_HEADER_FIELDS = frozenset({"NAME", "NAMESPACE"})


def selected_field(row: str | None, index: int) -> str:
    """Return whitespace-separated field ``index`` of ``row``, or ``""``."""
    if not row or index < 0:
        return ""
    fields = row.split()
    if index >= len(fields):
        return ""
    value = fields[index]
    if value in _HEADER_FIELDS:
        return ""
    return value


def selected_namespace(row: str | None) -> str:
    """Return the bare namespace name from a ``kubectl get namespaces`` row."""
    return selected_field(row, 0)


__all__ = ["selected_field", "selected_namespace"]
