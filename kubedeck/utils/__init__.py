"""Utility functions for KubeDeck TUI."""

from kubedeck.utils.highlight import highlight_selected
from kubedeck.utils.label_selector import extract_label_terms, join_label_terms
from kubedeck.utils.row_parser import selected_field, selected_namespace

__all__ = [
    # Highlighting
    "highlight_selected",
    # Label selectors
    "extract_label_terms",
    "join_label_terms",
    # Row parsing
    "selected_field",
    "selected_namespace",
]
