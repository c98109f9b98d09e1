"""Selected-row highlighting for kubectl output."""

from __future__ import annotations

from rich.text import Text

from kubedeck.constants.values import COLOR_HIGHLIGHT


def highlight_selected(
    content: str,
    selected: str | None,
    style: str = COLOR_HIGHLIGHT,
) -> Text:
    """Return ``content`` as Text with the first occurrence of ``selected`` styled.

    kubectl output may contain square brackets, so the text is never
    parsed as markup.
    """
    text = Text(content)
    if not selected:
        return text
    start = content.find(selected)
    if start != -1:
        text.stylize(style, start, start + len(selected))
    return text


__all__ = ["highlight_selected"]
