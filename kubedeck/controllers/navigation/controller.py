"""Navigation strip state, rendering, and click hit-testing."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from rich.text import Text

from kubedeck.constants.enums import PrimaryView, SecondaryOption
from kubedeck.constants.screens.dashboard import VIEW_NAVIGATION
from kubedeck.constants.values import COLOR_ACTIVE, COLOR_INACTIVE, OPT_SEPARATOR
from kubedeck.models.core.navigation import NavigationPath
from kubedeck.models.state.panels import ViewSurface

logger = logging.getLogger(__name__)


class NavigationController:
    """Tracks which secondary option is active for the active primary view.

    The strip is laid out left to right in declaration order, each label
    taking as many columns as it has characters, with ``separator``
    between labels. A click within half a separator width (rounded up)
    of a label's edge still selects that label; when two widened ranges
    cover the same column the earlier option wins.
    """

    def __init__(
        self,
        detail: ViewSurface | None = None,
        options: Mapping[PrimaryView, tuple[SecondaryOption, ...]] = VIEW_NAVIGATION,
        separator: str = OPT_SEPARATOR,
    ) -> None:
        self.detail = detail
        self._options = options
        self.separator = separator
        self.active_view: PrimaryView | None = None
        self.active_option_index: int = 0
        self.active_option: SecondaryOption | None = None

    # =========================================================================
    # State
    # =========================================================================

    def options_for(self, view: PrimaryView | None) -> tuple[SecondaryOption, ...]:
        if view is None:
            return ()
        return self._options.get(view, ())

    @property
    def options(self) -> tuple[SecondaryOption, ...]:
        return self.options_for(self.active_view)

    @property
    def active_option_label(self) -> str:
        return self.active_option.label if self.active_option else ""

    @property
    def active_path(self) -> NavigationPath | None:
        if self.active_view is None or self.active_option is None:
            return None
        return NavigationPath(self.active_view, self.active_option)

    def on_focus_change(self, view: PrimaryView | None) -> bool:
        """Make ``view`` the active primary view.

        ``None`` means a non-function panel took focus; the active view is
        kept, or defaults to ClusterInfo when nothing was active yet.

        Returns:
            True if the active view changed.
        """
        if view is None:
            if self.active_view is not None:
                return False
            view = PrimaryView.CLUSTER_INFO

        if view is self.active_view:
            return False

        self.active_view = view
        self.active_option_index = 0
        options = self.options_for(view)
        self.active_option = options[0] if options else None
        logger.debug("on_focus_change - active view %s", view.title)
        return True

    def select_option(self, index: int) -> str:
        """Activate the option at ``index`` for the active view.

        Returns:
            The chosen label, or ``""`` when ``index`` is out of range.
        """
        options = self.options
        if index < 0 or index >= len(options):
            return ""
        self.active_option_index = index
        self.active_option = options[index]
        if self.detail is not None:
            self.detail.set_scroll_origin(0, 0)
        return self.active_option.label

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self) -> Text:
        """Render the option strip with the active option emphasized."""
        text = Text()
        for index, option in enumerate(self.options):
            if index:
                text.append(self.separator, style=COLOR_INACTIVE)
            style = COLOR_ACTIVE if index == self.active_option_index else COLOR_INACTIVE
            text.append(option.label, style=style)
        return text

    def option_spans(self) -> list[tuple[int, int]]:
        """Inclusive ``(left, right)`` columns of each rendered label."""
        spans: list[tuple[int, int]] = []
        sep = len(self.separator)
        prefix = 0
        for index, option in enumerate(self.options):
            width = len(option.label)
            left = prefix + index * sep
            spans.append((left, left + width - 1))
            prefix += width
        return spans

    def hit_test(self, column: int) -> int | None:
        """Return the index of the option rendered at ``column``, if any."""
        half_sep = (len(self.separator) + 1) // 2
        for index, (left, right) in enumerate(self.option_spans()):
            if left - half_sep <= column <= right + half_sep:
                logger.debug(
                    "hit_test - column %d in option %d [%d, %d]", column, index, left, right
                )
                return index
        return None

    def click(self, column: int) -> str:
        """Select the option under ``column``; ``""`` when nothing is hit."""
        index = self.hit_test(column)
        selected = self.select_option(index) if index is not None else ""
        logger.debug("click - column %d selected %r", column, selected)
        return selected


__all__ = ["NavigationController"]
