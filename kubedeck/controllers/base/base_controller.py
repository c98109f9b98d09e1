"""Base controller for KubeDeck cluster access.

Controllers wrap an external command line tool. Their calls block, so
screens invoke them from Textual thread workers.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Captured output of one external command."""

    args: tuple[str, ...]
    stdout: str = ""
    stderr: str = ""
    returncode: int = 0
    duration_ms: float = 0.0

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """stdout followed by stderr, the way a terminal would show them."""
        return self.stdout + self.stderr


class BaseController(ABC):
    """Base controller class for cluster data sources.

    Subclasses should implement the abstract methods to provide
    connection checks and context discovery.
    """

    def __init__(self, context: str | None = None) -> None:
        self.context = context

    @abstractmethod
    def check_connection(self) -> bool:
        """Check if the data source is available.

        Returns:
            True if connection is available, False otherwise
        """
        ...

    @abstractmethod
    def current_context(self) -> str | None:
        """Return the active context name, or None if it cannot be resolved."""
        ...
