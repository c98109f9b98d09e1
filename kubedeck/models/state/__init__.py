"""State models: panels, selection slots, and settings."""

from kubedeck.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
)
from kubedeck.models.state.config_manager import ConfigManager
from kubedeck.models.state.panels import (
    Panel,
    PanelNotFoundError,
    TextBuffer,
    ViewSurface,
)
from kubedeck.models.state.selection_store import SelectionStore

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "Panel",
    "PanelNotFoundError",
    "SelectionStore",
    "TextBuffer",
    "ViewSurface",
]
