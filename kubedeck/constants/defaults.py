"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from pathlib import Path
from typing import Final

# ============================================================================
# UI defaults
# ============================================================================

REFRESH_INTERVAL_DEFAULT: Final = 5
AUTO_REFRESH_DEFAULT: Final = True

# ============================================================================
# Paths
# ============================================================================

CONFIG_PATH_DEFAULT: Final = Path.home() / ".config" / "kubedeck" / "settings.yaml"
LOG_DIR_DEFAULT: Final = Path.home() / ".local" / "state" / "kubedeck"
LOG_FILE_DEFAULT: Final = LOG_DIR_DEFAULT / "kubedeck.log"
LOG_LEVEL_DEFAULT: Final = "INFO"

__all__ = [
    "AUTO_REFRESH_DEFAULT",
    "CONFIG_PATH_DEFAULT",
    "LOG_DIR_DEFAULT",
    "LOG_FILE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
]
