"""Constants module for KubeDeck TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, numbers with Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings
- screens/: Screen-specific constants

Note: Keyboard bindings are defined in kubedeck.keyboard module.
"""

from kubedeck.constants.defaults import (
    AUTO_REFRESH_DEFAULT,
    CONFIG_PATH_DEFAULT,
    LOG_FILE_DEFAULT,
    LOG_LEVEL_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
)
from kubedeck.constants.enums import (
    PrimaryView,
    SecondaryOption,
    SelectionScope,
)
from kubedeck.constants.limits import (
    LOGS_TAIL_MIN,
    REFRESH_INTERVAL_MIN,
)
from kubedeck.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)
from kubedeck.constants.values import (
    APP_TITLE,
    LOGS_TAIL,
    OPT_SEPARATOR,
)

__all__ = [
    # Application
    "APP_TITLE",
    "AUTO_REFRESH_DEFAULT",
    # Timeouts
    "CLUSTER_REQUEST_TIMEOUT",
    # Defaults
    "CONFIG_PATH_DEFAULT",
    "KUBECTL_COMMAND_TIMEOUT",
    "LOGS_TAIL",
    "LOGS_TAIL_MIN",
    "LOG_FILE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "OPT_SEPARATOR",
    # Enums
    "PrimaryView",
    "REFRESH_INTERVAL_DEFAULT",
    "REFRESH_INTERVAL_MIN",
    "SecondaryOption",
    "SelectionScope",
]
