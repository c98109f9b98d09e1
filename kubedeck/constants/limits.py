"""Limit and threshold constants for the TUI.

All limit values and validation ranges.
"""

from typing import Final

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 1
LOGS_TAIL_MIN: Final = 1

# ============================================================================
# Logging limits
# ============================================================================

LOG_FILE_MAX_BYTES: Final = 10 * 1024 * 1024
LOG_FILE_BACKUP_COUNT: Final = 5

__all__ = [
    "LOGS_TAIL_MIN",
    "LOG_FILE_BACKUP_COUNT",
    "LOG_FILE_MAX_BYTES",
    "REFRESH_INTERVAL_MIN",
]
