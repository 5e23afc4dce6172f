"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TARGET_RATIO = 0.5
DEFAULT_HISTORY_LIMIT = 10

# Status-line thresholds (percentage points relative to the target percentage)
STATUS_TARGET_PERCENTAGE = 50
STATUS_WARNING_MARGIN = 10

# Progress-bar thresholds (absolute percentage)
BAR_GREEN_MIN = 50
BAR_ORANGE_MIN = 40

ISO_DATE_FORMAT = "%Y-%m-%d"
