"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
MIN_PASSWORD_LENGTH = 6

UNKNOWN_TEXT = "Unknown"
SYSTEM_MARKER = "System"
CURRENCY_SYMBOL = "₹"

EXPORT_FILENAME_PREFIX = "attendance_report_"
