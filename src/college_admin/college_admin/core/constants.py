"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_ANNUAL_LEAVE_QUOTA = 12
DEFAULT_MONTHLY_LEAVE_CAP = 2

DEFAULT_EXCELLENT_THRESHOLD = 85
DEFAULT_GOOD_THRESHOLD = 75

# Academic year runs June..May.
ACADEMIC_YEAR_START_MONTH = 6

DEFAULT_LIST_LIMIT = 200
DEFAULT_PENDING_LIMIT = 500
