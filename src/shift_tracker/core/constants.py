"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STORAGE_KEY = "bartending-shifts"
DEFAULT_HOURLY_RATE = 15.0
DEFAULT_DATA_FILE = "data/shifts.json"

# date.weekday() value of the first day of a week (Sunday).
WEEK_START_WEEKDAY = 6
DAYS_PER_WEEK = 7
