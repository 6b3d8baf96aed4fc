"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_OFFICE_START_TIME = "09:00"
DEFAULT_OFFICE_END_TIME = "20:00"
DEFAULT_WORKING_HOURS_PER_DAY = 11
DEFAULT_DAYS_PER_MONTH = 30

MINUTES_PER_HOUR = 60

# Upper bounds (inclusive, in days overdue) of the receivables aging buckets.
AGING_BUCKET_LIMITS = (30, 60, 90)
