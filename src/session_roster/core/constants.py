"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DATE_TIME_FORMAT = "%d-%m-%Y %H:%M"
DATE_FORMAT = "%d-%m-%Y"
TIME_FORMAT = "%H:%M"

# Returned by Registry.pay_rate_for_person_named when no person matches.
PAY_RATE_NOT_FOUND = -1

MINUTES_PER_HOUR = 60
