"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Check-ins before this hour are "present", from this hour on "late".
# Classes nominally start at 09:00; the 09:00-09:59 hour is a grace window.
LATE_CUTOFF_HOUR = 10
NOMINAL_CLASS_START_HOUR = 9

DEFAULT_TARGET_PERCENT = 75
DEFAULT_STORAGE_TIMEOUT_SECONDS = 3
SUMMARY_WEEK_DAYS = 7

DEFAULT_PROFILE = {
    "name": "Student",
    "roll_number": "STU001",
    "course": "Computer Science",
    "semester": "5th",
    "email": "student@example.com",
}

# Column widths from database/schema.sql (notes is TEXT: 65535 bytes, 4 bytes per utf8mb4 char).
MAX_LENGTHS = {
    "name": 150,
    "roll_number": 50,
    "course": 150,
    "semester": 50,
    "email": 150,
    "student_id": 64,
    "subject": 150,
    "notes": 16383,
}
