"""Application constants"""

# Theme colors
PRIMARY_COLOR = "#6366f1"
SUCCESS_COLOR = "#10b981"
WARNING_COLOR = "#f59e0b"
ERROR_COLOR = "#ef4444"
INFO_COLOR = "#3b82f6"

TONE_COLORS = {
    "green": SUCCESS_COLOR,
    "blue": INFO_COLOR,
    "yellow": WARNING_COLOR,
    "red": ERROR_COLOR,
}

# Passing thresholds (letter -> minimum percent)
THRESHOLD_FLOORS = {"A": 90.0, "B": 80.0, "C": 70.0}
PASSING_THRESHOLDS = ("A", "B", "C")
DEFAULT_THRESHOLD = "C"
DEFAULT_THRESHOLD_FLOOR = 70.0

# Width of the yellow band below a threshold
STATUS_BAND = 10.0

# Letter grade -> GPA points
LETTER_GRADE_POINTS = {
    "A": 4.0, "A-": 3.7,
    "B+": 3.3, "B": 3.0, "B-": 2.7,
    "C+": 2.3, "C": 2.0, "C-": 1.7,
    "D+": 1.3, "D": 1.0, "D-": 0.7,
    "F": 0.0,
}

# Category weights must add up to this
CATEGORY_WEIGHT_TOTAL = 100

DEFAULT_CATEGORIES = [
    {"name": "Exams", "weight": 40},
    {"name": "Assignments", "weight": 40},
    {"name": "Participation", "weight": 20},
]

# Degree defaults
DEFAULT_CREDITS = 3
DEFAULT_TOTAL_CREDITS_REQUIRED = 60
DEFAULT_TARGET_GPA = 3.5
CRITICAL_GPA_MINIMUM = 2.5

# Class status values
STATUS_COMPLETED = "completed"
STATUS_IN_PROGRESS = "in_progress"
STATUS_REMAINING = "remaining"

# Display rounding
PERCENT_DECIMALS = 1
GPA_DECIMALS = 2
MISSING_VALUE = "—"
