"""Configuration constants for Grade Calculator."""

# Input range for weights, grades and desired averages (inclusive)
MIN_VALUE = 0
MAX_VALUE = 100

# Total weight of a complete course
FULL_WEIGHT = 100

# Totals this close to FULL_WEIGHT count as complete
WEIGHT_TOLERANCE = 1e-9

# Letter grade thresholds (inclusive lower bounds, highest first)
GRADE_THRESHOLDS = {
    "A": 90,
    "B": 80,
    "C": 70,
    "D": 60,
}

GRADE_POINTS = {
    "A": 4.0,
    "B": 3.0,
    "C": 2.0,
    "D": 1.0,
    "F": 0.0,
}

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
