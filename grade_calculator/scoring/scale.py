"""Map a percentage average onto the grade-point and letter scales."""

from ..config import GRADE_POINTS, GRADE_THRESHOLDS


def get_letter_grade(average: float) -> str:
    """Get letter grade from a percentage average."""
    for letter, min_average in GRADE_THRESHOLDS.items():
        if average >= min_average:
            return letter
    return "F"  # Default for anything below the D threshold (and NaN)


def get_grade_point(average: float) -> float:
    """Get grade-point value (0.0-4.0) from a percentage average."""
    return GRADE_POINTS[get_letter_grade(average)]


def get_scale(average: float) -> tuple[float, str]:
    """Return (grade_point, letter_grade) for a percentage average."""
    letter = get_letter_grade(average)
    return GRADE_POINTS[letter], letter
