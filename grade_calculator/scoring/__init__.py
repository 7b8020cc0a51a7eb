"""Grade aggregation and scale mapping modules."""

from .calculator import (
    ZeroWeightError,
    calculate_average_grade,
    calculate_remaining_grade,
    calculate_summary,
    is_attainable,
    remaining_weight_for,
)
from .scale import get_grade_point, get_letter_grade, get_scale

__all__ = [
    "ZeroWeightError",
    "calculate_average_grade",
    "calculate_remaining_grade",
    "calculate_summary",
    "is_attainable",
    "remaining_weight_for",
    "get_grade_point",
    "get_letter_grade",
    "get_scale",
]
