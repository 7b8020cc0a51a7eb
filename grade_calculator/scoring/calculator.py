"""Weighted average and required remaining grade calculation."""

import logging
import math
from typing import Optional, Sequence

from ..config import FULL_WEIGHT, MAX_VALUE, MIN_VALUE, WEIGHT_TOLERANCE
from .scale import get_scale

logger = logging.getLogger(__name__)


class ZeroWeightError(ZeroDivisionError):
    """Raised when a division by a zero (or empty) total weight is requested."""


def _weighted_totals(weights: Sequence[float], grades: Sequence[float]) -> tuple[float, float]:
    """Return (sum of weight*grade, sum of weights)."""
    if len(weights) != len(grades):
        raise ValueError(
            f"weights and grades must have the same length ({len(weights)} != {len(grades)})"
        )

    total_weighted = 0.0
    total_weight = 0.0
    for weight, grade in zip(weights, grades):
        total_weighted += weight * grade
        total_weight += weight

    return total_weighted, total_weight


def calculate_average_grade(weights: Sequence[float], grades: Sequence[float]) -> float:
    """
    Calculate the weighted average of the recorded grades.

    Args:
        weights: Weight of each item (0-100)
        grades: Grade obtained on each item (0-100), index-aligned with weights

    Returns:
        Sum of weight*grade divided by the sum of weights

    Raises:
        ZeroWeightError: If the weights sum to zero
        ValueError: If the sequences differ in length
    """
    total_weighted, total_weight = _weighted_totals(weights, grades)
    if total_weight == 0:
        raise ZeroWeightError("Total weight is zero; the average grade is undefined")

    average = total_weighted / total_weight
    logger.debug("Average of %d items: %s (total weight %s)", len(weights), average, total_weight)
    return average


def calculate_remaining_grade(
    grades: Sequence[float],
    weights: Sequence[float],
    desired_average: float,
    remaining_weight: float,
) -> float:
    """
    Calculate the average needed on the remaining weight to reach desired_average.

    Returns 0.0 when the current grades already meet the target. The result is
    not clamped above, so a value over 100 means the target is unattainable.

    Raises:
        ZeroWeightError: If there is no remaining weight
    """
    if remaining_weight <= 0:
        raise ZeroWeightError("No remaining weight to distribute the required grade over")

    total_weighted, total_weight = _weighted_totals(weights, grades)
    required_total = desired_average * (total_weight + remaining_weight)
    remaining_total = required_total - total_weighted

    logger.debug(
        "Required total %s, current total %s, remaining weight %s",
        required_total,
        total_weighted,
        remaining_weight,
    )

    if remaining_total <= 0:
        return 0.0

    return remaining_total / remaining_weight


def is_attainable(remaining_grade: float) -> bool:
    """Check whether a required remaining grade can actually be scored."""
    return MIN_VALUE <= remaining_grade <= MAX_VALUE


def remaining_weight_for(weights: Sequence[float]) -> float:
    """Weight not yet assigned to any recorded item."""
    total_weight = sum(weights)
    # Decimal weights like 71.3 + 22.9 + 5.8 drift off 100 in binary
    if math.isclose(total_weight, FULL_WEIGHT, abs_tol=WEIGHT_TOLERANCE):
        return 0.0
    return FULL_WEIGHT - total_weight


def calculate_summary(
    weights: Sequence[float],
    grades: Sequence[float],
    desired_average: Optional[float] = None,
) -> dict:
    """
    Aggregate recorded items into a single grade summary.

    Args:
        weights: Weight of each item
        grades: Grade of each item, index-aligned with weights
        desired_average: Target overall average; only used while
            recorded weight is below FULL_WEIGHT

    Returns:
        Dict with items, item_count, total_weight, average_grade, grade_point,
        letter_grade, remaining_weight, desired_average, remaining_grade,
        attainable
    """
    average = calculate_average_grade(weights, grades)
    grade_point, letter = get_scale(average)
    total_weight = sum(weights)
    remaining_weight = remaining_weight_for(weights)

    remaining_grade = None
    attainable = None
    if remaining_weight > 0 and desired_average is not None:
        remaining_grade = calculate_remaining_grade(grades, weights, desired_average, remaining_weight)
        attainable = is_attainable(remaining_grade)
    else:
        desired_average = None

    return {
        "items": [{"weight": w, "grade": g} for w, g in zip(weights, grades)],
        "item_count": len(weights),
        "total_weight": total_weight,
        "average_grade": average,
        "grade_point": grade_point,
        "letter_grade": letter,
        "remaining_weight": max(0.0, remaining_weight),
        "desired_average": desired_average,
        "remaining_grade": remaining_grade,
        "attainable": attainable,
    }
