"""
Score arithmetic shared by quiz grading and interview evaluation.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence


def round_half_up(numerator, denominator) -> int:
    """
    Round ``numerator / denominator`` to the nearest integer, halves up.

    Exact (Decimal) so 2.5 -> 3 and 83.333... -> 83 regardless of float error.
    """
    if denominator == 0:
        raise ZeroDivisionError("denominator must be non-zero")
    value = Decimal(numerator) / Decimal(denominator)
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def average_score(scores: Sequence[int]) -> int:
    """Unweighted mean of per-question scores, rounded half up."""
    if not scores:
        raise ValueError("At least one score is required")
    return round_half_up(sum(scores), len(scores))


def percentage_score(correct: int, total: int) -> int:
    """round(100 * correct / total); all correct is 100, none is 0."""
    if total <= 0:
        raise ValueError("Cannot score an empty quiz")
    return round_half_up(100 * correct, total)
