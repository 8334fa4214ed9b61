"""Three-tier grade status used by class cards and reports"""

from typing import Optional
from src.utils.constants import DEFAULT_THRESHOLD_FLOOR, STATUS_BAND, THRESHOLD_FLOORS


def threshold_floor(threshold: Optional[str]) -> float:
    """Numeric floor behind a passing threshold letter (C/70 if unknown)"""
    return THRESHOLD_FLOORS.get(threshold, DEFAULT_THRESHOLD_FLOOR)


def classify(grade_percent: Optional[float], threshold: Optional[str]) -> str:
    """
    Map a grade to 'green', 'yellow' or 'red'

    Args:
        grade_percent: Current class grade, None when nothing is graded
        threshold: Passing threshold letter ('A', 'B' or 'C')

    Returns:
        Status string; an unknown grade is 'yellow'
    """
    if grade_percent is None:
        return "yellow"

    floor = threshold_floor(threshold)
    if grade_percent >= floor:
        return "green"
    if grade_percent >= floor - STATUS_BAND:
        return "yellow"
    return "red"


def status_color(status: str) -> str:
    """Progress bar color for a status"""
    return {
        "green": "success",
        "yellow": "warning",
        "red": "error",
    }.get(status, "primary")
