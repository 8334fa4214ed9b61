"""GPA aggregation, what-if simulation and degree progress"""

from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
from src.utils.constants import (
    CRITICAL_GPA_MINIMUM, DEFAULT_TOTAL_CREDITS_REQUIRED, LETTER_GRADE_POINTS,
    STATUS_COMPLETED, STATUS_IN_PROGRESS, STATUS_REMAINING
)
from src.utils.helpers import calculate_percentage


def aggregate_gpa(classes: Iterable[Dict]) -> float:
    """
    Credit-weighted GPA over classes that have GPA points

    Args:
        classes: Dictionaries with 'credits' and 'gpa_points' keys

    Returns:
        Overall GPA, 0.0 when no class has a GPA yet
    """
    total_points = 0.0
    total_credits = 0.0

    for cls in classes:
        if cls.get('gpa_points') is None:
            continue
        credits = cls.get('credits') or 0
        total_points += cls['gpa_points'] * credits
        total_credits += credits

    if total_credits == 0:
        return 0.0

    return total_points / total_credits


def letter_to_points(letter: Optional[str]) -> Optional[float]:
    """GPA points for a letter grade, None if the letter is unknown"""
    if letter is None:
        return None
    return LETTER_GRADE_POINTS.get(letter)


def simulate_gpa(
    current_gpa: float,
    completed_credits: float,
    classes: Sequence[Dict],
    simulated_grades: Mapping
) -> Optional[float]:
    """
    What-if GPA with simulated letter grades for in-progress classes

    Args:
        current_gpa: GPA over completed credits
        completed_credits: Credits behind current_gpa
        classes: In-progress class dictionaries with 'id' and 'credits'
        simulated_grades: Class id -> simulated letter grade

    Returns:
        Projected GPA, or None when no class carries a simulated grade
    """
    total_points = current_gpa * completed_credits
    total_credits = completed_credits
    simulated = 0

    for cls in classes:
        points = letter_to_points(simulated_grades.get(cls['id']))
        if points is None:
            continue
        credits = cls.get('credits') or 0
        total_points += points * credits
        total_credits += credits
        simulated += 1

    if not simulated or total_credits == 0:
        return None

    return total_points / total_credits


def gpa_baseline(classes: Iterable[Dict]) -> Tuple[float, float]:
    """
    Starting (GPA, credits) pair for the what-if simulator

    Only completed classes with GPA points count, so a simulated
    in-progress class is never added on top of a GPA already typed in.
    """
    completed = [
        cls for cls in classes
        if cls.get('status') == STATUS_COMPLETED and cls.get('gpa_points') is not None
    ]
    return aggregate_gpa(completed), sum(cls.get('credits') or 0 for cls in completed)


def gpa_change(current_gpa: float, simulated_gpa: Optional[float]) -> Optional[float]:
    """Signed difference between a simulated and the current GPA"""
    if simulated_gpa is None:
        return None
    return simulated_gpa - current_gpa


def _credits_with_status(classes: Iterable[Dict], status: str) -> int:
    return sum(
        cls.get('credits') or 0
        for cls in classes
        if (cls.get('status') or STATUS_IN_PROGRESS) == status
    )


def degree_progress(
    classes: Sequence[Dict],
    total_credits_required: int = DEFAULT_TOTAL_CREDITS_REQUIRED
) -> Dict:
    """
    Credit breakdown toward the degree

    Classes without a status count as in progress.
    """
    completed = _credits_with_status(classes, STATUS_COMPLETED)
    in_progress = _credits_with_status(classes, STATUS_IN_PROGRESS)
    planned = _credits_with_status(classes, STATUS_REMAINING)
    remaining = max(0, total_credits_required - completed - in_progress)

    return {
        'total_required': total_credits_required,
        'completed_credits': completed,
        'in_progress_credits': in_progress,
        'planned_credits': planned,
        'remaining_credits': remaining,
        'completed_percent': calculate_percentage(completed, total_credits_required),
        'in_progress_percent': calculate_percentage(in_progress, total_credits_required),
    }


def class_warnings(cls: Dict) -> List[str]:
    """Warnings to show on a class row"""
    warnings = []
    gpa_points = cls.get('gpa_points')

    if cls.get('status') == STATUS_COMPLETED and gpa_points is None:
        warnings.append('missing_gpa')
    if cls.get('critical_tracking') and gpa_points is not None and gpa_points < CRITICAL_GPA_MINIMUM:
        warnings.append('critical_gpa')

    return warnings
