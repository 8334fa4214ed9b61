"""Grade calculation and target score service"""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple
from src.utils.constants import PASSING_THRESHOLDS
from src.services.grade_status import threshold_floor


def _weighted_average(pairs: Iterable[Tuple[float, float]]) -> Optional[float]:
    """Average (value, weight) pairs, or None when the total weight is zero"""
    total_weighted = 0.0
    total_weight = 0.0

    for value, weight in pairs:
        total_weighted += value * weight
        total_weight += weight

    if total_weight == 0:
        return None

    return total_weighted / total_weight


def _weight(record: Dict) -> float:
    return record.get('weight') or 0


def _graded(items: Iterable[Dict]) -> List[Dict]:
    return [item for item in items if item.get('score_percent') is not None]


def validate_weights(
    weights: Sequence[float],
    expected_total: float = 100,
    tolerance: float = 0
) -> Dict:
    """
    Check that a set of weights adds up to the expected total

    Args:
        weights: Category (or item) weights in percent
        expected_total: Total the weights must reach
        tolerance: Allowed absolute deviation, 0 means exact match

    Returns:
        Dictionary with the literal 'total' and the 'is_valid' flag
    """
    total = sum(weights)
    if tolerance:
        is_valid = abs(total - expected_total) <= tolerance
    else:
        is_valid = total == expected_total

    return {'total': total, 'is_valid': is_valid}


def aggregate_category(items: Iterable[Dict]) -> Optional[float]:
    """
    Weighted average of the graded items inside one category

    Weights are renormalized among graded items only, so one graded
    assignment out of three reports its own score as the category grade.

    Args:
        items: Graded item dictionaries with 'weight' and 'score_percent' keys

    Returns:
        Category percentage, or None when nothing is graded yet
    """
    return _weighted_average(
        (item['score_percent'], _weight(item)) for item in _graded(items)
    )


def aggregate_class_grade(categories: Iterable[Dict]) -> Optional[float]:
    """
    Weighted average across categories that already have a grade

    Args:
        categories: Dictionaries with 'weight' and 'grade' (None if ungraded)

    Returns:
        Class percentage, or None when no category has a grade
    """
    return _weighted_average(
        (category['grade'], _weight(category))
        for category in categories
        if category.get('grade') is not None
    )


def aggregate_flat_grade(items: Iterable[Dict]) -> Optional[float]:
    """Class grade for classes without categories (weight = percent of class)"""
    return aggregate_category(items)


def category_grades(categories: Iterable[Dict], items: Sequence[Dict]) -> List[Dict]:
    """
    Attach each category's aggregated grade

    Args:
        categories: Category dictionaries with 'id', 'name' and 'weight'
        items: All graded items of the class, matched on 'category_id'

    Returns:
        New list of category dictionaries with a 'grade' key added
    """
    result = []
    for category in categories:
        members = [item for item in items if item.get('category_id') == category['id']]
        result.append({**category, 'grade': aggregate_category(members)})
    return result


def current_class_grade(categories: Sequence[Dict], items: Sequence[Dict]) -> Optional[float]:
    """Current class grade using categories when the class defines any"""
    if categories:
        return aggregate_class_grade(category_grades(categories, items))
    return aggregate_flat_grade(items)


def projected_class_grade(categories: Sequence[Dict], items: Sequence[Dict]) -> Optional[float]:
    """
    Grade if nothing else changes

    Remaining weight is assumed to land at the current average, so the
    projection always equals the current grade. Not a trend forecast.
    """
    return current_class_grade(categories, items)


def completion_progress(items: Iterable[Dict]) -> Dict:
    """
    Split flat items into earned points, completed weight and remaining weight

    Returns:
        Dictionary with 'weighted_sum' (percentage points already earned
        toward 100), 'completed_weight' and 'remaining_weight'
    """
    weighted_sum = 0.0
    completed_weight = 0.0
    remaining_weight = 0.0

    for item in items:
        weight = _weight(item)
        if item.get('score_percent') is None:
            remaining_weight += weight
        else:
            weighted_sum += item['score_percent'] * weight / 100
            completed_weight += weight

    return {
        'weighted_sum': weighted_sum,
        'completed_weight': completed_weight,
        'remaining_weight': remaining_weight,
    }


def category_completion_progress(categories: Sequence[Dict], items: Sequence[Dict]) -> Dict:
    """
    Same split as completion_progress for classes with categories

    Each item's share of the class is category weight * item weight /
    total item weight in that category. A category with no weighted
    items yet counts entirely as remaining.
    """
    weighted_sum = 0.0
    completed_weight = 0.0
    remaining_weight = 0.0

    for category in categories:
        members = [item for item in items if item.get('category_id') == category['id']]
        member_weight = sum(_weight(item) for item in members)
        if member_weight == 0:
            remaining_weight += _weight(category)
            continue

        for item in members:
            share = _weight(category) * _weight(item) / member_weight
            if item.get('score_percent') is None:
                remaining_weight += share
            else:
                weighted_sum += item['score_percent'] * share / 100
                completed_weight += share

    return {
        'weighted_sum': weighted_sum,
        'completed_weight': completed_weight,
        'remaining_weight': remaining_weight,
    }


def score_needed(
    weighted_sum_of_completed: float,
    completed_weight: float,
    remaining_weight: float,
    target_percent: float
) -> Optional[float]:
    """
    Average score needed on the remaining weight to reach a target

    Solves target = earned + needed * remaining / 100 for needed.

    Args:
        weighted_sum_of_completed: Percentage points already earned toward 100
        completed_weight: Weight already graded (informational)
        remaining_weight: Weight still to be graded, in percent
        target_percent: Desired final percentage

    Returns:
        Raw required average (may be below 0 or above 100), or None when
        nothing is left that could change the grade
    """
    if remaining_weight <= 0:
        return None

    return (target_percent - weighted_sum_of_completed) * 100 / remaining_weight


def scores_needed_for_thresholds(
    weighted_sum_of_completed: float,
    completed_weight: float,
    remaining_weight: float,
    thresholds: Iterable[str] = PASSING_THRESHOLDS
) -> Dict[str, Optional[float]]:
    """Score needed for each letter threshold, solved independently"""
    return {
        letter: score_needed(
            weighted_sum_of_completed,
            completed_weight,
            remaining_weight,
            threshold_floor(letter)
        )
        for letter in thresholds
    }


def needed_score_outcome(needed: Optional[float]) -> Optional[str]:
    """Classify a raw needed score as achieved, possible or not_achievable"""
    if needed is None:
        return None
    if needed <= 0:
        return 'achieved'
    if needed <= 100:
        return 'possible'
    return 'not_achievable'


def clamp_score(needed: Optional[float]) -> Optional[float]:
    """Clamp a needed score to 0-100 for display"""
    if needed is None:
        return None
    return max(0.0, min(100.0, needed))


def final_exam_score_needed(
    current_grade: float,
    desired_grade: float,
    final_weight_percent: float
) -> Optional[float]:
    """
    Score needed on a final exam worth final_weight_percent of the grade

    Everything before the final is assumed to average current_grade.
    """
    weight = final_weight_percent / 100
    if weight <= 0:
        return None

    return (desired_grade - current_grade * (1 - weight)) / weight


def describe_needed_score(needed: Optional[float]) -> Optional[Tuple[str, str]]:
    """Feedback message and tone for a needed score"""
    if needed is None:
        return None
    if needed <= 0:
        return "You've already achieved this grade!", 'green'
    if needed <= 60:
        return "Very achievable! Keep studying.", 'green'
    if needed <= 80:
        return "Definitely possible with good preparation.", 'blue'
    if needed <= 100:
        return "Challenging but doable. Study hard!", 'yellow'
    return "This would require extra credit. Talk to your professor.", 'red'
