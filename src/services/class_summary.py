"""Per-class and per-student summaries shared by every screen and the report"""

from typing import Dict, List, Sequence
from src.services.grade_calculator import (
    category_completion_progress, category_grades, completion_progress,
    current_class_grade, projected_class_grade, scores_needed_for_thresholds,
    validate_weights
)
from src.services.gpa_calculator import aggregate_gpa, class_warnings, degree_progress, gpa_baseline
from src.services.grade_status import classify
from src.utils.constants import (
    CATEGORY_WEIGHT_TOTAL, DEFAULT_THRESHOLD, DEFAULT_TOTAL_CREDITS_REQUIRED,
    STATUS_IN_PROGRESS
)


def summarize_class(cls: Dict, categories: Sequence[Dict], items: Sequence[Dict]) -> Dict:
    """
    Derive every displayed number for one class

    Args:
        cls: Class dictionary ('passing_threshold', 'credits', ...)
        categories: The class's grading categories
        items: The class's exams and assignments

    Returns:
        Summary dictionary; grades are raw (unrounded) floats or None
    """
    uses_categories = bool(categories)
    threshold = cls.get('passing_threshold') or DEFAULT_THRESHOLD

    if uses_categories:
        graded_categories = category_grades(categories, items)
        weight_check = validate_weights(
            [category.get('weight') or 0 for category in categories],
            expected_total=CATEGORY_WEIGHT_TOTAL
        )
        progress = category_completion_progress(categories, items)
    else:
        graded_categories = []
        weight_check = None
        progress = completion_progress(items)

    current_grade = current_class_grade(categories, items)

    return {
        'class': cls,
        'uses_categories': uses_categories,
        'category_grades': graded_categories,
        'weight_check': weight_check,
        'current_grade': current_grade,
        'projected_grade': projected_class_grade(categories, items),
        'progress': progress,
        'needed': scores_needed_for_thresholds(
            progress['weighted_sum'],
            progress['completed_weight'],
            progress['remaining_weight']
        ),
        'status': classify(current_grade, threshold),
        'warnings': class_warnings(cls),
    }


def summarize_student(snapshot: Dict) -> Dict:
    """
    Summaries for every class in a student snapshot plus overall GPA

    Args:
        snapshot: Output of load_student_snapshot ('classes', 'categories',
            'items', 'settings')

    Returns:
        Dictionary with 'classes', 'enrolled', 'overall_gpa', 'gpa_baseline'
        (completed-class GPA and credits) and 'degree'
    """
    settings = snapshot.get('settings') or {}
    classes = snapshot['classes']
    summaries: List[Dict] = []

    for cls in classes:
        categories = [c for c in snapshot['categories'] if c['class_id'] == cls['id']]
        items = [i for i in snapshot['items'] if i['class_id'] == cls['id']]
        summaries.append(summarize_class(cls, categories, items))

    return {
        'classes': summaries,
        'enrolled': [s for s in summaries if (s['class'].get('status') or STATUS_IN_PROGRESS) == STATUS_IN_PROGRESS],
        'overall_gpa': aggregate_gpa(classes),
        'gpa_baseline': gpa_baseline(classes),
        'degree': degree_progress(
            classes,
            settings.get('total_credits_required') or DEFAULT_TOTAL_CREDITS_REQUIRED
        ),
    }
