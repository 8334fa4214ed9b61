"""Load plain-record snapshots of a student's classes for the grade engine"""

import logging
from typing import Dict, List
from sqlalchemy.orm import Session

from src.database.models import Exam, GradingCategory, SchoolClass, User
from src.utils.constants import (
    DEFAULT_CATEGORIES, DEFAULT_TARGET_GPA, DEFAULT_TOTAL_CREDITS_REQUIRED
)

logger = logging.getLogger("studypilot.snapshot")


def class_to_record(cls: SchoolClass) -> Dict:
    return {
        'id': cls.id,
        'course_name': cls.course_name,
        'code': cls.code,
        'semester': cls.semester,
        'credits': cls.credits,
        'status': cls.status,
        'passing_threshold': cls.passing_threshold,
        'gpa_points': cls.gpa,
        'critical_tracking': bool(cls.critical_tracking),
    }


def category_to_record(category: GradingCategory) -> Dict:
    return {
        'id': category.id,
        'class_id': category.class_id,
        'name': category.name,
        'weight': category.weight,
    }


def exam_to_record(exam: Exam) -> Dict:
    return {
        'id': exam.id,
        'class_id': exam.class_id,
        'category_id': exam.category_id,
        'name': exam.exam_name,
        'exam_date': exam.exam_date,
        'weight': exam.weight,
        'score_percent': exam.grade_percent,
    }


def load_class_snapshot(db: Session, class_id: int) -> Dict:
    """
    Fetch one class with its categories and exams in a single session

    Raises:
        ValueError: If the class does not exist
    """
    cls = db.query(SchoolClass).filter(SchoolClass.id == class_id).first()
    if cls is None:
        raise ValueError(f"Class {class_id} not found")

    categories = db.query(GradingCategory).filter(
        GradingCategory.class_id == class_id
    ).order_by(GradingCategory.id).all()
    exams = db.query(Exam).filter(Exam.class_id == class_id).order_by(Exam.id).all()

    logger.debug("Loaded class %s: %d categories, %d exams", class_id, len(categories), len(exams))

    return {
        'class': class_to_record(cls),
        'categories': [category_to_record(c) for c in categories],
        'items': [exam_to_record(e) for e in exams],
    }


def load_student_snapshot(db: Session, user_id: int) -> Dict:
    """
    Fetch every class, category and exam of a user

    Raises:
        ValueError: If the user does not exist
    """
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise ValueError(f"User {user_id} not found")

    classes = db.query(SchoolClass).filter(
        SchoolClass.user_id == user_id
    ).order_by(SchoolClass.course_name).all()
    class_ids = [c.id for c in classes]

    categories: List[GradingCategory] = []
    exams: List[Exam] = []
    if class_ids:
        categories = db.query(GradingCategory).filter(
            GradingCategory.class_id.in_(class_ids)
        ).order_by(GradingCategory.id).all()
        exams = db.query(Exam).filter(Exam.class_id.in_(class_ids)).order_by(Exam.id).all()

    settings = dict(user.settings or {})
    settings.setdefault('target_gpa', DEFAULT_TARGET_GPA)
    settings.setdefault('total_credits_required', DEFAULT_TOTAL_CREDITS_REQUIRED)

    logger.debug("Loaded snapshot for user %s: %d classes", user_id, len(classes))

    return {
        'settings': settings,
        'classes': [class_to_record(c) for c in classes],
        'categories': [category_to_record(c) for c in categories],
        'items': [exam_to_record(e) for e in exams],
    }


def save_categories(db: Session, class_id: int, rows: List[Dict]) -> None:
    """
    Replace a class's categories with the edited rows

    Rows carry the 'id' of the category they edit, or None for a new one.
    Categories whose id is missing from rows are deleted and their exams
    become uncategorised.
    """
    existing = {
        c.id: c for c in db.query(GradingCategory).filter(GradingCategory.class_id == class_id).all()
    }
    kept_ids = set()

    for row in rows:
        category = existing.get(row.get('id'))
        if category is None:
            db.add(GradingCategory(class_id=class_id, name=row['name'], weight=row['weight']))
        else:
            category.name = row['name']
            category.weight = row['weight']
            kept_ids.add(category.id)

    for category_id, category in existing.items():
        if category_id not in kept_ids:
            db.query(Exam).filter(Exam.category_id == category_id).update({'category_id': None})
            db.delete(category)

    db.commit()
    logger.info("Saved %d categories for class %s", len(rows), class_id)


def seed_demo_data(db: Session) -> User:
    """Create a demo student with a few classes on first launch"""
    user = User(
        name="Student",
        email="student@example.com",
        settings={'target_gpa': DEFAULT_TARGET_GPA, 'total_credits_required': DEFAULT_TOTAL_CREDITS_REQUIRED}
    )
    db.add(user)
    db.flush()

    calculus = SchoolClass(user_id=user.id, course_name="Calculus I", code="MATH 101",
                           credits=4, status="completed", gpa=3.7)
    writing = SchoolClass(user_id=user.id, course_name="Academic Writing", code="ENG 110",
                          credits=3, status="completed", gpa=3.3)
    physics = SchoolClass(user_id=user.id, course_name="Physics I", code="PHYS 121",
                          credits=4, status="in_progress", passing_threshold="B")
    chemistry = SchoolClass(user_id=user.id, course_name="General Chemistry", code="CHEM 105",
                            credits=3, status="in_progress", passing_threshold="C")
    db.add_all([calculus, writing, physics, chemistry])
    db.flush()

    categories = [
        GradingCategory(class_id=physics.id, name=c['name'], weight=c['weight'])
        for c in DEFAULT_CATEGORIES
    ]
    db.add_all(categories)
    db.flush()
    exams_category, assignments_category, _ = categories

    db.add_all([
        Exam(class_id=physics.id, category_id=exams_category.id, exam_name="Midterm",
             weight=50, grade_percent=84),
        Exam(class_id=physics.id, category_id=exams_category.id, exam_name="Final", weight=50),
        Exam(class_id=physics.id, category_id=assignments_category.id, exam_name="Problem Set 1",
             weight=50, grade_percent=95),
        Exam(class_id=physics.id, category_id=assignments_category.id, exam_name="Problem Set 2", weight=50),
        Exam(class_id=chemistry.id, exam_name="Quiz 1", weight=20, grade_percent=72),
        Exam(class_id=chemistry.id, exam_name="Midterm", weight=30, grade_percent=68),
        Exam(class_id=chemistry.id, exam_name="Final", weight=50),
    ])
    db.commit()
    db.refresh(user)

    logger.info("Seeded demo data for user %s", user.id)
    return user
