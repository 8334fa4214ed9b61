"""
Pytest configuration and shared fixtures for StudyPilot tests.
"""

import os
import sys

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.database.models import Base  # noqa: E402


@pytest.fixture
def db_session():
    """In-memory SQLite session with all tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def exams_and_homework():
    """Exams (60%, one item at 85) and Homework (40%, one at 100, one ungraded)."""
    categories = [
        {"id": 1, "class_id": 10, "name": "Exams", "weight": 60},
        {"id": 2, "class_id": 10, "name": "Homework", "weight": 40},
    ]
    items = [
        {"id": 1, "class_id": 10, "category_id": 1, "name": "Midterm", "weight": 100, "score_percent": 85},
        {"id": 2, "class_id": 10, "category_id": 2, "name": "HW 1", "weight": 50, "score_percent": 100},
        {"id": 3, "class_id": 10, "category_id": 2, "name": "HW 2", "weight": 50, "score_percent": None},
    ]
    return categories, items


@pytest.fixture
def flat_items():
    """Class without categories: 90% of the grade averaging 80, 10% ungraded."""
    return [
        {"id": 1, "class_id": 20, "category_id": None, "name": "Midterm", "weight": 40, "score_percent": 75},
        {"id": 2, "class_id": 20, "category_id": None, "name": "Project", "weight": 50, "score_percent": 84},
        {"id": 3, "class_id": 20, "category_id": None, "name": "Quiz", "weight": 10, "score_percent": None},
    ]


@pytest.fixture
def degree_classes():
    """Classes across every degree status."""
    return [
        {"id": 1, "course_name": "Calculus I", "credits": 4, "status": "completed", "gpa_points": 3.7},
        {"id": 2, "course_name": "Writing", "credits": 3, "status": "completed", "gpa_points": 3.3},
        {"id": 3, "course_name": "Physics I", "credits": 4, "status": "in_progress", "gpa_points": None},
        {"id": 4, "course_name": "Chemistry", "credits": 3, "status": "in_progress", "gpa_points": None},
        {"id": 5, "course_name": "Statistics", "credits": 3, "status": "remaining", "gpa_points": None},
    ]
