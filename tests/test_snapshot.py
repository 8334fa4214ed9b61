"""
Tests for src/database/snapshot.py module.
"""

import pytest

from src.database.models import Exam, GradingCategory, SchoolClass, User
from src.database.snapshot import (
    load_class_snapshot, load_student_snapshot, save_categories, seed_demo_data
)
from src.services.class_summary import summarize_class, summarize_student


class TestLoadClassSnapshot:
    """Tests for load_class_snapshot function."""

    def test_loads_plain_records(self, db_session):
        """Test a class comes back with its categories and exams as dicts."""
        user = User(name="Test", email="test@example.com")
        db_session.add(user)
        db_session.flush()
        cls = SchoolClass(user_id=user.id, course_name="Biology", credits=4, passing_threshold="B")
        db_session.add(cls)
        db_session.flush()
        exams = GradingCategory(class_id=cls.id, name="Exams", weight=60)
        homework = GradingCategory(class_id=cls.id, name="Homework", weight=40)
        db_session.add_all([exams, homework])
        db_session.flush()
        db_session.add_all([
            Exam(class_id=cls.id, category_id=exams.id, exam_name="Midterm", weight=100, grade_percent=85),
            Exam(class_id=cls.id, category_id=homework.id, exam_name="HW 1", weight=50, grade_percent=100),
            Exam(class_id=cls.id, category_id=homework.id, exam_name="HW 2", weight=50),
        ])
        db_session.commit()

        snapshot = load_class_snapshot(db_session, cls.id)

        assert snapshot["class"]["course_name"] == "Biology"
        assert snapshot["class"]["gpa_points"] is None
        assert [c["name"] for c in snapshot["categories"]] == ["Exams", "Homework"]
        assert [i["score_percent"] for i in snapshot["items"]] == [85, 100, None]

        summary = summarize_class(snapshot["class"], snapshot["categories"], snapshot["items"])
        assert summary["current_grade"] == pytest.approx(91.0)

    def test_unknown_class(self, db_session):
        """Test a missing class raises ValueError."""
        with pytest.raises(ValueError, match="Class 999 not found"):
            load_class_snapshot(db_session, 999)


class TestLoadStudentSnapshot:
    """Tests for load_student_snapshot and seed_demo_data functions."""

    def test_unknown_user(self, db_session):
        """Test a missing user raises ValueError."""
        with pytest.raises(ValueError, match="User 42 not found"):
            load_student_snapshot(db_session, 42)

    def test_settings_defaults(self, db_session):
        """Test missing settings fall back to defaults."""
        user = User(name="Empty", email="empty@example.com", settings=None)
        db_session.add(user)
        db_session.commit()

        snapshot = load_student_snapshot(db_session, user.id)

        assert snapshot["settings"] == {"target_gpa": 3.5, "total_credits_required": 60}
        assert snapshot["classes"] == []
        assert snapshot["items"] == []

    def test_seeded_demo_student(self, db_session):
        """Test the demo data produces the expected grades and GPA."""
        user = seed_demo_data(db_session)

        snapshot = load_student_snapshot(db_session, user.id)
        summary = summarize_student(snapshot)
        by_name = {s["class"]["course_name"]: s for s in summary["classes"]}

        physics = by_name["Physics I"]
        assert physics["current_grade"] == pytest.approx(89.5)
        assert physics["status"] == "green"
        assert physics["weight_check"]["is_valid"] is True
        # Final, Problem Set 2 and the empty Participation category remain
        assert physics["progress"]["remaining_weight"] == pytest.approx(60.0)
        assert physics["needed"]["A"] == pytest.approx((90 - 35.8) * 100 / 60)
        assert physics["needed"]["C"] == pytest.approx(57.0)

        chemistry = by_name["General Chemistry"]
        assert chemistry["current_grade"] == pytest.approx(69.6)
        assert chemistry["status"] == "yellow"
        assert chemistry["needed"]["C"] == pytest.approx(70.4)

        assert summary["overall_gpa"] == pytest.approx((3.7 * 4 + 3.3 * 3) / 7)
        assert summary["degree"]["remaining_credits"] == 46


class TestSaveCategories:
    """Tests for save_categories function."""

    def _class_with_categories(self, db_session):
        user = User(name="Test", email="save@example.com")
        db_session.add(user)
        db_session.flush()
        cls = SchoolClass(user_id=user.id, course_name="Biology", credits=4)
        db_session.add(cls)
        db_session.flush()
        categories = [
            GradingCategory(class_id=cls.id, name=name, weight=weight)
            for name, weight in [("Exams", 40), ("Labs", 30), ("Homework", 30)]
        ]
        db_session.add_all(categories)
        db_session.flush()
        exams = [
            Exam(class_id=cls.id, category_id=category.id, exam_name=f"{category.name} 1", weight=100)
            for category in categories
        ]
        db_session.add_all(exams)
        db_session.commit()
        return cls, categories, exams

    def test_deleting_middle_row_keeps_other_ids(self, db_session):
        """Test removing one category leaves the others and their exams intact."""
        cls, (exams_cat, _, homework_cat), _ = self._class_with_categories(db_session)

        save_categories(db_session, cls.id, [
            {"id": exams_cat.id, "name": "Exams", "weight": 50},
            {"id": homework_cat.id, "name": "Homework", "weight": 50},
        ])

        snapshot = load_class_snapshot(db_session, cls.id)
        by_id = {c["id"]: c for c in snapshot["categories"]}
        assert set(by_id) == {exams_cat.id, homework_cat.id}
        assert by_id[homework_cat.id]["name"] == "Homework"
        assert by_id[homework_cat.id]["weight"] == 50

        items = {i["name"]: i for i in snapshot["items"]}
        assert items["Exams 1"]["category_id"] == exams_cat.id
        assert items["Homework 1"]["category_id"] == homework_cat.id
        assert items["Labs 1"]["category_id"] is None

    def test_new_rows_are_added(self, db_session):
        """Test rows without an id create categories."""
        cls, categories, _ = self._class_with_categories(db_session)
        rows = [{"id": c.id, "name": c.name, "weight": c.weight} for c in categories]
        rows[0]["weight"] = 30
        rows.append({"id": None, "name": "Participation", "weight": 10})

        save_categories(db_session, cls.id, rows)

        names = [c["name"] for c in load_class_snapshot(db_session, cls.id)["categories"]]
        assert sorted(names) == ["Exams", "Homework", "Labs", "Participation"]
