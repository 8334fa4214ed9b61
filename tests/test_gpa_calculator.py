"""
Tests for src/services/gpa_calculator.py module.
"""

import pytest

from src.services.gpa_calculator import (
    aggregate_gpa,
    class_warnings,
    degree_progress,
    gpa_baseline,
    gpa_change,
    letter_to_points,
    simulate_gpa,
)


class TestAggregateGpa:
    """Tests for aggregate_gpa function."""

    def test_no_classes_is_zero(self):
        """Test an empty class list gives 0, not None."""
        assert aggregate_gpa([]) == 0

    def test_no_gpa_yet_is_zero(self):
        """Test classes without GPA points are ignored."""
        assert aggregate_gpa([{"credits": 3, "gpa_points": None}]) == 0

    def test_equal_credits(self):
        """Test equal credits average the GPA points."""
        classes = [{"credits": 3, "gpa_points": 4.0}, {"credits": 3, "gpa_points": 2.0}]
        assert aggregate_gpa(classes) == 3.0

    def test_credit_weighting(self, degree_classes):
        """Test classes weigh by credits and ungraded ones are skipped."""
        assert aggregate_gpa(degree_classes) == pytest.approx((3.7 * 4 + 3.3 * 3) / 7)

    def test_zero_credit_classes(self):
        """Test zero total credits falls back to 0."""
        assert aggregate_gpa([{"credits": 0, "gpa_points": 4.0}]) == 0

    def test_repeatable(self, degree_classes):
        """Test repeated calls return the same value."""
        assert aggregate_gpa(degree_classes) == aggregate_gpa(degree_classes)


class TestSimulateGpa:
    """Tests for letter_to_points, simulate_gpa and gpa_change functions."""

    def test_letter_table(self):
        """Test the letter to points mapping."""
        assert letter_to_points("A") == 4.0
        assert letter_to_points("B+") == 3.3
        assert letter_to_points("D-") == 0.7
        assert letter_to_points("F") == 0.0
        assert letter_to_points("E") is None
        assert letter_to_points(None) is None

    def test_simulated_classes_contribute(self):
        """Test simulated grades are credit-weighted into the current GPA."""
        classes = [{"id": 1, "credits": 3}, {"id": 2, "credits": 4}]

        result = simulate_gpa(3.5, 30, classes, {1: "A", 2: "C"})

        assert result == pytest.approx((3.5 * 30 + 4.0 * 3 + 2.0 * 4) / 37)

    def test_unsimulated_classes_are_excluded(self):
        """Test classes without a simulated grade are left out, not zeroed."""
        classes = [{"id": 1, "credits": 3}, {"id": 2, "credits": 4}]

        result = simulate_gpa(3.5, 30, classes, {1: "A"})

        assert result == pytest.approx((3.5 * 30 + 4.0 * 3) / 33)

    def test_unknown_letter_is_ignored(self):
        """Test unrecognised letters count as not simulated."""
        classes = [{"id": 1, "credits": 3}]
        assert simulate_gpa(3.0, 12, classes, {1: "Z"}) is None

    def test_nothing_simulated(self):
        """Test no projection without any simulated grade."""
        assert simulate_gpa(3.0, 12, [{"id": 1, "credits": 3}], {}) is None

    def test_first_semester(self):
        """Test a student with no completed credits."""
        classes = [{"id": 1, "credits": 3}, {"id": 2, "credits": 3}]
        assert simulate_gpa(0.0, 0, classes, {1: "A", 2: "B"}) == pytest.approx(3.5)

    def test_gpa_change(self):
        """Test the signed change between simulated and current GPA."""
        assert gpa_change(3.2, 3.5) == pytest.approx(0.3)
        assert gpa_change(3.5, 3.2) == pytest.approx(-0.3)
        assert gpa_change(3.5, None) is None


class TestGpaBaseline:
    """Tests for gpa_baseline function."""

    def test_only_completed_classes(self, degree_classes):
        """Test the baseline covers completed classes and their credits."""
        gpa, credits = gpa_baseline(degree_classes)

        assert gpa == pytest.approx((3.7 * 4 + 3.3 * 3) / 7)
        assert credits == 7

    def test_in_progress_gpa_is_not_double_counted(self):
        """Test a GPA typed on an in-progress class stays out of the baseline."""
        classes = [
            {"id": 1, "credits": 3, "status": "completed", "gpa_points": 4.0},
            {"id": 2, "credits": 3, "status": "in_progress", "gpa_points": 2.0},
        ]

        gpa, credits = gpa_baseline(classes)

        assert (gpa, credits) == (4.0, 3)
        assert simulate_gpa(gpa, credits, classes[1:], {2: "A"}) == pytest.approx(4.0)

    def test_completed_without_gpa_is_skipped(self):
        """Test completed classes missing GPA points add no credits."""
        classes = [{"id": 1, "credits": 4, "status": "completed", "gpa_points": None}]
        assert gpa_baseline(classes) == (0.0, 0)


class TestDegreeProgress:
    """Tests for degree_progress function."""

    def test_credit_breakdown(self, degree_classes):
        """Test credits are split by class status."""
        progress = degree_progress(degree_classes, 60)

        assert progress["completed_credits"] == 7
        assert progress["in_progress_credits"] == 7
        assert progress["planned_credits"] == 3
        assert progress["remaining_credits"] == 46
        assert progress["completed_percent"] == 11.67
        assert progress["total_required"] == 60

    def test_remaining_never_negative(self):
        """Test remaining credits bottom out at zero."""
        classes = [{"credits": 70, "status": "completed"}]
        assert degree_progress(classes, 60)["remaining_credits"] == 0

    def test_missing_status_counts_as_in_progress(self):
        """Test classes without a status are treated as in progress."""
        assert degree_progress([{"credits": 3, "status": None}])["in_progress_credits"] == 3


class TestClassWarnings:
    """Tests for class_warnings function."""

    def test_completed_without_gpa(self):
        """Test completed classes must have a GPA."""
        assert class_warnings({"status": "completed", "gpa_points": None}) == ["missing_gpa"]

    def test_critical_gpa(self):
        """Test critical-tracking classes below 2.5 are flagged."""
        cls = {"status": "completed", "gpa_points": 2.3, "critical_tracking": True}
        assert class_warnings(cls) == ["critical_gpa"]

    def test_no_warnings(self):
        """Test healthy classes carry no warnings."""
        assert class_warnings({"status": "completed", "gpa_points": 2.3}) == []
        assert class_warnings({"status": "in_progress", "gpa_points": None, "critical_tracking": True}) == []
