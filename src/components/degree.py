"""Degree Progress and GPA Simulator Component"""

import logging
import streamlit as st
from src.database.database import get_db_session
from src.database.models import SchoolClass, User
from src.database.snapshot import load_student_snapshot
from src.services.class_summary import summarize_student
from src.services.gpa_calculator import class_warnings, gpa_change, simulate_gpa
from src.utils.constants import (
    DEFAULT_CREDITS, LETTER_GRADE_POINTS, PASSING_THRESHOLDS,
    STATUS_COMPLETED, STATUS_IN_PROGRESS, STATUS_REMAINING
)
from src.utils.helpers import format_gpa, format_gpa_change
from src.components.ui.card import metric_card
from src.components.ui.progress_bar import progress_bar

logger = logging.getLogger("studypilot.ui")

STATUS_LABELS = {
    STATUS_COMPLETED: "✅ Completed",
    STATUS_IN_PROGRESS: "📖 In Progress",
    STATUS_REMAINING: "🗓️ Remaining",
}


def _render_simulator(classes, baseline):
    """What-if GPA from simulated letter grades of in-progress classes"""
    st.markdown("### 🔮 GPA Simulator")
    in_progress = [c for c in classes if (c['status'] or STATUS_IN_PROGRESS) == STATUS_IN_PROGRESS]
    if not in_progress:
        st.caption("No classes in progress to simulate.")
        return

    base_gpa, completed_credits = baseline
    st.caption(f"Current GPA {format_gpa(base_gpa)} over {completed_credits} completed credits")

    simulations = {}
    options = ["-"] + list(LETTER_GRADE_POINTS)
    for cls in in_progress:
        letter = st.selectbox(
            f"{cls['course_name']} ({cls['credits']} credits)",
            options,
            key=f"sim_{cls['id']}"
        )
        if letter != "-":
            simulations[cls['id']] = letter

    simulated = simulate_gpa(base_gpa, completed_credits, in_progress, simulations)
    if simulated is None:
        st.info("Pick a grade for at least one class.")
        return

    change = gpa_change(base_gpa, simulated)
    st.metric("Projected GPA", format_gpa(simulated), delta=format_gpa_change(change))


def _render_add_class(db, user_id):
    with st.expander("➕ Add Class"):
        name = st.text_input("Course Name")
        code = st.text_input("Course Code")
        credits = st.number_input("Credits", min_value=1, max_value=12, value=DEFAULT_CREDITS)
        status = st.selectbox("Status", list(STATUS_LABELS), format_func=STATUS_LABELS.get)
        threshold = st.selectbox("Passing Threshold", PASSING_THRESHOLDS, index=len(PASSING_THRESHOLDS) - 1)
        critical = st.checkbox("Critical tracking (GPA must stay above 2.5)")

        if st.button("Add Class") and name.strip():
            db.add(SchoolClass(
                user_id=user_id,
                course_name=name.strip(),
                code=code.strip() or None,
                credits=int(credits),
                status=status,
                passing_threshold=threshold,
                critical_tracking=critical
            ))
            db.commit()
            st.success("Class added!")
            st.rerun()


def render_degree():
    """Render overall GPA, degree progress and per-class GPA entry"""
    st.title("🎓 Degree Progress")

    db = get_db_session()
    user_id = st.session_state.user_id

    try:
        snapshot = load_student_snapshot(db, user_id)
        classes = snapshot['classes']
        settings = snapshot['settings']

        summary = summarize_student(snapshot)
        overall_gpa = summary['overall_gpa']
        degree = summary['degree']

        col1, col2, col3 = st.columns(3)
        with col1:
            metric_card(format_gpa(overall_gpa), "Overall GPA")
        with col2:
            target_gpa = st.number_input(
                "Target GPA", min_value=0.0, max_value=4.0,
                value=float(settings['target_gpa']), step=0.1
            )
            if target_gpa != settings['target_gpa']:
                user = db.query(User).filter(User.id == user_id).first()
                user.settings = {**(user.settings or {}), 'target_gpa': target_gpa}
                db.commit()
                st.success("Target GPA updated")
        with col3:
            metric_card(str(degree['remaining_credits']), "Credits Still Needed")

        progress_bar(degree['completed_percent'], color="success",
                     label=f"Completed {degree['completed_credits']} of {degree['total_required']} credits")
        progress_bar(degree['in_progress_percent'], color="warning",
                     label=f"In progress {degree['in_progress_credits']} credits")

        st.markdown("### 📚 Classes")
        for cls in classes:
            cols = st.columns([5, 2, 2])
            with cols[0]:
                st.markdown(f"**{cls['course_name']}** • {cls['credits']} credits • "
                            f"{STATUS_LABELS.get(cls['status'], cls['status'])}")
                warnings = class_warnings(cls)
                if 'critical_gpa' in warnings:
                    st.error("Critical GPA below requirement (2.5)")
                if 'missing_gpa' in warnings:
                    st.warning("Please enter GPA for completed class")
            with cols[1]:
                raw = st.text_input("GPA", value="" if cls['gpa_points'] is None else str(cls['gpa_points']),
                                    key=f"gpa_{cls['id']}")
            with cols[2]:
                if st.button("Save", key=f"save_gpa_{cls['id']}"):
                    record = db.query(SchoolClass).filter(SchoolClass.id == cls['id']).first()
                    try:
                        value = float(raw) if raw.strip() else None
                    except ValueError:
                        st.error("GPA must be a number between 0 and 4")
                    else:
                        if value is not None and not 0 <= value <= 4:
                            st.error("GPA must be a number between 0 and 4")
                        else:
                            record.gpa = value
                            db.commit()
                            st.rerun()

        _render_simulator(classes, summary['gpa_baseline'])
        _render_add_class(db, user_id)

    except ValueError as e:
        logger.error("Degree page failed: %s", e)
        st.error(str(e))
    finally:
        db.close()
