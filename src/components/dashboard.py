"""Academic Dashboard"""

import logging
import streamlit as st
from src.database.database import get_db_session
from src.database.snapshot import load_student_snapshot
from src.services.class_summary import summarize_student
from src.services.grade_status import status_color
from src.utils.helpers import format_gpa, format_percent
from src.components.ui.card import card, metric_card
from src.components.ui.progress_bar import progress_bar

logger = logging.getLogger("studypilot.ui")

STATUS_ICONS = {"green": "🟢", "yellow": "🟡", "red": "🔴"}


def render_dashboard():
    """Render overall GPA and one card per enrolled class"""
    st.title("🏠 Academic Dashboard")

    db = get_db_session()
    user_id = st.session_state.user_id

    try:
        snapshot = load_student_snapshot(db, user_id)
    except ValueError as e:
        logger.error("Dashboard failed to load: %s", e)
        st.error(str(e))
        return
    finally:
        db.close()

    summary = summarize_student(snapshot)
    settings = snapshot['settings']

    if not summary['classes']:
        st.warning("📚 **No classes found!** Add classes on the 🎓 Degree page.")
        return

    degree = summary['degree']
    target_gpa = settings['target_gpa']
    overall_gpa = summary['overall_gpa']

    col1, col2, col3 = st.columns(3)
    with col1:
        metric_card(
            format_gpa(overall_gpa), "Overall GPA",
            trend=f"Target {format_gpa(target_gpa)}",
            trend_direction="up" if overall_gpa >= target_gpa else "down"
        )
    with col2:
        metric_card(str(len(summary['enrolled'])), "Enrolled Classes")
    with col3:
        metric_card(f"{degree['completed_credits']}/{degree['total_required']}", "Credits Completed")

    st.markdown("---")
    st.markdown("### 📚 Current Classes")

    if not summary['enrolled']:
        st.info("No classes in progress.")

    for class_summary in summary['enrolled']:
        cls = class_summary['class']
        status = class_summary['status']
        grade = class_summary['current_grade']

        details = f"{cls['credits']} credits • Target: {cls.get('passing_threshold') or 'C'}"
        weight_check = class_summary['weight_check']
        if weight_check is not None and not weight_check['is_valid']:
            details += f"<br>⚠️ Category weights total {weight_check['total']:g}%"

        card(
            f"{STATUS_ICONS[status]} {cls['course_name']} - {format_percent(grade)}",
            details,
            color=status_color(status)
        )
        progress_bar(grade or 0, color=status_color(status))
