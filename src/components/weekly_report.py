"""Weekly Report Component"""

import logging
import streamlit as st
from datetime import date, datetime, timezone
from src.database.database import get_db_session
from src.database.snapshot import load_student_snapshot
from src.services.class_summary import summarize_student
from src.services.report_service import build_report_lines, export_report_pdf
from src.utils.helpers import get_week_range

logger = logging.getLogger("studypilot.ui")


def render_weekly_report():
    """Render the weekly summary and its PDF download"""
    st.title("🗒️ Weekly Report")

    week_of = st.date_input("Week of", value=date.today())
    week_start, week_end = get_week_range(week_of)

    db = get_db_session()
    try:
        snapshot = load_student_snapshot(db, st.session_state.user_id)
    except ValueError as e:
        logger.error("Weekly report failed to load: %s", e)
        st.error(str(e))
        return
    finally:
        db.close()

    lines = build_report_lines(summarize_student(snapshot), week_start, week_end, datetime.now(timezone.utc))
    st.code("\n".join(lines), language=None)

    st.download_button(
        "📄 Download PDF",
        data=export_report_pdf(lines),
        file_name=f"weekly_report_{week_start.isoformat()}.pdf",
        mime="application/pdf"
    )
