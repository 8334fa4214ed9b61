"""StudyPilot - Main Streamlit Application"""

import logging
import os
import streamlit as st
from src.components.layout import setup_custom_layout, create_custom_sidebar
from src.database.database import init_db, get_db_session
from src.database.models import User
from src.database.snapshot import seed_demo_data

LOG_DIR = os.getenv("STUDYPILOT_LOG_DIR", "logs")
os.makedirs(LOG_DIR, exist_ok=True)

logging.basicConfig(
    level=os.getenv("STUDYPILOT_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.FileHandler(os.path.join(LOG_DIR, "app.log"), encoding="utf-8")],
)
logger = logging.getLogger("studypilot")

# Initialize app
setup_custom_layout()

# Initialize database
init_db()

if 'user_id' not in st.session_state:
    st.session_state.user_id = None


def get_or_create_user():
    """Get the single local user, seeding demo data on first launch"""
    db = get_db_session()
    try:
        user = db.query(User).first()
        if not user:
            logger.info("No user found, seeding demo data")
            user = seed_demo_data(db)
        return user.id
    finally:
        db.close()


PAGES = [
    "🏠 Dashboard",
    "📈 Class Grades",
    "🎓 Degree",
    "🗒️ Weekly Report",
]


def main():
    """Main application"""
    sidebar = create_custom_sidebar()

    if st.session_state.user_id is None:
        st.session_state.user_id = get_or_create_user()

    with sidebar:
        st.markdown("### Navigation")
        page = st.radio("Choose a page", PAGES, label_visibility="collapsed")

    if page == "🏠 Dashboard":
        from src.components.dashboard import render_dashboard
        render_dashboard()
    elif page == "📈 Class Grades":
        from src.components.class_grades import render_class_grades
        render_class_grades()
    elif page == "🎓 Degree":
        from src.components.degree import render_degree
        render_degree()
    elif page == "🗒️ Weekly Report":
        from src.components.weekly_report import render_weekly_report
        render_weekly_report()


if __name__ == "__main__":
    main()
