"""Layout utilities for custom Streamlit styling"""

import streamlit as st


def setup_custom_layout():
    """Setup page config"""
    st.set_page_config(
        page_title="StudyPilot - Grades & GPA",
        page_icon="🎓",
        layout="wide",
        initial_sidebar_state="expanded"
    )


def create_custom_sidebar():
    """Create styled sidebar navigation"""
    st.sidebar.markdown("## 🎓 StudyPilot")
    st.sidebar.markdown("---")
    return st.sidebar
