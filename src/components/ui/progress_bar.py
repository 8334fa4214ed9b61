"""Custom progress bar component"""

import streamlit as st
import streamlit.components.v1 as components
from textwrap import dedent

from src.utils.constants import ERROR_COLOR, PRIMARY_COLOR, SUCCESS_COLOR, WARNING_COLOR


def progress_bar(value: float, max_value: float = 100.0, color: str = "primary", label: str = ""):
    """
    Display a custom styled progress bar

    Values above max_value (extra credit) fill the bar; negative values
    show an empty bar.

    Args:
        value: Current value
        max_value: Maximum value
        color: Color theme (primary, success, warning, error)
        label: Optional label above progress bar
    """
    percentage = max(0.0, min((value / max_value) * 100, 100.0)) if max_value > 0 else 0

    bar_color = {
        "primary": PRIMARY_COLOR,
        "success": SUCCESS_COLOR,
        "warning": WARNING_COLOR,
        "error": ERROR_COLOR,
    }.get(color, PRIMARY_COLOR)

    label_html = f'<div style="margin-bottom: 8px; color: #cbd5e1; font-size: 0.875rem;">{label}</div>' if label else ""

    progress_html = f"""
    {label_html}
    <div style="background: #e6eef8; height: 10px; border-radius: 6px; overflow: hidden;">
        <div style="background: {bar_color}; height: 100%; width: {percentage}%;"></div>
    </div>
    """

    safe_progress = dedent(progress_html).strip()

    # Render inside components.html to avoid Markdown code-block issues
    line_count = max(1, safe_progress.count('\n'))
    height = min(120, 40 + line_count * 12)
    try:
        components.html(safe_progress, height=height, scrolling=False)
    except Exception:
        st.markdown(safe_progress, unsafe_allow_html=True)
