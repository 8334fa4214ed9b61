"""Card UI components"""

import html as _html
import streamlit as st
import streamlit.components.v1 as components
from textwrap import dedent

from src.utils.constants import ERROR_COLOR, PRIMARY_COLOR, SUCCESS_COLOR, WARNING_COLOR

ACCENTS = {
    "primary": PRIMARY_COLOR,
    "success": SUCCESS_COLOR,
    "warning": WARNING_COLOR,
    "error": ERROR_COLOR,
}

STYLE_BLOCK = """
<style>
.sp-card { background: rgba(255,255,255,0.08); color: #f8fafc; border-radius: 10px; padding: 12px; margin: 8px 0; border: 1px solid rgba(255,255,255,0.06); }
.sp-card-title { margin: 0 0 6px 0; font-size: 1.05rem; color: #ffffff; }
.sp-card-content { font-size: 0.9rem; color: #f1f5f9; }
.sp-metric { text-align: center; }
.sp-metric-value { font-size: 1.6rem; font-weight: 700; color: #ffffff; }
.sp-metric-label { color: #e6eef8; }
.sp-metric-trend.up { color: #10b981; }
.sp-metric-trend.down { color: #ef4444; }
</style>
"""


def _render(fragment: str, min_height: int, max_height: int):
    safe_html = dedent(fragment).strip()
    line_count = max(1, safe_html.count('\n'))
    height = min(max_height, min_height + line_count * 18)
    try:
        components.html(STYLE_BLOCK + safe_html, height=height, scrolling=True)
    except Exception:
        st.markdown(safe_html, unsafe_allow_html=True)


def card(title: str, content: str = "", icon: str = "", color: str = "primary"):
    """
    Create a custom card component

    Args:
        title: Card title (plain text, escaped)
        content: Card content (HTML)
        icon: Optional icon emoji
        color: Accent color (primary, success, warning, error)
    """
    icon_html = f"{icon} " if icon else ""
    accent = ACCENTS.get(color, PRIMARY_COLOR)

    card_html = f"""
    <div class="sp-card" style="border-left: 4px solid {accent};">
        <h3 class="sp-card-title">{icon_html}{_html.escape(title)}</h3>
        <div class="sp-card-content">{dedent(str(content)).strip()}</div>
    </div>
    """
    _render(card_html, 80, 400)


def metric_card(value: str, label: str, trend: str = "", trend_direction: str = "neutral"):
    """
    Create a metric card component

    Args:
        value: Main metric value
        label: Metric label
        trend: Trend indicator text (optional)
        trend_direction: up, down, or neutral
    """
    trend_html = ""
    if trend:
        trend_class = "up" if trend_direction == "up" else "down" if trend_direction == "down" else ""
        trend_html = f'<div class="sp-metric-trend {trend_class}">{trend}</div>'

    metric_html = f"""
    <div class="sp-card sp-metric">
        <div class="sp-metric-value">{value}</div>
        <div class="sp-metric-label">{label}</div>
        {trend_html}
    </div>
    """
    _render(metric_html, 60, 200)
