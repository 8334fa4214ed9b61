"""Weekly progress report export"""

import io
import logging
from datetime import date, datetime
from typing import Dict, List, Optional

from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from src.utils.helpers import (
    format_date_local, format_datetime_local, format_gpa, format_percent, get_week_range
)

logger = logging.getLogger("studypilot.report")


def build_report_lines(
    summary: Dict,
    week_start: Optional[date] = None,
    week_end: Optional[date] = None,
    generated_at: Optional[datetime] = None
) -> List[str]:
    """
    Text lines of the weekly report

    Grades go through the same formatting helpers as the UI so the PDF
    never disagrees with the screens.

    Args:
        summary: Output of summarize_student
        week_start: First day of the week (defaults to this week)
        week_end: Last day of the week
        generated_at: Export time, printed in the local timezone when given
    """
    if week_start is None or week_end is None:
        week_start, week_end = get_week_range()

    lines = [
        "Weekly Progress Report",
        f"Week of {format_date_local(week_start, '%b %d')} - {format_date_local(week_end, '%b %d, %Y')}",
        "",
        "Enrolled Classes",
    ]

    if not summary['enrolled']:
        lines.append("  No enrolled classes")
    for class_summary in summary['enrolled']:
        cls = class_summary['class']
        lines.append(
            f"  - {cls['course_name']} ({cls['credits']} credits): "
            f"{format_percent(class_summary['current_grade'])}"
        )
        weight_check = class_summary['weight_check']
        if weight_check is not None and not weight_check['is_valid']:
            lines.append(f"    Category weights total {weight_check['total']:g}% (must equal 100%)")

    degree = summary['degree']
    lines += [
        "",
        f"Overall GPA: {format_gpa(summary['overall_gpa'])}",
        f"Credits: {degree['completed_credits']} completed, "
        f"{degree['in_progress_credits']} in progress, "
        f"{degree['remaining_credits']} remaining of {degree['total_required']}",
    ]
    if generated_at is not None:
        lines.append(f"Generated {format_datetime_local(generated_at)}")
    return lines


def export_report_pdf(lines: List[str]) -> bytes:
    """Render report lines to PDF bytes"""
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=letter)
    width, height = letter

    y = height - 50
    for index, line in enumerate(lines):
        if y < 50:
            c.showPage()
            y = height - 50
        c.setFont("Helvetica-Bold" if index == 0 else "Helvetica", 16 if index == 0 else 11)
        c.drawString(50, y, line[:90])
        y -= 24 if index == 0 else 18

    c.save()
    buffer.seek(0)
    pdf_bytes = buffer.getvalue()
    logger.info("Exported weekly report: %d lines, %d bytes", len(lines), len(pdf_bytes))
    return pdf_bytes
