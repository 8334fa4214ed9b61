"""Utility helper functions"""

from datetime import datetime, date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Optional
from zoneinfo import ZoneInfo
import os

from src.utils.constants import GPA_DECIMALS, MISSING_VALUE, PERCENT_DECIMALS


def get_week_range(target_date: Optional[date] = None) -> tuple[date, date]:
    """Get start (Monday) and end (Sunday) of week for given date"""
    if target_date is None:
        target_date = date.today()

    # Monday is 0, Sunday is 6
    days_since_monday = target_date.weekday()
    start_of_week = target_date - timedelta(days=days_since_monday)
    end_of_week = start_of_week + timedelta(days=6)

    return start_of_week, end_of_week


def calculate_percentage(part: float, total: float) -> float:
    """Calculate percentage, handling zero division"""
    if total == 0:
        return 0.0
    return round((part / total) * 100, 2)


def round_half_up(value: float, places: int) -> float:
    """Round like a calculator (2.25 -> 2.3), not banker's rounding"""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_percent(value: Optional[float]) -> Optional[float]:
    """Round a percentage for display (one decimal)"""
    if value is None:
        return None
    return round_half_up(value, PERCENT_DECIMALS)


def round_gpa(value: Optional[float]) -> Optional[float]:
    """Round a GPA for display (two decimals)"""
    if value is None:
        return None
    return round_half_up(value, GPA_DECIMALS)


def format_percent(value: Optional[float]) -> str:
    """Format a percentage; a missing value is shown as a dash, never 0"""
    if value is None:
        return MISSING_VALUE
    return f"{round_percent(value):.{PERCENT_DECIMALS}f}%"


def format_gpa(value: Optional[float]) -> str:
    if value is None:
        return MISSING_VALUE
    return f"{round_gpa(value):.{GPA_DECIMALS}f}"


def format_gpa_change(change: Optional[float]) -> str:
    """Format a GPA difference as '+0.12 increase' or '-0.05 decrease'"""
    if change is None:
        return MISSING_VALUE
    if change >= 0:
        return f"+{format_gpa(change)} increase"
    return f"{format_gpa(change)} decrease"


def format_weight_total(weight_check: Dict) -> str:
    """Format a weight validation result for display"""
    total = weight_check['total']
    total_text = f"{total:g}"
    if weight_check['is_valid']:
        return f"Total: {total_text}% (Valid)"
    return f"Total: {total_text}% (must equal 100%)"


# Timezone helpers
DEFAULT_TZ = os.getenv("STUDYPILOT_TIMEZONE", "UTC")


def get_zoneinfo(tz_name: Optional[str] = None) -> ZoneInfo:
    """Return a ZoneInfo for the given tz_name or default."""
    if tz_name is None:
        tz_name = DEFAULT_TZ
    try:
        return ZoneInfo(tz_name)
    except Exception:
        # Fallback to UTC
        return ZoneInfo("UTC")


def to_local(dt: datetime, tz_name: Optional[str] = None) -> datetime:
    """Convert an aware or naive datetime to the local timezone.

    If dt is naive, it is assumed to be in UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=ZoneInfo("UTC"))
    zone = get_zoneinfo(tz_name)
    return dt.astimezone(zone)


def format_datetime_local(dt: Optional[datetime], fmt: str = "%Y-%m-%d %H:%M", tz_name: Optional[str] = None) -> str:
    """Format a datetime in the local timezone. Returns 'N/A' for None."""
    if dt is None:
        return "N/A"
    local = to_local(dt, tz_name)
    return local.strftime(fmt)


def format_date_local(d: Optional[date], fmt: str = "%Y-%m-%d") -> str:
    if d is None:
        return "N/A"
    return d.strftime(fmt)
