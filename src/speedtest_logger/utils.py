"""Shared helpers — dates, etc."""

from __future__ import annotations

from datetime import date, timedelta


def previous_month_label(today: date | None = None) -> str:
    """Return the calendar month before *today* formatted as ``YYYY-MM``."""
    today = today or date.today()
    last_of_previous = today.replace(day=1) - timedelta(days=1)
    return last_of_previous.strftime("%Y-%m")
