"""Wall-clock helpers.

Ledger timestamps are timezone-aware and expressed in the local zone, so
that "today" for the order counter and for reports is the shop's day.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime

Clock = Callable[[], datetime]


def local_now() -> datetime:
    return datetime.now().astimezone()


def day_key(day: date) -> str:
    """Calendar-date key, e.g. ``2024-03-07``."""
    return day.isoformat()
