"""Date manipulation utilities"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime"""
    return datetime.now(timezone.utc)


def format_clock_time(moment: datetime) -> str:
    """Hour and minute as shown beside each chat bubble, e.g. 09:05"""
    return moment.strftime("%H:%M")
