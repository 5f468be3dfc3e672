"""Date utilities - DRY principle"""
from datetime import date, datetime, time, timedelta
from typing import Union

def date_to_datetime(value: date) -> datetime:
    """Calendar date -> naive midnight datetime (BSON storable)"""
    if isinstance(value, datetime):
        return datetime.combine(value.date(), time.min)
    return datetime.combine(value, time.min)

def to_date(value: Union[date, datetime, str, None]) -> Union[date, None]:
    """Stored value -> calendar date"""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_date(value)

def parse_date(date_str: str) -> date:
    try:
        return date.fromisoformat(date_str)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid date format, expected YYYY-MM-DD: {date_str}")

def day_range(date_from: date, date_to: date):
    """Closed-open datetime interval [date_from, date_to + 1 day)"""
    return date_to_datetime(date_from), date_to_datetime(date_to) + timedelta(days=1)
