from __future__ import annotations

import calendar
from datetime import date, datetime

_components = ('year', 'month', 'day', 'hour', 'minute', 'second', 'microsecond')

def _normalize_month(month : int, year : int) -> tuple[int, int]:
    """
    Carry months outside 1 - 12 into the year, e.g. month 13 of 2022 is month 1 of 2023
    """
    years, month_index = divmod(month - 1, 12)
    return month_index + 1, year + years

def FirstDayOfMonth(month : int, year : int) -> date:
    """
    Date of the first day of the given month, e.g. (2, 2022) -> 2022-02-01
    """
    month, year = _normalize_month(month, year)
    return date(year, month, 1)

def LastDayOfMonth(month : int, year : int) -> date:
    """
    Date of the last day of the given month, e.g. (2, 2024) -> 2024-02-29
    """
    month, year = _normalize_month(month, year)
    _, days = calendar.monthrange(year, month)
    return date(year, month, days)

def IsToday(value : date|datetime, today : date|None = None) -> bool:
    """
    Whether the value falls on today's date (or on the given date)
    """
    if isinstance(value, datetime):
        value = value.date()
    return value == (today or date.today())

def DateOnly(value : datetime) -> datetime:
    """
    The same datetime with the time of day removed
    """
    return value.replace(hour=0, minute=0, second=0, microsecond=0)

def WithComponent(value : datetime, component : str, amount : int) -> datetime|None:
    """
    Replace one component of a datetime, or return None if the result is not a valid datetime
    """
    if component not in _components:
        raise ValueError(f"Unknown date component '{component}', expected one of {', '.join(_components)}")

    try:
        return value.replace(**{component: amount})
    except ValueError:
        return None
