import calendar
from datetime import date


def date_key(value, month: int | None = None, day: int | None = None) -> str:
    """
    Return the "YYYY-MM-DD" key for a calendar date.

    Accepts either a ``date``/``datetime`` (its local calendar fields are
    used, the time of day is ignored) or a ``(year, month, day)`` triple
    with a 1-based month.
    """
    if isinstance(value, date):
        year, month, day = value.year, value.month, value.day
    else:
        year = value
    return f"{year:04d}-{month:02d}-{day:02d}"


def shift_month(cursor: date, offset: int) -> date:
    """First day of the month `offset` months away from `cursor`."""
    index = cursor.year * 12 + (cursor.month - 1) + offset
    return date(index // 12, index % 12 + 1, 1)


# Sunday-first weeks, like the wall calendars the app mimics
_CALENDAR = calendar.Calendar(firstweekday=calendar.SUNDAY)


def month_grid(year: int, month: int) -> list[list[date | None]]:
    return [
        [d if d.month == month else None for d in week]
        for week in _CALENDAR.monthdatescalendar(year, month)
    ]
