"""
Weekly recurrence date enumeration.

Dates are handled as plain calendar dates (datetime.date) so no timezone
shift can move an occurrence to the neighbouring day.
"""
from datetime import date, datetime, timedelta
from typing import List, Optional, Union

from generators.utils.formatting_utils import DEFAULT_LOCALE, format_long_date
from utils.exceptions import ValidationError
from utils.logging_config import get_logger

logger = get_logger(__name__)

# Sunday-first numbering: 0 = Sunday ... 6 = Saturday
SUNDAY = 0
DAYS_IN_WEEK = 7

DateInput = Union[str, date, datetime]


def parse_iso_date(value: DateInput) -> date:
    """
    Parse a YYYY-MM-DD string (or date/datetime) into a calendar date.

    Args:
        value: ISO date string, date or datetime

    Returns:
        date: The calendar date, time of day discarded

    Raises:
        ValidationError: If the value is missing or not a valid ISO date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("A start and an end date are required")
    try:
        year, month, day = (int(part) for part in value.strip().split('-'))
        return date(year, month, day)
    except ValueError as e:
        raise ValidationError(f"Invalid date '{value}', expected YYYY-MM-DD") from e


def weekday_index(value: date) -> int:
    """Weekday of a date with 0 = Sunday ... 6 = Saturday."""
    return value.isoweekday() % DAYS_IN_WEEK


def first_occurrence(start: date, weekday: int = SUNDAY) -> Optional[date]:
    """
    First date on or after start that falls on the given weekday.

    Returns None when that day would be past the last representable date.
    """
    offset = (weekday - weekday_index(start)) % DAYS_IN_WEEK
    if (date.max - start).days < offset:
        return None
    return start + timedelta(days=offset)


def enumerate_recurrence_date_values(start: DateInput, end: DateInput,
                                     weekday: int = SUNDAY) -> List[date]:
    """
    Collect every occurrence of a weekday within [start, end], ascending.

    Both boundaries are inclusive. A start after the end yields no dates.
    """
    start_date = parse_iso_date(start)
    end_date = parse_iso_date(end)

    occurrences = []
    current = first_occurrence(start_date, weekday)
    step = timedelta(days=DAYS_IN_WEEK)
    while current is not None and current <= end_date:
        occurrences.append(current)
        # the next step would pass end_date, and near 9999-12-31 also date.max
        if end_date - current < step:
            break
        current += step

    logger.debug(f"Found {len(occurrences)} occurrences between {start_date} and {end_date}")
    return occurrences


def enumerate_recurrence_dates(start: DateInput, end: DateInput,
                               weekday: int = SUNDAY,
                               locale: str = DEFAULT_LOCALE) -> List[str]:
    """
    Sundays (or another weekday) in the range, formatted for display.

    Returns:
        List[str]: e.g. ['1 de junio de 2025', '8 de junio de 2025', ...]
    """
    return [format_long_date(value, locale) for value in enumerate_recurrence_date_values(start, end, weekday)]
