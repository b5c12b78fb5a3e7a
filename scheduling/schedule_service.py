"""
Schedule service: validates the requested range and builds the rotation.
"""
from datetime import date
from typing import Optional, Sequence

from generators.utils.formatting_utils import DEFAULT_LOCALE, format_long_date
from scheduling.recurrence import DateInput, SUNDAY, enumerate_recurrence_date_values, parse_iso_date
from scheduling.rotation import assign_round_robin
from utils.data_models import ApartmentId, DateRange, ScheduleAssignment
from utils.exceptions import EmptySelectionError, ValidationError
from utils.logging_config import get_logger

logger = get_logger(__name__)


def validate_date_range(start: Optional[DateInput], end: Optional[DateInput],
                        today: Optional[date] = None) -> DateRange:
    """
    Validate a requested date range.

    The start must be strictly before the end. A start in the past is only
    reported as a warning.

    Args:
        start: Start date (YYYY-MM-DD string or date)
        end: End date (YYYY-MM-DD string or date)
        today: Reference date for the past-start warning (defaults to today)

    Returns:
        DateRange: The parsed range

    Raises:
        ValidationError: If a date is missing, malformed or start >= end
    """
    if not start or not end:
        raise ValidationError("A start and an end date are required")

    start_date = parse_iso_date(start)
    end_date = parse_iso_date(end)

    if start_date >= end_date:
        raise ValidationError(
            f"Start date ({start_date.isoformat()}) must be before end date ({end_date.isoformat()})"
        )

    if start_date < (today or date.today()):
        logger.warning(f"Start date {start_date.isoformat()} is earlier than today")

    return DateRange(start=start_date, end=end_date)


def require_selection(apartments: Sequence[ApartmentId]) -> None:
    """
    Raises:
        EmptySelectionError: If no apartment is selected
    """
    if not apartments:
        raise EmptySelectionError("Select at least one apartment")


def build_schedule(apartments: Sequence[ApartmentId], date_range: DateRange,
                   weekday: int = SUNDAY, locale: str = DEFAULT_LOCALE) -> ScheduleAssignment:
    """
    Enumerate the occurrences in an already validated range and rotate them.

    An empty apartment list produces an empty schedule.
    """
    occurrences = enumerate_recurrence_date_values(date_range.start, date_range.end, weekday)
    display_dates = [format_long_date(value, locale) for value in occurrences]
    assignments = assign_round_robin(list(apartments), display_dates)
    return ScheduleAssignment(
        assignments=assignments,
        date_range=date_range,
        occurrence_count=len(occurrences)
    )


def generate_schedule(apartments: Sequence[ApartmentId], start: Optional[DateInput],
                      end: Optional[DateInput], today: Optional[date] = None,
                      locale: str = DEFAULT_LOCALE) -> ScheduleAssignment:
    """
    Validate the range and distribute its Sundays among the apartments in rotation.

    Args:
        apartments: Selected apartment identifiers, in rotation order
        start: Start date (YYYY-MM-DD)
        end: End date (YYYY-MM-DD)
        today: Reference date for the past-start warning
        locale: Display locale for the dates

    Returns:
        ScheduleAssignment: A new, read-only schedule

    Raises:
        ValidationError: If the range is invalid
    """
    date_range = validate_date_range(start, end, today=today)
    schedule = build_schedule(apartments, date_range, locale=locale)

    stats = schedule.stats()
    logger.info(
        f"Generated schedule for {stats.apartment_count} apartments: "
        f"{stats.total_dates} dates between {date_range.start.isoformat()} and {date_range.end.isoformat()}"
    )
    return schedule
