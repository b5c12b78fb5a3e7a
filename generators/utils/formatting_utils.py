"""
Formatting Utilities

Centralized date and label formatting for the schedule view, the PDF report
and the export filename, so every surface shows dates the same way.
"""
from datetime import date
from typing import Any

MONTH_NAMES = {
    'es': [
        'enero', 'febrero', 'marzo', 'abril', 'mayo', 'junio',
        'julio', 'agosto', 'septiembre', 'octubre', 'noviembre', 'diciembre'
    ],
    'en': [
        'January', 'February', 'March', 'April', 'May', 'June',
        'July', 'August', 'September', 'October', 'November', 'December'
    ],
}

DEFAULT_LOCALE = 'es'


class DateFormatter:
    """Locale-aware date formatting for schedule output."""

    @staticmethod
    def month_name(month: int, locale: str = DEFAULT_LOCALE) -> str:
        """
        Get the month name for a 1-based month number.

        Args:
            month: Month number (1-12)
            locale: Locale code ('es' or 'en')

        Returns:
            str: Month name in the requested locale

        Raises:
            ValueError: If the locale is not supported
        """
        names = MONTH_NAMES.get(locale)
        if names is None:
            raise ValueError(f"Unsupported locale '{locale}'. Supported: {sorted(MONTH_NAMES)}")
        return names[month - 1]

    @staticmethod
    def format_long(value: date, locale: str = DEFAULT_LOCALE) -> str:
        """
        Format a date the way the schedule tables display it.

        Args:
            value: Calendar date
            locale: Locale code

        Returns:
            str: e.g. '1 de junio de 2025' ('June 1, 2025' for 'en')
        """
        month = DateFormatter.month_name(value.month, locale)
        if locale == 'en':
            return f"{month} {value.day}, {value.year}"
        return f"{value.day} de {month} de {value.year}"

    @staticmethod
    def format_short(value: date, separator: str = '/') -> str:
        """
        Day-first numeric date without zero padding, e.g. '1/6/2025'.
        """
        return f"{value.day}{separator}{value.month}{separator}{value.year}"

    @staticmethod
    def safe_string(value: Any, default: str = '-') -> str:
        if value is None:
            return default
        if isinstance(value, str):
            return value.strip() or default
        return str(value)


def format_long_date(value: date, locale: str = DEFAULT_LOCALE) -> str:
    return DateFormatter.format_long(value, locale)


def format_short_date(value: date) -> str:
    return DateFormatter.format_short(value)


def format_apartment_header(apartment_id: Any) -> str:
    """Table header text for an apartment."""
    return f"APARTAMENTO {DateFormatter.safe_string(apartment_id)}"


def build_export_filename(start: date, end: date, prefix: str = "escalas") -> str:
    """
    Build the PDF filename for a date range.

    Slashes are not valid in file names, so the short date uses dashes.

    Returns:
        str: e.g. 'escalas_1-6-2025_al_29-6-2025.pdf'
    """
    start_text = DateFormatter.format_short(start, separator='-')
    end_text = DateFormatter.format_short(end, separator='-')
    return f"{prefix}_{start_text}_al_{end_text}.pdf"
