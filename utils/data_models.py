"""
Data models used across the application.
Contains dataclass definitions for schedules and their PDF layout.
"""
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from utils.exceptions import ValidationError

ApartmentId = Any


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar range supplied by the caller"""
    start: date
    end: date

    def __post_init__(self):
        if self.start > self.end:
            raise ValidationError(f"Start date {self.start} is after end date {self.end}")


@dataclass(frozen=True)
class ScheduleStats:
    """Summary figures shown next to a schedule"""
    apartment_count: int
    total_dates: int
    total_sundays: int


@dataclass(frozen=True)
class ScheduleAssignment:
    """
    Apartment to duty dates mapping produced by one generation request.

    Keys keep the input apartment order and every value is a tuple of display
    strings in chronological order. The mapping is read-only once built.
    """
    assignments: Mapping[ApartmentId, Tuple[str, ...]] = field(default_factory=dict)
    date_range: Optional[DateRange] = None
    occurrence_count: int = 0

    def __post_init__(self):
        frozen = {apartment: tuple(dates) for apartment, dates in self.assignments.items()}
        object.__setattr__(self, 'assignments', MappingProxyType(frozen))

    def __len__(self) -> int:
        return len(self.assignments)

    def __iter__(self) -> Iterator[ApartmentId]:
        return iter(self.assignments)

    def __getitem__(self, apartment: ApartmentId) -> Tuple[str, ...]:
        return self.assignments[apartment]

    def items(self):
        return self.assignments.items()

    @property
    def apartments(self) -> List[ApartmentId]:
        return list(self.assignments)

    @property
    def is_empty(self) -> bool:
        return not self.assignments

    @property
    def total_dates(self) -> int:
        return sum(len(dates) for dates in self.assignments.values())

    @property
    def max_dates(self) -> int:
        """Largest number of dates held by a single apartment (0 when empty)."""
        return max((len(dates) for dates in self.assignments.values()), default=0)

    def to_dict(self) -> Dict[ApartmentId, List[str]]:
        return {apartment: list(dates) for apartment, dates in self.assignments.items()}

    def stats(self) -> ScheduleStats:
        return ScheduleStats(
            apartment_count=len(self.assignments),
            total_dates=self.total_dates,
            total_sundays=self.occurrence_count
        )


@dataclass(frozen=True)
class TablePlacement:
    """Position of one apartment table on a PDF page, in millimetres from the top-left corner"""
    apartment_id: ApartmentId
    dates: Sequence[str]
    x: float
    y: float
    width: float
    height: float
    page_index: int
    visible_line_count: int

    @property
    def visible_dates(self) -> Sequence[str]:
        return self.dates[:self.visible_line_count]

    @property
    def truncated(self) -> bool:
        return len(self.dates) > self.visible_line_count
