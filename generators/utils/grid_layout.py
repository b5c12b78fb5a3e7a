"""
Grid Layout Utilities

Computes where each apartment table goes on the PDF pages. All values are in
millimetres with the origin at the top-left corner of the page; the report
generator converts them to ReportLab's bottom-left coordinates when drawing.

Tables are laid out in at most two columns, share a single width and height,
and flow onto a new page (starting a fresh grid at the top) when the next
table would cross the reserved bottom area.
"""
import math
from dataclasses import dataclass
from typing import List

from utils.data_models import ScheduleAssignment, TablePlacement
from utils.logging_config import get_logger

logger = get_logger(__name__)

MAX_COLUMNS = 2


@dataclass(frozen=True)
class PageGeometry:
    """Physical page and table dimensions in millimetres"""
    page_width: float = 210
    page_height: float = 297
    margin: float = 15
    min_table_height: float = 80
    max_table_height: float = 120
    content_top: float = 40
    width_gap: float = 10
    column_gap: float = 5
    row_gap: float = 15
    bottom_reserved: float = 60
    header_height: float = 18
    header_band_height: float = 12
    line_height: float = 6
    base_table_height: float = 20

    @property
    def usable_bottom(self) -> float:
        """Lowest y a table may reach before a new page is needed."""
        return self.page_height - self.bottom_reserved


def column_count(apartment_count: int) -> int:
    """One column for a single apartment, otherwise two."""
    return max(1, min(apartment_count, MAX_COLUMNS))


def table_width(columns: int, geometry: PageGeometry) -> float:
    """Shared width of every table; the reserved gap is subtracted even for one column."""
    return (geometry.page_width - 2 * geometry.margin - geometry.width_gap) / columns


def table_height(max_dates: int, geometry: PageGeometry) -> float:
    """Shared height of every table, sized for the apartment with the most dates."""
    wanted = geometry.base_table_height + geometry.line_height * max_dates
    return max(geometry.min_table_height, min(geometry.max_table_height, wanted))


def visible_line_count(height: float, geometry: PageGeometry) -> int:
    """How many date lines fit below the table header."""
    return max(0, math.floor((height - geometry.header_height) / geometry.line_height))


def grid_position(index: int, columns: int, width: float, height: float,
                  geometry: PageGeometry) -> tuple:
    """Top-left corner (x, y) of the table at a grid index on the current page."""
    column = index % columns
    row = index // columns
    x = geometry.margin + column * (width + geometry.column_gap)
    y = geometry.content_top + row * (height + geometry.row_gap)
    return x, y


def compute_grid_layout(schedule: ScheduleAssignment, geometry: PageGeometry) -> List[TablePlacement]:
    """
    Place one table per apartment, in schedule order, across as many pages as needed.

    Args:
        schedule: Apartment to dates mapping
        geometry: Page and table dimensions

    Returns:
        List[TablePlacement]: One placement per apartment, in apartment order
    """
    if schedule.is_empty:
        return []

    columns = column_count(len(schedule))
    width = table_width(columns, geometry)
    height = table_height(schedule.max_dates, geometry)
    lines = visible_line_count(height, geometry)

    placements = []
    page_index = 0
    slot = 0
    for apartment_id, dates in schedule.items():
        x, y = grid_position(slot, columns, width, height, geometry)
        # a page that already holds a table starts over when the next one would not fit
        if slot > 0 and y + height > geometry.usable_bottom:
            page_index += 1
            slot = 0
            x, y = grid_position(slot, columns, width, height, geometry)

        placements.append(TablePlacement(
            apartment_id=apartment_id,
            dates=tuple(dates),
            x=x,
            y=y,
            width=width,
            height=height,
            page_index=page_index,
            visible_line_count=lines
        ))
        slot += 1

    logger.debug(
        f"Laid out {len(placements)} tables ({columns} columns, {width:.1f}x{height:.1f} mm) "
        f"on {page_index + 1} pages"
    )
    return placements


def page_count(placements: List[TablePlacement]) -> int:
    """Number of pages a layout spans (at least one page is always emitted)."""
    if not placements:
        return 1
    return max(placement.page_index for placement in placements) + 1
