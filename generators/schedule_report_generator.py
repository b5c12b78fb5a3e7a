"""
Schedule Report Generator

Draws the cleaning rotation as a grid of per-apartment tables on A4 pages,
using the placements computed by generators.utils.grid_layout.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth

from generators.base_report_generator import BaseReportGenerator, handle_report_errors
from generators.shared_design_system import COLORS, FONTS, FONT_SIZES, LAYOUT, set_font, to_points
from generators.utils.formatting_utils import format_apartment_header
from generators.utils.grid_layout import PageGeometry, compute_grid_layout, page_count
from utils.data_models import ScheduleAssignment, TablePlacement
from utils.exceptions import EmptySelectionError
from utils.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_TITLE = "LAVADA DE ESCALAS"
DEFAULT_NOTE = "Mantener las escalas aseadas nos beneficia a todos. Muchas gracias"
ELLIPSIS = "..."


@dataclass
class ReportResult:
    """Outcome of a successful export"""
    path: str
    page_count: int
    placements: List[TablePlacement] = field(default_factory=list)


def fit_text(text, font_name, font_size, max_width_pt):
    """Shorten text with a trailing ellipsis until it fits the given width."""
    if stringWidth(text, font_name, font_size) <= max_width_pt:
        return text
    shortened = text
    while shortened and stringWidth(shortened + ELLIPSIS, font_name, font_size) > max_width_pt:
        shortened = shortened[:-1]
    return shortened + ELLIPSIS


class ScheduleReportGenerator(BaseReportGenerator):
    """Exports a ScheduleAssignment to a paginated PDF."""

    def __init__(self, title=DEFAULT_TITLE, note=DEFAULT_NOTE, geometry: Optional[PageGeometry] = None):
        super().__init__(title=title)
        self.note = note
        self.geometry = geometry or PageGeometry()

    # Coordinates below are millimetres from the top-left corner; ReportLab
    # measures points from the bottom-left, so every y is flipped here.
    def _x(self, x_mm):
        return to_points(x_mm)

    def _y(self, y_mm):
        return to_points(self.geometry.page_height - y_mm)

    def _rect(self, c, x, y, width, height, fill=False):
        c.rect(self._x(x), self._y(y + height), to_points(width), to_points(height),
               stroke=0 if fill else 1, fill=1 if fill else 0)

    def _draw_title(self, c):
        set_font(c, 'title')
        c.setFillColor(COLORS['text'])
        c.drawCentredString(self._x(self.geometry.page_width / 2), self._y(LAYOUT['title_y']), self.title)

    def _draw_table_borders(self, c, placement: TablePlacement):
        geometry = self.geometry
        c.setStrokeColor(COLORS['border'])
        c.setLineWidth(LAYOUT['line_widths']['border'])
        self._rect(c, placement.x, placement.y, placement.width, placement.height)

        c.setFillColor(COLORS['header_fill'])
        self._rect(c, placement.x, placement.y, placement.width, geometry.header_band_height, fill=True)

        c.setLineWidth(LAYOUT['line_widths']['separator'])
        separator_y = self._y(placement.y + geometry.header_band_height)
        c.line(self._x(placement.x), separator_y, self._x(placement.x + placement.width), separator_y)

    def _draw_table_header(self, c, placement: TablePlacement):
        set_font(c, 'table_header')
        c.setFillColor(COLORS['text'])
        c.drawCentredString(
            self._x(placement.x + placement.width / 2),
            self._y(placement.y + LAYOUT['header_text_y']),
            format_apartment_header(placement.apartment_id)
        )

    def _draw_table_dates(self, c, placement: TablePlacement):
        geometry = self.geometry
        date_start_y = placement.y + geometry.header_height
        text_width = to_points(placement.width - LAYOUT['date_text_padding'])

        for index, date_text in enumerate(placement.visible_dates):
            date_y = date_start_y + index * geometry.line_height
            if index % 2 == 1:
                c.setFillColor(COLORS['stripe_fill'])
                self._rect(
                    c,
                    placement.x + LAYOUT['stripe_inset'],
                    date_y - LAYOUT['stripe_offset'],
                    placement.width - 2 * LAYOUT['stripe_inset'],
                    geometry.line_height,
                    fill=True
                )
            set_font(c, 'table_body')
            c.setFillColor(COLORS['text'])
            line = fit_text(date_text, FONTS['table_body'], FONT_SIZES['table_body'], text_width)
            c.drawString(self._x(placement.x + LAYOUT['date_text_x']), self._y(date_y), line)

        if placement.truncated:
            last_y = date_start_y + placement.visible_line_count * geometry.line_height
            set_font(c, 'ellipsis', 'table_body')
            c.setFillColor(COLORS['text'])
            c.drawCentredString(self._x(placement.x + placement.width / 2), self._y(last_y), ELLIPSIS)

    def _draw_apartment_table(self, c, placement: TablePlacement):
        self._draw_table_borders(c, placement)
        self._draw_table_header(c, placement)
        self._draw_table_dates(c, placement)

    def _draw_note(self, c):
        if not self.note:
            return
        geometry = self.geometry
        note_y = geometry.page_height - LAYOUT['note_offset_from_bottom']

        set_font(c, 'note_label')
        c.setFillColor(COLORS['text'])
        c.drawString(self._x(geometry.margin), self._y(note_y), "Nota:")

        usable_width = to_points(geometry.page_width - 2 * geometry.margin)
        lines = simpleSplit(self.note, FONTS['note_body'], FONT_SIZES['note_body'], usable_width)
        set_font(c, 'note_body')
        for index, line in enumerate(lines):
            line_y = note_y + LAYOUT['note_line_gap'] + index * LAYOUT['note_leading']
            c.drawString(self._x(geometry.margin), self._y(line_y), line)

    @handle_report_errors("Schedule")
    def generate_report(self, schedule: ScheduleAssignment, output_filename: str = "output/escalas.pdf") -> ReportResult:
        """
        Write the schedule to a PDF file.

        Args:
            schedule: Apartment to dates mapping
            output_filename: Destination path

        Returns:
            ReportResult: Path, number of pages and the placements drawn

        Raises:
            EmptySelectionError: If the schedule has no apartments
            ExportFailure: If the document could not be written
        """
        if schedule is None or schedule.is_empty:
            raise EmptySelectionError("Select at least one apartment to generate the PDF")

        placements = compute_grid_layout(schedule, self.geometry)
        page_size = (to_points(self.geometry.page_width), to_points(self.geometry.page_height))
        c = self.create_canvas(output_filename, page_size=page_size)

        self._draw_title(c)
        current_page = 0
        for placement in placements:
            if placement.page_index != current_page:
                c.showPage()
                current_page = placement.page_index
                self._draw_title(c)
            self._draw_apartment_table(c, placement)

        self._draw_note(c)
        c.save()

        pages = page_count(placements)
        logger.info(f"Successfully generated schedule report: {output_filename} ({pages} pages)")
        return ReportResult(path=str(output_filename), page_count=pages, placements=placements)
