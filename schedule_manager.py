import os
from datetime import date
from typing import Optional, Sequence

from config.settings import AppSettings
from generators.schedule_report_generator import ReportResult, ScheduleReportGenerator
from generators.utils.formatting_utils import build_export_filename
from scheduling.recurrence import DateInput
from scheduling.schedule_service import generate_schedule, require_selection
from utils.data_models import ApartmentId, ScheduleAssignment
from utils.exceptions import EscalasError
from utils.logging_config import get_logger

logger = get_logger(__name__)


class ScheduleManager:
    """
    Coordinates schedule generation and PDF export, reporting progress to a
    status callback (the CLI prints these messages).
    """
    def __init__(self, status_callback=None, settings: Optional[AppSettings] = None):
        """
        Args:
            status_callback: Optional callback function for status messages.
            settings: Application settings (a fresh AppSettings when None).
        """
        self.status_callback = status_callback
        self.settings = settings or AppSettings()

    def update_status(self, message: str) -> None:
        """Sends a status update message via the callback."""
        if self.status_callback:
            self.status_callback(message)

    def generate(self, apartments: Sequence[ApartmentId], start: DateInput, end: DateInput,
                 today: Optional[date] = None) -> ScheduleAssignment:
        """
        Build the rotation for the selected apartments.

        Raises:
            ValidationError: If the date range is invalid
            EmptySelectionError: If no apartment is selected
        """
        require_selection(apartments)
        self.update_status(f"Generando escalas para {len(apartments)} apartamentos...")

        schedule = generate_schedule(
            apartments, start, end,
            today=today,
            locale=self.settings.get("locale", "es")
        )
        if schedule.date_range.start < (today or date.today()):
            self.update_status("Advertencia: la fecha de inicio es anterior a hoy")

        stats = schedule.stats()
        self.update_status(
            f"Escalas generadas correctamente: {stats.apartment_count} apartamentos, "
            f"{stats.total_dates} domingos asignados"
        )
        return schedule

    def export_pdf(self, schedule: ScheduleAssignment, output_dir: Optional[str] = None) -> ReportResult:
        """
        Write the schedule PDF into output_dir.

        The file name is derived from the schedule's date range.

        Raises:
            EmptySelectionError: If the schedule has no apartments
            ExportFailure: If the PDF could not be written
        """
        output_dir = output_dir or self.settings.get("output_directory", "output")
        if schedule is None:
            require_selection([])
        require_selection(schedule.apartments)

        if schedule.date_range is not None:
            filename = build_export_filename(schedule.date_range.start, schedule.date_range.end)
        else:
            filename = "escalas.pdf"
        output_filename = os.path.join(output_dir, filename)

        self.update_status(f"Generando PDF: {output_filename}")
        generator = ScheduleReportGenerator(
            title=self.settings.get("report_title"),
            note=self.settings.get("report_note"),
            geometry=self.settings.page_geometry()
        )
        try:
            result = generator.generate_report(schedule, output_filename=output_filename)
        except EscalasError as e:
            self.update_status(f"Error: {e}")
            raise

        self.settings.add_recent_directory(output_dir)
        self.update_status(f"PDF generado correctamente ({result.page_count} páginas): {result.path}")
        return result
