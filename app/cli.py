"""
CLI interface for the Escalas application.
"""
import argparse
import time
from typing import List, Optional

from colorama import Fore, Style, init

from config.settings import AppSettings, ConfigManager
from generators.utils.formatting_utils import format_apartment_header
from schedule_manager import ScheduleManager
from scheduling.apartment_roster import ApartmentRoster, DIRECTIONS
from utils.data_models import ScheduleAssignment
from utils.exceptions import EmptySelectionError, ExportFailure, ValidationError
from utils.logging_config import get_logger, set_log_level

logger = get_logger(__name__)
init(autoreset=True)

EMPTY_DATES_MESSAGE = "No hay fechas asignadas en este período"


def apartment_id(value: str):
    """Apartment numbers stay integers; any other label is kept as text."""
    value = value.strip()
    return int(value) if value.isdigit() else value


class CliInterface:
    """Command line interface for generating the cleaning rotation."""

    def __init__(self, settings: Optional[AppSettings] = None):
        self.settings = settings or AppSettings()
        self.manager = None

    def status_update(self, message: str) -> None:
        """
        Print status messages with color coding.

        Args:
            message: Status message to print
        """
        lowered = message.lower()
        if "error" in lowered:
            print(Fore.RED + message)
        elif "correctamente" in lowered:
            print(Fore.GREEN + message)
        elif "advertencia" in lowered:
            print(Fore.YELLOW + message)
        else:
            print(Fore.WHITE + message)

    def parse_arguments(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        parser = argparse.ArgumentParser(
            description="Generate the Sunday stair-cleaning rotation and export it to PDF."
        )
        parser.add_argument("start_date", help="First day of the period (YYYY-MM-DD)")
        parser.add_argument("end_date", help="Last day of the period (YYYY-MM-DD)")
        parser.add_argument(
            "-a", "--apartments",
            nargs="+",
            type=apartment_id,
            help="Apartments in rotation order (default: apartments from settings)"
        )
        parser.add_argument(
            "--skip",
            nargs="+",
            type=apartment_id,
            default=[],
            metavar="ID",
            help="Apartments to leave out of the rotation this time"
        )
        parser.add_argument(
            "--move",
            nargs=2,
            action="append",
            default=[],
            metavar=("POSITION", "DIRECTION"),
            help="Move the apartment at a 1-based position up or down (repeatable)"
        )
        parser.add_argument(
            "-o", "--output",
            default=None,
            help="Output directory for the PDF (default: settings 'output_directory')"
        )
        parser.add_argument(
            "--no-pdf",
            action="store_true",
            help="Only print the schedule, do not export a PDF"
        )
        parser.add_argument(
            "--log-level",
            default=None,
            choices=["DEBUG", "INFO", "WARNING", "ERROR"],
            help="Console log level"
        )
        return parser.parse_args(argv)

    def build_roster(self, args: argparse.Namespace) -> ApartmentRoster:
        """
        Apply the --move and --skip options to the apartment list.

        Raises:
            ValidationError: If a move or a skipped apartment is not valid
        """
        apartments = args.apartments if args.apartments is not None else self.settings.get("apartments", [])
        roster = ApartmentRoster(apartments)

        for position, direction in args.move:
            if not position.isdigit() or not 1 <= int(position) <= len(roster):
                raise ValidationError(f"Invalid position '{position}', expected 1 to {len(roster)}")
            if direction not in DIRECTIONS:
                raise ValidationError(f"Invalid direction '{direction}', expected one of {DIRECTIONS}")
            if not roster.move(int(position) - 1, direction):
                logger.warning(f"Apartment at position {position} cannot move {direction}")

        for apartment in args.skip:
            try:
                roster.toggle(apartment)
            except KeyError as e:
                raise ValidationError(f"Unknown apartment '{apartment}'") from e

        return roster

    def print_schedule(self, schedule: ScheduleAssignment) -> None:
        for apartment, dates in schedule.items():
            print(Style.BRIGHT + format_apartment_header(apartment))
            if not dates:
                print(f"  {EMPTY_DATES_MESSAGE}")
            for position, date_text in enumerate(dates, start=1):
                print(f"  {position}. {date_text}")

        stats = schedule.stats()
        print(
            f"Apartamentos: {stats.apartment_count} | "
            f"Fechas asignadas: {stats.total_dates} | "
            f"Domingos en el período: {stats.total_sundays}"
        )

    def handle_error(self, message: str, exit_code: int = 1) -> int:
        self.status_update(message)
        return exit_code

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the command line interface.

        Returns:
            int: Process exit code
        """
        args = self.parse_arguments(argv)
        if args.log_level:
            set_log_level(args.log_level)

        start_time = time.time()

        self.manager = ScheduleManager(status_callback=self.status_update, settings=self.settings)
        try:
            roster = self.build_roster(args)
            schedule = self.manager.generate(roster.selected_apartments(), args.start_date, args.end_date)
            self.print_schedule(schedule)
            if not args.no_pdf:
                self.manager.export_pdf(schedule, output_dir=args.output)
        except ValidationError as e:
            return self.handle_error(f"Error de validación: {e}")
        except EmptySelectionError as e:
            return self.handle_error(f"Error: {e}")
        except ExportFailure as e:
            return self.handle_error(f"Error al generar el PDF: {e}")

        logger.debug(f"CLI run finished in {time.time() - start_time:.2f}s")
        return 0


def run_cli(argv: Optional[List[str]] = None) -> int:
    """Entry point for CLI interface."""
    cli = CliInterface(ConfigManager.get_instance().settings)
    return cli.run(argv)
