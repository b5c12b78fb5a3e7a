"""
Base Report Generator

Provides common functionality for PDF report generators: output directory
handling, canvas creation and consistent error reporting.
"""
import datetime
from functools import wraps
from pathlib import Path

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from utils.exceptions import EmptySelectionError, ExportFailure
from utils.logging_config import get_logger

logger = get_logger(__name__)

EXPORT_FAILURE_MESSAGE = "Error generating the PDF. Please try again."


def handle_report_errors(report_type_name):
    """
    Decorator for consistent error handling across report generators.

    Any failure while serializing the document is logged with its traceback
    and re-raised as a single ExportFailure. Selection errors are user input
    problems and pass through untouched.

    Args:
        report_type_name (str): Name of the report type for error messages
    """
    def decorator(func):
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except (EmptySelectionError, ExportFailure):
                raise
            except (IOError, OSError) as e:
                output_filename = kwargs.get('output_filename', 'unknown')
                logger.error(
                    f"Error during file operation for {report_type_name} report '{output_filename}': {e}",
                    exc_info=True
                )
                raise ExportFailure(EXPORT_FAILURE_MESSAGE) from e
            except Exception as e:
                output_filename = kwargs.get('output_filename', 'unknown')
                logger.error(
                    f"An unexpected error occurred while generating {report_type_name} report "
                    f"'{output_filename}': {type(e).__name__} - {str(e)}",
                    exc_info=True
                )
                raise ExportFailure(EXPORT_FAILURE_MESSAGE) from e
        return wrapper
    return decorator


class BaseReportGenerator:
    """
    Base class for PDF report generators.

    Provides:
    - Directory management
    - Canvas creation with document metadata
    - Timestamps
    """

    def __init__(self, title="Report", author="Escalas"):
        """
        Args:
            title (str): Document title, also written to the PDF metadata
            author (str): PDF metadata author
        """
        self.title = title
        self.author = author

    def ensure_output_directory(self, output_filename):
        """
        Ensure the directory that will hold the output file exists.

        Args:
            output_filename (str): Path to output file

        Returns:
            bool: True if the directory exists or was created

        Raises:
            RuntimeError: If the directory cannot be created or the path is not a directory
        """
        output_path = Path(output_filename).parent

        if not output_path.exists():
            try:
                output_path.mkdir(parents=True, exist_ok=True)
                logger.debug(f"Created output directory: {output_path}")
            except OSError as e:
                error_message = f"Error creating output directory '{output_path}': {e.strerror}"
                logger.error(error_message, exc_info=True)
                raise RuntimeError(error_message) from e
        elif not output_path.is_dir():
            error_message = f"Error: Output path '{output_path}' exists but is not a directory."
            logger.error(error_message)
            raise RuntimeError(error_message)

        return True

    def create_canvas(self, output_filename, page_size=A4):
        """
        Create a ReportLab canvas for the output file.

        Args:
            output_filename (str): Path where the PDF will be saved
            page_size: Page size in points (default: A4)

        Returns:
            Canvas: Configured canvas
        """
        self.ensure_output_directory(output_filename)

        c = canvas.Canvas(str(output_filename), pagesize=page_size)
        c.setTitle(self.title)
        c.setAuthor(self.author)
        c.setSubject(f"Generated {self.get_timestamp()}")
        logger.debug(f"Created canvas: {output_filename}, page_size: {page_size}")
        return c

    def get_timestamp(self):
        """
        Returns:
            str: Current time as 'YYYY-MM-DD HH:MM:SS'
        """
        return datetime.datetime.now().strftime('%Y-%m-%d %H:%M:%S')

    def generate_report(self, *args, **kwargs):
        """
        Raises:
            NotImplementedError: This method must be implemented by subclasses
        """
        raise NotImplementedError("Subclasses must implement generate_report method")
