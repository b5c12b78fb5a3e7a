"""Exception hierarchy for schedule generation and export."""


class EscalasError(Exception):
    """Base exception for all Escalas errors."""


class ValidationError(EscalasError):
    """Raised when the date range is missing, malformed or not strictly ordered."""


class EmptySelectionError(EscalasError):
    """Raised when a schedule or export is requested with no apartments selected."""


class ExportFailure(EscalasError):
    """Raised when the PDF document could not be serialized."""
