import os

import sentry_sdk
from dotenv import load_dotenv
from sentry_sdk.integrations.logging import LoggingIntegration

from utils.logging_config import get_logger
from version import get_version

logger = get_logger(__name__)

# Validation errors are user input, not defects worth reporting
IGNORED_EXCEPTIONS = ("ValidationError", "EmptySelectionError")


def initialize_sentry():
    """
    Initialize Sentry for error monitoring.

    Environment variables (a .env file is honoured):
    - SENTRY_DSN: Sentry project DSN; monitoring stays off when unset
    - SENTRY_ENVIRONMENT: Environment name (e.g., 'production', 'development')
    - SENTRY_TRACES_SAMPLE_RATE: Sample rate for performance monitoring (0.0 to 1.0)

    Returns:
        bool: True if Sentry was initialized
    """
    load_dotenv()

    dsn = os.getenv('SENTRY_DSN')
    if not dsn:
        logger.info("Sentry DSN not configured. Skipping Sentry initialization.")
        return False

    environment = os.getenv('SENTRY_ENVIRONMENT', 'development')
    try:
        traces_sample_rate = float(os.getenv('SENTRY_TRACES_SAMPLE_RATE', '0.0'))
    except ValueError:
        logger.warning("Invalid SENTRY_TRACES_SAMPLE_RATE, using 0.0")
        traces_sample_rate = 0.0

    logging_integration = LoggingIntegration(
        level=None,  # breadcrumbs from all log levels
        event_level=None  # don't send log records as events
    )

    try:
        sentry_sdk.init(
            dsn=dsn,
            environment=environment,
            release=f"escalas@{get_version()}",
            traces_sample_rate=traces_sample_rate,
            integrations=[logging_integration],
            attach_stacktrace=True,
            send_default_pii=False,
            max_breadcrumbs=50,
            before_send=before_send_filter,
        )
    except Exception as e:
        logger.error(f"Failed to initialize Sentry: {e}")
        return False

    logger.info(f"Sentry initialized successfully. Environment: {environment}, Sample rate: {traces_sample_rate}")
    return True


def before_send_filter(event, hint):
    """Drop events raised for invalid user input."""
    if 'exc_info' in hint:
        exc_type = hint['exc_info'][0]
        if exc_type is not None and exc_type.__name__ in IGNORED_EXCEPTIONS:
            return None
    return event


def capture_exception_with_context(exception, **context):
    """
    Capture an exception with additional tags.

    Args:
        exception: The exception to capture
        **context: Tags to attach to the event
    """
    if not sentry_sdk.is_initialized():
        return
    with sentry_sdk.new_scope() as scope:
        for key, value in context.items():
            scope.set_tag(key, value)
        sentry_sdk.capture_exception(exception)


def add_breadcrumb(message, category=None, level='info', data=None):
    """
    Add a breadcrumb to track user actions.

    Args:
        message: Breadcrumb message
        category: Category of the breadcrumb
        level: Log level
        data: Additional data
    """
    if not sentry_sdk.is_initialized():
        return
    sentry_sdk.add_breadcrumb({
        'message': message,
        'category': category or 'default',
        'level': level,
        'data': data or {}
    })
