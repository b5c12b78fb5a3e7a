"""
Main application entry point for Escalas.
"""
import sys

from app.cli import run_cli
from config.settings import ConfigManager
from utils.logging_config import get_logger, setup_logging
from utils.sentry_config import add_breadcrumb, capture_exception_with_context, initialize_sentry

logger = get_logger(__name__)


def main():
    """Main entry point for the application."""
    settings = ConfigManager.get_instance().settings
    setup_logging(log_level=settings.get("log_level", "INFO"))

    sentry_initialized = initialize_sentry()
    if sentry_initialized:
        add_breadcrumb("Application started", category="app", level="info")

    try:
        exit_code = run_cli()
    except Exception as e:
        logger.error(f"Unhandled exception in main: {e}", exc_info=True)
        if sentry_initialized:
            capture_exception_with_context(e, mode="cli", args=str(sys.argv))
        raise

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
