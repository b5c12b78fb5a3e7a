"""
Version management for the Escalas application.
"""

__version__ = "1.0.0"


def get_version():
    """Get current application version."""
    return __version__
