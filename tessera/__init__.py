"""Tessera is a behavior-composition layer for interactive UI elements."""

__version__ = '0.1.0'


def setup() -> None:
    """Configure Tessera using the settings module."""
    from tessera.conf import settings
    from tessera.utils.log import configure_logging

    configure_logging(settings.LOGGING)
