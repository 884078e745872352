"""
Reporting exceptions.
"""

from core.services.exceptions import ServiceError


class ReportingError(ServiceError):
    """Base exception for PDF report generation."""
    pass


class FontUnavailable(ReportingError):
    """
    Raised when a display font cannot be registered.

    Example:
        The bundled TrueType file is missing or cannot be parsed.
    """
    pass
