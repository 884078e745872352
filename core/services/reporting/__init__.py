"""
Core Report Service

Provides PDF report generation from registered story templates.
"""

from .service import ReportService

__all__ = ['ReportService']
