"""
Reports package

Contains report templates for PDF generation.
"""

from core.services.reporting.registry import register_template, is_registered
from .templates.resume_v1 import ResumeReportV1

RESUME_REPORT_KEY = 'resume.v1'


def register_all_templates():
    """Register all available report templates"""
    if not is_registered(RESUME_REPORT_KEY):
        register_template(RESUME_REPORT_KEY, ResumeReportV1)


# Auto-register templates when module is imported
register_all_templates()
