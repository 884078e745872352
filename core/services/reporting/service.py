"""
Core Report Service

Renders registered report templates to PDF with ReportLab Platypus.
"""

import logging
from io import BytesIO

from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate

from .registry import get_template

logger = logging.getLogger(__name__)

# 50pt on every side
PAGE_MARGIN = 50


class ReportService:
    """
    Service for PDF report generation.

    Rendering is synchronous and single-shot: the story is built from the
    context, laid out on A4 pages (overflow continues on new pages) and
    written to the output in one pass. Nothing is persisted.

    Usage:
        service = ReportService()
        pdf_bytes = service.render('resume.v1', submission.to_report_context())
    """

    def render(self, report_key: str, context: dict) -> bytes:
        """
        Render a report to PDF bytes.

        Args:
            report_key: Report template identifier (e.g., 'resume.v1')
            context: Data consumed by the template

        Returns:
            PDF content as bytes

        Raises:
            KeyError: If report_key is not registered
        """
        buffer = BytesIO()
        try:
            self.render_to(report_key, context, buffer)
            pdf_bytes = buffer.getvalue()
        finally:
            buffer.close()

        logger.info(f"Generated report {report_key} ({len(pdf_bytes)} bytes)")
        return pdf_bytes

    def render_to(self, report_key: str, context: dict, output) -> None:
        """
        Render a report into a writable binary stream.

        Args:
            report_key: Report template identifier
            context: Data consumed by the template
            output: File-like object the PDF is written to

        Raises:
            KeyError: If report_key is not registered
            Exception: Any layout or write failure is propagated unchanged
        """
        template = get_template(report_key)

        doc = SimpleDocTemplate(
            output,
            pagesize=A4,
            leftMargin=PAGE_MARGIN,
            rightMargin=PAGE_MARGIN,
            topMargin=PAGE_MARGIN,
            bottomMargin=PAGE_MARGIN,
            title=context.get('document_title', ''),
        )

        try:
            story = template.build_story(context)

            if hasattr(template, 'draw_page'):
                def on_page(canvas, doc_obj):
                    template.draw_page(canvas, doc_obj, context)

                doc.build(story, onFirstPage=on_page, onLaterPages=on_page)
            else:
                doc.build(story)
        except Exception as e:
            logger.error(f"Failed to render report {report_key}: {e}", exc_info=True)
            raise
