"""
PDF Styling

Provides paragraph styles for the résumé report.
"""

from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.enums import TA_CENTER, TA_LEFT, TA_RIGHT
from reportlab.lib import colors

from .fonts import FALLBACK_FONT_NAME

PLACEHOLDER_COLOR = colors.HexColor('#888888')
RULE_COLOR = colors.HexColor('#000000')


def get_report_styles(font_name=FALLBACK_FONT_NAME):
    """
    Get résumé report styles.

    Args:
        font_name: Registered font used for every style

    Returns:
        Dictionary of ParagraphStyle objects
    """
    styles = getSampleStyleSheet()

    custom_styles = {
        'ResumeTitle': ParagraphStyle(
            'ResumeTitle',
            parent=styles['Title'],
            fontSize=20,
            leading=26,
            textColor=colors.HexColor('#000000'),
            spaceAfter=6,
            alignment=TA_CENTER,
            fontName=font_name
        ),
        'ResumeDate': ParagraphStyle(
            'ResumeDate',
            parent=styles['Normal'],
            fontSize=10,
            leading=14,
            alignment=TA_RIGHT,
            fontName=font_name
        ),
        'ResumeHeading': ParagraphStyle(
            'ResumeHeading',
            parent=styles['Heading2'],
            fontSize=12,
            leading=16,
            textColor=colors.HexColor('#000000'),
            spaceBefore=10,
            spaceAfter=0,
            alignment=TA_LEFT,
            fontName=font_name
        ),
        'ResumeBody': ParagraphStyle(
            'ResumeBody',
            parent=styles['BodyText'],
            fontSize=11,
            # 11pt text plus a 2pt line gap
            leading=15,
            spaceBefore=0,
            spaceAfter=2,
            alignment=TA_LEFT,
            wordWrap='CJK',
            fontName=font_name
        ),
    }

    # Verbatim lines (LiteralText) break by measured width, not CJK rules
    custom_styles['ResumeLine'] = ParagraphStyle(
        'ResumeLine',
        parent=custom_styles['ResumeBody'],
        wordWrap=None,
    )

    custom_styles['ResumePlaceholder'] = ParagraphStyle(
        'ResumePlaceholder',
        parent=custom_styles['ResumeBody'],
        textColor=PLACEHOLDER_COLOR,
    )

    return custom_styles
