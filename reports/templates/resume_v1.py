"""
Resume Report Template (v1)

JIS-style résumé (履歴書) layout: a title with a date stamp, then four fixed
sections, each introduced by a heading and a horizontal rule.
"""

from datetime import date
from xml.sax.saxutils import escape

from reportlab.platypus import Paragraph, Spacer
from reportlab.platypus.flowables import HRFlowable

from core.services.reporting.canvas import draw_page_number
from core.services.reporting.flowables import LiteralText
from core.services.reporting.fonts import register_fallback_font
from core.services.reporting.styles import get_report_styles, RULE_COLOR
from .formatting import format_as_of_date, format_birth_date

TITLE = '履　歴　書'

# Full-width space between a label and its value
LABEL_SEPARATOR = '　'

SECTION_BASIC_INFO = '基本情報'
SECTION_EXPERIENCE = '職歴・保育経験'
SECTION_MOTIVATION = '志望動機・自己PR等'
SECTION_REQUESTS = '本人希望記入欄'

LABEL_NAME = '氏名'
LABEL_FURIGANA = 'ふりがな'
LABEL_BIRTH = '生年月日'
LABEL_ADDRESS = '住所'
LABEL_PHONE = '電話番号'
LABEL_EMAIL = 'メールアドレス'
LABEL_DESIRED_POSITION = '希望職種・勤務形態'

PLACEHOLDER_EXPERIENCE = '（ここにこれまでの保育園・勤務経験を記入）'
PLACEHOLDER_PR_TEXT = '（ここに応募先への志望動機や自己PRを記入）'
PLACEHOLDER_REQUESTS = '（勤務時間・通勤時間・扶養内勤務希望などがあれば記入）'


def _is_blank(value) -> bool:
    return not value or not value.strip()


class ResumeReportV1:
    """Template for résumé reports version 1"""

    def build_story(self, context: dict) -> list:
        """
        Build the PDF story from context data.

        Expected context structure:
        {
            'name', 'furigana', 'email', 'phone', 'address': str,
            'birth': str (raw form value),
            'desired_position': str (optional),
            'experience': str (optional, multi-line),
            'pr_text': str (optional, multi-line),
            'today': date (render date, defaults to date.today()),
            'font_name': str (registered font, defaults to the CID fallback)
        }
        """
        self.styles = get_report_styles(context.get('font_name') or register_fallback_font())
        story = []

        # Title and date stamp
        today = context.get('today') or date.today()
        story.append(LiteralText(TITLE, self.styles['ResumeTitle']))
        story.append(Paragraph(format_as_of_date(today), self.styles['ResumeDate']))
        story.append(self._rule(0.7, space_before=3, space_after=6))

        # Basic information
        self._add_heading(story, SECTION_BASIC_INFO)
        self._add_labeled_line(story, LABEL_NAME, context.get('name'))
        self._add_labeled_line(story, LABEL_FURIGANA, context.get('furigana'))
        self._add_labeled_line(story, LABEL_BIRTH, format_birth_date(context.get('birth')))
        self._add_labeled_line(story, LABEL_ADDRESS, context.get('address'))
        self._add_labeled_line(story, LABEL_PHONE, context.get('phone'))
        self._add_labeled_line(story, LABEL_EMAIL, context.get('email'))

        # Work history and nursery experience
        self._add_heading(story, SECTION_EXPERIENCE)
        desired_position = context.get('desired_position')
        if not _is_blank(desired_position):
            self._add_labeled_line(story, LABEL_DESIRED_POSITION, desired_position)
            story.append(Spacer(1, 6))
        self._add_free_text(story, context.get('experience'), PLACEHOLDER_EXPERIENCE)

        # Motivation and self-promotion
        self._add_heading(story, SECTION_MOTIVATION)
        self._add_free_text(story, context.get('pr_text'), PLACEHOLDER_PR_TEXT)

        # Personal requests are left for handwriting
        self._add_heading(story, SECTION_REQUESTS)
        story.append(Paragraph(PLACEHOLDER_REQUESTS, self.styles['ResumePlaceholder']))

        story.append(Spacer(1, 36))
        return story

    def draw_page(self, canvas, doc, context: dict):
        """Number continuation pages when the free text overflows"""
        if canvas.getPageNumber() > 1:
            draw_page_number(canvas, doc)

    def _rule(self, thickness, space_before=2, space_after=4):
        return HRFlowable(
            width='100%',
            thickness=thickness,
            color=RULE_COLOR,
            spaceBefore=space_before,
            spaceAfter=space_after,
        )

    def _add_heading(self, story, title):
        story.append(Paragraph(escape(title), self.styles['ResumeHeading']))
        story.append(self._rule(0.6))

    def _add_labeled_line(self, story, label, value):
        text = f"{label}{LABEL_SEPARATOR}{value or ''}"
        story.append(LiteralText(text, self.styles['ResumeLine']))

    def _add_free_text(self, story, text, placeholder):
        if _is_blank(text):
            story.append(Paragraph(placeholder, self.styles['ResumePlaceholder']))
            return

        # One paragraph per line keeps the submitter's line breaks
        for line in text.strip('\r\n').splitlines():
            if line.strip():
                story.append(LiteralText(line, self.styles['ResumeLine']))
            else:
                story.append(Spacer(1, self.styles['ResumeBody'].leading))
