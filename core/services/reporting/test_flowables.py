"""
Tests for verbatim text flowables
"""

from django.test import TestCase
from reportlab.pdfbase.pdfmetrics import stringWidth

from core.services.reporting.flowables import LiteralText, break_to_width
from core.services.reporting.fonts import load_display_font
from core.services.reporting.styles import get_report_styles


class BreakToWidthTestCase(TestCase):
    """Test cases for width-based line breaking"""

    def setUp(self):
        self.font_name = load_display_font(None)

    def test_short_text_is_one_line(self):
        self.assertEqual(break_to_width('氏名　山田', self.font_name, 11, 400), ['氏名　山田'])

    def test_long_japanese_text_breaks_between_characters(self):
        text = '保育' * 60
        lines = break_to_width(text, self.font_name, 11, 200)

        self.assertGreater(len(lines), 1)
        self.assertEqual(''.join(lines), text)
        for line in lines:
            self.assertLessEqual(stringWidth(line, self.font_name, 11), 200)

    def test_latin_text_breaks_after_spaces(self):
        text = 'word ' * 40
        lines = break_to_width(text, self.font_name, 11, 150)

        self.assertEqual(''.join(lines), text)
        for line in lines[:-1]:
            self.assertTrue(line.endswith(' '), repr(line))


class LiteralTextTestCase(TestCase):
    """Test cases for LiteralText"""

    def setUp(self):
        self.style = get_report_styles(load_display_font(None))['ResumeLine']

    def test_whitespace_is_kept(self):
        para = LiteralText('氏名　Yamada  Hanako', self.style)
        self.assertEqual(para.getPlainText(), '氏名　Yamada  Hanako')

    def test_markup_characters_are_literal(self):
        para = LiteralText('A < B & C', self.style)
        self.assertEqual(para.getPlainText(), 'A < B & C')

    def test_wrap_breaks_long_lines(self):
        text = '住所　' + '東京都練馬区' * 30
        para = LiteralText(text, self.style)

        width, height = para.wrap(200, 1000)

        self.assertGreater(height, self.style.leading)
        self.assertEqual(para.getPlainText().replace('\n', ''), text)

    def test_split_across_frames(self):
        text = '経験' * 400
        para = LiteralText(text, self.style)

        parts = para.split(200, self.style.leading * 3)

        self.assertEqual(len(parts), 2)
        self.assertEqual(parts[0].literal + parts[1].literal, text)

    def test_split_returns_nothing_when_it_fits(self):
        para = LiteralText('短い行', self.style)
        self.assertEqual(para.split(400, 100), [])
