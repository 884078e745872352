"""
Flowables

Paragraph collapses runs of whitespace, including the ideographic space
(U+3000) used between Japanese labels and values. LiteralText draws text
exactly as given and breaks it by measured width instead.
"""

from xml.sax.saxutils import escape

from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.platypus.xpreformatted import XPreformatted


def break_to_width(text, font_name, font_size, max_width):
    """
    Break text into lines no wider than max_width.

    Breaks after the last ASCII space when the line has one, otherwise
    between characters (the usual rule for Japanese). Joining the result
    gives back the original text.
    """
    lines = []
    current = ''
    for char in text:
        candidate = current + char
        if current and stringWidth(candidate, font_name, font_size) > max_width:
            cut = current.rfind(' ')
            if cut > 0:
                lines.append(current[:cut + 1])
                current = current[cut + 1:] + char
            else:
                lines.append(current)
                current = char
        else:
            current = candidate
    lines.append(current)
    return lines


class LiteralText(XPreformatted):
    """A single line of text whose whitespace is kept verbatim"""

    def __init__(self, text, style):
        self.literal = text
        self._broken_for = None
        XPreformatted.__init__(self, escape(text), style)

    def wrap(self, availWidth, availHeight):
        if availWidth != self._broken_for:
            width = availWidth - self.style.leftIndent - self.style.rightIndent
            self._lines = break_to_width(self.literal, self.style.fontName, self.style.fontSize, width)
            XPreformatted.__init__(self, escape('\n'.join(self._lines)), self.style)
            self._broken_for = availWidth
        return XPreformatted.wrap(self, availWidth, availHeight)

    def split(self, availWidth, availHeight):
        self.wrap(availWidth, availHeight)
        fit = int(availHeight // self.style.leading)
        if fit < 1 or fit >= len(self._lines):
            return []
        return [
            LiteralText(''.join(self._lines[:fit]), self.style),
            LiteralText(''.join(self._lines[fit:]), self.style),
        ]
