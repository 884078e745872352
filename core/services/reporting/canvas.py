"""
Canvas Helpers

Per-page decorations drawn outside the flowable story.
"""

from reportlab.lib import colors


def draw_page_number(canvas, doc):
    """
    Draw the page number centered in the bottom margin.

    Args:
        canvas: ReportLab canvas object
        doc: ReportLab document object
    """
    page_num = canvas.getPageNumber()

    canvas.saveState()
    canvas.setFont('Helvetica', 8)
    canvas.setFillColor(colors.HexColor('#666666'))
    canvas.drawCentredString(
        doc.pagesize[0] / 2,
        doc.bottomMargin / 2,
        f"- {page_num} -"
    )
    canvas.restoreState()
