"""
Display Font Selection

Registers the bundled Japanese TrueType font when it is available and falls
back to ReportLab's built-in Japanese CID font otherwise.
"""

import logging
from pathlib import Path

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.cidfonts import UnicodeCIDFont
from reportlab.pdfbase.ttfonts import TTFont

from .exceptions import FontUnavailable

logger = logging.getLogger(__name__)

BUNDLED_FONT_NAME = 'NotoSansJP'
FALLBACK_FONT_NAME = 'HeiseiKakuGo-W5'


def register_truetype_font(font_name: str, font_path) -> str:
    """
    Register a TrueType font with ReportLab.

    Args:
        font_name: Name to register the font under
        font_path: Path to the .ttf file

    Returns:
        The registered font name

    Raises:
        FontUnavailable: If the file is missing or cannot be parsed
    """
    path = Path(font_path)
    if not path.is_file():
        raise FontUnavailable(f"Font file not found: {path}")

    try:
        pdfmetrics.registerFont(TTFont(font_name, str(path)))
    except Exception as e:
        raise FontUnavailable(f"Could not load font {path}: {e}") from e

    return font_name


def register_fallback_font() -> str:
    """Register and return the built-in CID font (no font file required)."""
    if FALLBACK_FONT_NAME not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(UnicodeCIDFont(FALLBACK_FONT_NAME))
    return FALLBACK_FONT_NAME


def load_display_font(font_path) -> str:
    """
    Select the font used for the résumé body.

    A missing or broken font file is never an error: the built-in fallback
    font is returned instead.

    Args:
        font_path: Path to the bundled TrueType font (may be None)

    Returns:
        Name of a registered font
    """
    if font_path:
        try:
            return register_truetype_font(BUNDLED_FONT_NAME, font_path)
        except FontUnavailable as e:
            logger.warning(f"{e}; using {FALLBACK_FONT_NAME}")
    return register_fallback_font()
