"""
Palette, layout constants and font metrics shared by every receipt render.

Everything here is read-only: a render receives a ``ReceiptStyle`` value and
never mutates it, so one style can be used by concurrent renders.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from reportlab.lib.colors import Color
from reportlab.pdfbase import pdfmetrics

from .errors import FontMetricsUnavailable

# ─── PAGE GEOMETRY ───
PAGE_SIZE = (595, 842)

# ─── COLOR PALETTE ───
PRIMARY = Color(0.18, 0.36, 0.7)
HEADER_FILL = Color(0.93, 0.96, 1)
STRIPE_FILL = Color(0.97, 0.98, 1)
INK = Color(0, 0, 0)
ON_PRIMARY = Color(1, 1, 1)
LOGO_STROKE = Color(0.8, 0.2, 0.2)

# ─── FONTS ───
FONT_REGULAR = 'Helvetica'
FONT_BOLD = 'Helvetica-Bold'


@dataclass(frozen=True)
class Palette:
    primary: Color = field(default_factory=lambda: PRIMARY)
    header_fill: Color = field(default_factory=lambda: HEADER_FILL)
    stripe_fill: Color = field(default_factory=lambda: STRIPE_FILL)
    ink: Color = field(default_factory=lambda: INK)
    on_primary: Color = field(default_factory=lambda: ON_PRIMARY)
    logo_stroke: Color = field(default_factory=lambda: LOGO_STROKE)


@dataclass(frozen=True)
class Letterhead:
    """School identity printed in the banner and footer."""

    name: str = 'JOYFUL KINGDOM OF MONTESSORRI'
    address: str = 'Kamatchiamman Nager, Chikkarayapuram, Kovur EB, Chennai - 69'
    phone: str = 'Ph : 7904821929 / 9176562749'
    footer: str = 'For queries: joyfulkingdomschool@gmail.com | www.joyfulkingdom.com'


@dataclass(frozen=True)
class ReceiptStyle:
    """Immutable bundle of everything a render needs besides the record."""

    palette: Palette = field(default_factory=Palette)
    letterhead: Letterhead = field(default_factory=Letterhead)
    font: str = FONT_REGULAR
    font_bold: str = FONT_BOLD
    font_size: float = 10
    margin: float = 20
    banner_height: float = 40
    row_height: float = 20
    table_stroke: float = 0.8
    border_stroke: float = 2
    divider_stroke: float = 1.5
    # distance from the bottom of a row to the text baseline
    text_offset: float = 6
    cell_inset: float = 5
    compress: bool = False


DEFAULT_STYLE = ReceiptStyle()


def ensure_fonts(style: ReceiptStyle = DEFAULT_STYLE) -> None:
    """Fail fast when either face of ``style`` has no metrics."""
    for name in (style.font, style.font_bold):
        try:
            pdfmetrics.getFont(name)
        except (KeyError, OSError) as exc:
            raise FontMetricsUnavailable(name) from exc


def measure_text_width(text, font=FONT_REGULAR, size=10):
    return pdfmetrics.stringWidth(text, font, size)
