"""
Single-page drawing surface for receipts.

``ReceiptPage`` wraps one reportlab canvas writing into an in-memory buffer and
keeps a display list of every primitive drawn, so layouts can be inspected
without parsing the PDF.
"""

from __future__ import annotations

from io import BytesIO
from typing import Dict, List, NamedTuple, Optional, Tuple

from reportlab.pdfgen import canvas

from .styles import DEFAULT_STYLE, PAGE_SIZE, ReceiptStyle, measure_text_width


class Shape(NamedTuple):
    kind: str  # 'rect' | 'line' | 'ellipse' | 'text'
    coords: Tuple[float, ...]
    text: str = ''
    font: str = ''
    size: float = 0
    fill: object = None
    stroke: object = None
    stroke_w: float = 0


class ReceiptPage:
    def __init__(self, style: ReceiptStyle = DEFAULT_STYLE, title='Fee Receipt'):
        self.style = style
        self.width, self.height = PAGE_SIZE
        self.buffer = BytesIO()
        # invariant=1 pins the creation date and document id for repeatable bytes
        self.c = canvas.Canvas(
            self.buffer,
            pagesize=PAGE_SIZE,
            invariant=1,
            pageCompression=1 if style.compress else 0,
        )
        self.c.setTitle(title)
        self.c.setAuthor(style.letterhead.name)
        self.shapes: List[Shape] = []
        self.tables: Dict[str, object] = {}
        self._data: Optional[bytes] = None

    # ─── DRAWING PRIMITIVES ───

    def draw_rect(self, x, y, w, h, fill=None, stroke=None, stroke_w=0.5):
        self.c.saveState()
        if fill:
            self.c.setFillColor(fill)
        if stroke:
            self.c.setStrokeColor(stroke)
            self.c.setLineWidth(stroke_w)
        self.c.rect(x, y, w, h, fill=1 if fill else 0, stroke=1 if stroke else 0)
        self.c.restoreState()
        self.shapes.append(Shape('rect', (x, y, w, h), fill=fill, stroke=stroke,
                                 stroke_w=stroke_w if stroke else 0))

    def draw_line(self, x1, y1, x2, y2, color, width=0.5):
        self.c.saveState()
        self.c.setStrokeColor(color)
        self.c.setLineWidth(width)
        self.c.line(x1, y1, x2, y2)
        self.c.restoreState()
        self.shapes.append(Shape('line', (x1, y1, x2, y2), stroke=color, stroke_w=width))

    def draw_ellipse(self, cx, cy, rx, ry, fill=None, stroke=None, stroke_w=0.5):
        self.c.saveState()
        if fill:
            self.c.setFillColor(fill)
        if stroke:
            self.c.setStrokeColor(stroke)
            self.c.setLineWidth(stroke_w)
        self.c.ellipse(cx - rx, cy - ry, cx + rx, cy + ry,
                       fill=1 if fill else 0, stroke=1 if stroke else 0)
        self.c.restoreState()
        self.shapes.append(Shape('ellipse', (cx, cy, rx, ry), fill=fill, stroke=stroke,
                                 stroke_w=stroke_w if stroke else 0))

    def draw_text(self, text, x, y, font=None, size=None, color=None, align='left'):
        """Draw ``text`` with its baseline at ``y``; ``x`` is the anchor for ``align``."""
        font = font or self.style.font
        size = size or self.style.font_size
        color = color or self.style.palette.ink
        if align == 'center':
            x -= self.text_width(text, font, size) / 2
        elif align == 'right':
            x -= self.text_width(text, font, size)
        if text:
            self.c.saveState()
            self.c.setFont(font, size)
            self.c.setFillColor(color)
            self.c.drawString(x, y, text)
            self.c.restoreState()
        self.shapes.append(Shape('text', (x, y), text=text, font=font, size=size, fill=color))

    def text_width(self, text, font=None, size=None):
        return measure_text_width(text, font or self.style.font, size or self.style.font_size)

    # ─── INSPECTION ───

    def find(self, kind):
        return [s for s in self.shapes if s.kind == kind]

    def texts(self):
        return [s.text for s in self.shapes if s.kind == 'text']

    @property
    def finished(self):
        return self._data is not None

    def finish(self) -> bytes:
        """Close the page and return the PDF; later calls return the same bytes."""
        if self._data is None:
            self.c.showPage()
            self.c.save()
            self._data = self.buffer.getvalue()
        return self._data
