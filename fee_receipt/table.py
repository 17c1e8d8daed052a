"""
Generic bordered table.

A ``TableSpec`` describes the grid (column widths, row height, header labels,
body rows, origin) and ``draw_table`` paints it: outer border, tinted header,
zebra stripes, cell text and the full set of grid lines.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence, Tuple, Union

from reportlab.lib.colors import Color

from .errors import InvalidSpec
from .page import ReceiptPage
from .styles import DEFAULT_STYLE, ReceiptStyle, ensure_fonts

LEFT = 'left'
CENTER = 'center'
RIGHT = 'right'


@dataclass(frozen=True)
class Cell:
    """Body cell with its own formatting.

    ``label`` is drawn bold in the primary colour ahead of ``text``, used for
    rows such as "Amount in Words: ...".
    """

    text: str = ''
    align: Optional[str] = None
    bold: bool = False
    color: Optional[Color] = None
    label: str = ''


CellValue = Union[str, Cell]


@dataclass(frozen=True)
class TableSpec:
    column_widths: Sequence[float]
    headers: Sequence[str]
    rows: Sequence[Sequence[CellValue]] = ()
    x: float = 0
    y: float = 0  # top edge
    row_height: float = 20
    # one flag per body row; None stripes every odd row
    stripes: Optional[Sequence[bool]] = None
    align: Optional[Sequence[str]] = None
    row_fills: Mapping[int, Color] = field(default_factory=dict)
    border_color: Optional[Color] = None
    header_fill: Optional[Color] = None
    stripe_fill: Optional[Color] = None

    @property
    def width(self):
        return sum(self.column_widths)

    @property
    def height(self):
        return self.row_height * (1 + len(self.rows))

    @property
    def bottom(self):
        return self.y - self.height

    def column_edges(self) -> Tuple[float, ...]:
        edges = [self.x]
        for w in self.column_widths:
            edges.append(edges[-1] + w)
        return tuple(edges)

    def row_edges(self) -> Tuple[float, ...]:
        return tuple(self.y - i * self.row_height for i in range(len(self.rows) + 2))

    def is_striped(self, index):
        if self.stripes is None:
            return index % 2 == 1
        return bool(self.stripes[index])

    def validate(self):
        cols = len(self.column_widths)
        if cols == 0:
            raise InvalidSpec("table needs at least one column")
        if len(self.headers) != cols:
            raise InvalidSpec(f"{len(self.headers)} header labels for {cols} columns")
        for i, w in enumerate(self.column_widths):
            if w <= 0:
                raise InvalidSpec(f"column {i} has non-positive width {w}")
        if self.row_height <= 0:
            raise InvalidSpec(f"non-positive row height {self.row_height}")
        for i, row in enumerate(self.rows):
            if len(row) != cols:
                raise InvalidSpec(f"row {i} has {len(row)} cells for {cols} columns")
        if self.stripes is not None and len(self.stripes) != len(self.rows):
            raise InvalidSpec(f"{len(self.stripes)} stripe flags for {len(self.rows)} rows")
        if self.align is not None:
            if len(self.align) != cols:
                raise InvalidSpec(f"{len(self.align)} alignments for {cols} columns")
            for a in self.align:
                if a not in (LEFT, CENTER, RIGHT):
                    raise InvalidSpec(f"unknown alignment {a!r}")
        for index in self.row_fills:
            if not 0 <= index < len(self.rows):
                raise InvalidSpec(f"row fill for missing row {index}")


def draw_table(page: ReceiptPage, spec: TableSpec, style: Optional[ReceiptStyle] = None) -> float:
    """Draw ``spec`` on ``page`` and return the y of the table's bottom edge."""
    spec.validate()
    style = style or page.style or DEFAULT_STYLE
    ensure_fonts(style)
    palette = style.palette
    border = spec.border_color or palette.primary
    header_fill = spec.header_fill or palette.header_fill
    stripe_fill = spec.stripe_fill or palette.stripe_fill
    h = spec.row_height
    cols = spec.column_edges()
    rows = spec.row_edges()

    # Border and header tint
    page.draw_rect(spec.x, spec.bottom, spec.width, spec.height,
                   stroke=border, stroke_w=style.table_stroke)
    page.draw_rect(spec.x, spec.y - h, spec.width, h, fill=header_fill)

    # Row fills go first so the grid stays on top
    for i in range(len(spec.rows)):
        fill = spec.row_fills.get(i)
        if fill is None and spec.is_striped(i):
            fill = stripe_fill
        if fill is not None:
            page.draw_rect(spec.x, rows[i + 1] - h, spec.width, h, fill=fill)

    # Header labels
    baseline = spec.y - h + style.text_offset
    for label, left, w in zip(spec.headers, cols, spec.column_widths):
        page.draw_text(label, left + w / 2, baseline, style.font_bold,
                       style.font_size, palette.primary, align=CENTER)

    # Body cells
    for i, row in enumerate(spec.rows):
        baseline = rows[i + 1] - h + style.text_offset
        for j, value in enumerate(row):
            default_align = spec.align[j] if spec.align else LEFT
            _draw_cell(page, style, value, cols[j], spec.column_widths[j], baseline, default_align)

    # Grid
    for x in cols:
        page.draw_line(x, spec.y, x, spec.bottom, border, style.table_stroke)
    for y in rows:
        page.draw_line(spec.x, y, spec.x + spec.width, y, border, style.table_stroke)

    return spec.bottom


def _draw_cell(page, style, value, left, width, baseline, default_align):
    cell = value if isinstance(value, Cell) else Cell(text=value or '')
    align = cell.align or default_align
    font = style.font_bold if cell.bold else style.font
    color = cell.color or style.palette.ink
    x = left + style.cell_inset

    if cell.label:
        page.draw_text(cell.label, x, baseline, style.font_bold, style.font_size,
                       style.palette.primary)
        x += page.text_width(cell.label, style.font_bold, style.font_size) + style.cell_inset
        align = LEFT

    # Overlong text is not wrapped or clipped, it runs past the column edge
    if align == CENTER:
        page.draw_text(cell.text, left + width / 2, baseline, font, style.font_size, color, align=CENTER)
    elif align == RIGHT:
        page.draw_text(cell.text, left + width - style.cell_inset, baseline, font,
                       style.font_size, color, align=RIGHT)
    else:
        page.draw_text(cell.text, x, baseline, font, style.font_size, color)
