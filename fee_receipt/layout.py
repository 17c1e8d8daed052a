"""
Receipt page composition.

``render_receipt`` lays the page out top to bottom with a single vertical
cursor: letterhead, title, the four tables, signatures and footer. Each
``*_table`` function turns the record into a ``TableSpec`` anchored at the
cursor and can be used on its own.
"""

from __future__ import annotations

import logging

from .models import DENOMINATIONS, ReceiptRecord
from .page import ReceiptPage
from .styles import DEFAULT_STYLE, ReceiptStyle, ensure_fonts
from .table import CENTER, RIGHT, Cell, TableSpec, draw_table

logger = logging.getLogger(__name__)

# Capacity of the fees table; later items are dropped
MAX_FEE_ROWS = 5

STUDENT_COLUMNS = (('NAME', 100), ('NUMBER', 80), ('TERM', 80), ('CLASS', 80), ('DATE', 135))
PAYMENT_COLUMNS = (('By cash / cheque / D.D No.', 165), ('Drawn', 170), ('Branch', 170))
FEES_COLUMNS = (('Fees', 395), ('Amount', 120))
DENOMINATION_COLUMNS = (('Denomination', 115), ('Count', 115), ('Amount', 115))

TITLE = 'RECEIPT'
TOTAL_LABEL = 'Total Amount:'
WORDS_LABEL = 'Amount in Words:'
OFFICIAL_SIGNATURE = 'Signature of the Official'
DEPOSITOR_SIGNATURE = 'Signature of Depositor'

# Vertical gaps between consecutive elements
TABLE_GAP = 15
SECTION_GAP = 25


def _split(columns):
    return [label for label, _ in columns], [width for _, width in columns]


def student_table(record: ReceiptRecord, x, y, style=DEFAULT_STYLE) -> TableSpec:
    headers, widths = _split(STUDENT_COLUMNS)
    row = [record.student_name, record.number, record.term, record.class_name, record.date]
    return TableSpec(widths, headers, [row], x=x, y=y, row_height=style.row_height)


def payment_table(record: ReceiptRecord, x, y, style=DEFAULT_STYLE) -> TableSpec:
    headers, widths = _split(PAYMENT_COLUMNS)
    row = [record.payment_label, record.drawn, record.branch]
    return TableSpec(widths, headers, [row], x=x, y=y, row_height=style.row_height,
                     align=[CENTER] * len(widths))


def fees_table(record: ReceiptRecord, x, y, style=DEFAULT_STYLE) -> TableSpec:
    """Fee items (at most ``MAX_FEE_ROWS``) followed by the total and amount-in-words rows."""
    headers, widths = _split(FEES_COLUMNS)
    items = record.fee_items[:MAX_FEE_ROWS]
    if len(record.fee_items) > MAX_FEE_ROWS:
        logger.warning("Fees table holds %d rows, dropping %d of %d fee items",
                       MAX_FEE_ROWS, len(record.fee_items) - MAX_FEE_ROWS, len(record.fee_items))

    primary = style.palette.primary
    rows = [[item.label, item.amount] for item in items]
    rows.append([
        Cell(TOTAL_LABEL, align=RIGHT, bold=True, color=primary),
        Cell(record.total_amount, bold=True, color=primary),
    ])
    rows.append([Cell(record.amount_in_words, label=WORDS_LABEL, color=primary), ''])

    stripes = [i % 2 == 1 for i in range(len(items))] + [False, False]
    return TableSpec(widths, headers, rows, x=x, y=y, row_height=style.row_height,
                     stripes=stripes, row_fills={len(items): style.palette.header_fill})


def denomination_table(record: ReceiptRecord, x, y, style=DEFAULT_STYLE) -> TableSpec:
    """One row per fixed denomination, whatever the record supplies."""
    headers, widths = _split(DENOMINATION_COLUMNS)
    rows = []
    for value in DENOMINATIONS:
        entry = record.denomination(value)
        if entry is None:
            rows.append([str(value), '', ''])
        else:
            rows.append([str(value), entry.count, entry.amount])
    return TableSpec(widths, headers, rows, x=x, y=y, row_height=style.row_height)


# ─── PAGE FURNITURE ───

def draw_letterhead(page: ReceiptPage, style: ReceiptStyle):
    """Page border, banner with school name and contacts, logo placeholder.

    Returns the y of the banner's bottom edge.
    """
    m = style.margin
    W, H = page.width, page.height
    palette = style.palette
    head = style.letterhead

    page.draw_rect(m, m, W - 2 * m, H - 2 * m, stroke=palette.primary, stroke_w=style.border_stroke)

    banner_bottom = H - m - style.banner_height
    page.draw_rect(m, banner_bottom, W - 2 * m, style.banner_height, fill=palette.primary)

    logo_r = 20
    logo_x = m + 35
    logo_y = H - m - style.banner_height / 2 + 5
    page.draw_ellipse(logo_x, logo_y, logo_r, logo_r, stroke=palette.logo_stroke, stroke_w=1.2)

    name_x = logo_x + logo_r + 15
    page.draw_text(head.name, name_x, H - m - 23, style.font_bold, 16, palette.on_primary)
    page.draw_text(head.address, name_x, H - m - 38, style.font, 10, palette.on_primary)
    page.draw_text(head.phone, W - m - 180, H - m - 38, style.font, 10, palette.on_primary)
    return banner_bottom


def draw_divider(page: ReceiptPage, y, style: ReceiptStyle):
    m = style.margin
    page.draw_line(m + 10, y, page.width - m - 10, y, style.palette.primary, style.divider_stroke)


def draw_signatures(page: ReceiptPage, y, style: ReceiptStyle):
    """Two signature slots below ``y``: the official on the left, the depositor on the right."""
    m = style.margin
    W = page.width
    line_y = y - 25
    label_y = y - 40
    for label, x1, x2 in ((OFFICIAL_SIGNATURE, m + 20, m + 180),
                          (DEPOSITOR_SIGNATURE, W - m - 200, W - m - 40)):
        page.draw_line(x1, line_y, x2, line_y, style.palette.primary, style.table_stroke)
        page.draw_text(label, x1, label_y, style.font_bold, style.font_size, style.palette.ink)
    return label_y


def draw_footer(page: ReceiptPage, style: ReceiptStyle):
    m = style.margin
    page.draw_text(style.letterhead.footer, m + 10, m + 15, style.font, 8, style.palette.primary)


# ─── COMPOSITION ───

def render_receipt(record: ReceiptRecord, style: ReceiptStyle = DEFAULT_STYLE) -> ReceiptPage:
    """Lay out one receipt page for ``record``.

    Missing fields print as blanks and nothing is validated; the only failures
    are unusable fonts or table geometry, raised before anything is drawn.
    """
    ensure_fonts(style)
    record = record or ReceiptRecord()
    page = ReceiptPage(style)
    x = style.margin + 10

    divider_y = page.height - style.margin - style.banner_height - 15
    title_y = divider_y - 20

    # Place every table first so bad geometry fails before the first stroke
    y = title_y - 20
    for name, build, gap in (('student', student_table, TABLE_GAP),
                             ('payment', payment_table, SECTION_GAP),
                             ('fees', fees_table, SECTION_GAP),
                             ('denominations', denomination_table, TABLE_GAP)):
        spec = build(record, x, y, style)
        spec.validate()
        page.tables[name] = spec
        y = spec.bottom - gap
    signature_y = y

    draw_letterhead(page, style)
    draw_divider(page, divider_y, style)
    page.draw_text(TITLE, page.width / 2, title_y, style.font_bold, 18, style.palette.primary, align=CENTER)
    for spec in page.tables.values():
        draw_table(page, spec, style)

    draw_divider(page, signature_y, style)
    draw_signatures(page, signature_y, style)
    draw_footer(page, style)
    return page
