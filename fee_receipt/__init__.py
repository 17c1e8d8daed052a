"""
School fee receipt renderer.

Quickstart::

    from fee_receipt import ReceiptRecord, render_to_bytes

    record = ReceiptRecord.from_dict({'studentName': 'Asha R', 'totalAmount': '5000'})
    pdf = render_to_bytes(record)
"""

from .emitter import emit, render_to_bytes, suggest_stem
from .errors import (
    FontMetricsUnavailable,
    InvalidSpec,
    ReceiptError,
    ReceiptNotFound,
    ReconciliationError,
)
from .layout import MAX_FEE_ROWS, render_receipt
from .models import DENOMINATIONS, DenominationCount, FeeItem, PaymentMethod, ReceiptRecord
from .page import ReceiptPage
from .styles import DEFAULT_STYLE, ReceiptStyle, measure_text_width
from .table import Cell, TableSpec, draw_table

__version__ = '0.1.0'

__all__ = [
    'Cell',
    'DEFAULT_STYLE',
    'DENOMINATIONS',
    'DenominationCount',
    'FeeItem',
    'FontMetricsUnavailable',
    'InvalidSpec',
    'MAX_FEE_ROWS',
    'PaymentMethod',
    'ReceiptError',
    'ReceiptNotFound',
    'ReceiptPage',
    'ReceiptRecord',
    'ReceiptStyle',
    'ReconciliationError',
    'TableSpec',
    'draw_table',
    'emit',
    'measure_text_width',
    'render_receipt',
    'render_to_bytes',
    'suggest_stem',
    '__version__',
]
