"""Turn a composed receipt page into PDF bytes and a file name."""

from __future__ import annotations

import logging
import re
import time
from typing import Optional

from .layout import render_receipt
from .models import ReceiptRecord
from .page import ReceiptPage
from .styles import DEFAULT_STYLE, ReceiptStyle

logger = logging.getLogger(__name__)

DEFAULT_STEM = 'receipt'


def emit(page: ReceiptPage) -> bytes:
    data = page.finish()
    logger.debug('Emitted receipt page (%d bytes)', len(data))
    return data


def suggest_stem(student_name: Optional[str], timestamp: Optional[int] = None) -> str:
    """File stem for a receipt: ``Asha R`` at t=1717200000000 gives ``Asha_R_1717200000000``.

    ``timestamp`` is in milliseconds and defaults to now.
    """
    if timestamp is None:
        timestamp = int(time.time() * 1000)
    name = re.sub(r'\s+', '_', (student_name or '').strip())
    name = re.sub(r'[^A-Za-z0-9_.-]', '', name).strip('.')
    return f'{name or DEFAULT_STEM}_{timestamp}'


def render_to_bytes(record: ReceiptRecord, style: ReceiptStyle = DEFAULT_STYLE) -> bytes:
    return emit(render_receipt(record, style))
