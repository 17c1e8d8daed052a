"""Exceptions raised by the receipt renderer and its helpers."""

from __future__ import annotations


class ReceiptError(Exception):
    """Base class for every error raised by ``fee_receipt``."""


class InvalidSpec(ReceiptError, ValueError):
    """A table description whose geometry cannot be drawn."""


class FontMetricsUnavailable(ReceiptError, LookupError):
    """A font face required for text measurement could not be loaded."""

    def __init__(self, font_name):
        super().__init__(f'font metrics unavailable for {font_name!r}')
        self.font_name = font_name


class ReconciliationError(ReceiptError, ValueError):
    """Fee and denomination sums disagree with the receipt total."""

    def __init__(self, problems):
        super().__init__('; '.join(problems))
        self.problems = list(problems)


class ReceiptNotFound(ReceiptError, FileNotFoundError):
    """A stored receipt file does not exist or the name is not acceptable."""

    def __init__(self, filename):
        super().__init__(f'receipt not found: {filename}')
        self.filename = filename


__all__ = [
    'ReceiptError',
    'InvalidSpec',
    'FontMetricsUnavailable',
    'ReconciliationError',
    'ReceiptNotFound',
]
