"""
Form-side helpers: amount in words, denomination amounts and total checks.

The renderer never calls these; they belong to whoever builds the record.
"""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Union

from .errors import ReconciliationError
from .models import ReceiptRecord

ONES = [
    '', 'one', 'two', 'three', 'four', 'five', 'six', 'seven', 'eight', 'nine', 'ten',
    'eleven', 'twelve', 'thirteen', 'fourteen', 'fifteen', 'sixteen', 'seventeen',
    'eighteen', 'nineteen',
]
TENS = ['', '', 'twenty', 'thirty', 'forty', 'fifty', 'sixty', 'seventy', 'eighty', 'ninety']

# (digits, scale word) from the left of a nine digit number
INDIAN_GROUPS = ((2, 'crore'), (2, 'lakh'), (2, 'thousand'), (1, 'hundred'), (2, ''))

Number = Union[int, str, Decimal]


def _two_digits(n: int) -> str:
    if n < 20:
        return ONES[n]
    return f'{TENS[n // 10]} {ONES[n % 10]}'.strip()


def _to_decimal(value) -> Optional[Decimal]:
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return Decimal(0)
    try:
        result = Decimal(text)
    except InvalidOperation:
        return None
    return result if result.is_finite() else None


def amount_in_words(value: Number) -> str:
    """Spell a whole rupee amount in the Indian system.

    >>> amount_in_words(125050)
    'one lakh twenty five thousand and fifty only'
    """
    amount = _to_decimal(value)
    if amount is None or amount < 0 or amount != amount.to_integral_value():
        return ''
    digits = str(int(amount))
    if len(digits) > 9:
        return 'overflow'
    if int(digits) == 0:
        return 'zero only'

    digits = digits.zfill(9)
    words = []
    pos = 0
    for width, scale in INDIAN_GROUPS:
        n = int(digits[pos:pos + width])
        pos += width
        if not n:
            continue
        if not scale:
            if words:
                words.append('and')
            words.append(_two_digits(n))
        else:
            words.extend([_two_digits(n), scale])
    return ' '.join(words + ['only'])


def denomination_amount(denomination: int, count) -> str:
    """Face value times count as text; blank when the count is blank or not a number."""
    if count is None or not str(count).strip():
        return ''
    n = _to_decimal(count)
    return '' if n is None else str(n * denomination)


def check_totals(record: ReceiptRecord) -> List[str]:
    """Problems that would stop the form from submitting, empty when the figures agree."""
    problems = []
    total = _to_decimal(record.total_amount)
    if total is None:
        return [f'total amount {record.total_amount!r} is not a number']

    fee_sum = Decimal(0)
    for fee in record.fee_items:
        amount = _to_decimal(fee.amount)
        if amount is None:
            problems.append(f'fee {fee.label!r} has a non-numeric amount {fee.amount!r}')
            continue
        fee_sum += amount
    if fee_sum != total:
        problems.append('Total amount should be the sum of all fee items!')

    denomination_sum = Decimal(0)
    for entry in record.denomination_counts:
        count = _to_decimal(entry.count)
        if count is None:
            problems.append(f'count {entry.count!r} for {entry.denomination} is not a number')
            continue
        denomination_sum += count * entry.denomination
    if denomination_sum != total:
        problems.append('Sum of denominations should match the total amount!')
    return problems


def validate_totals(record: ReceiptRecord) -> None:
    problems = check_totals(record)
    if problems:
        raise ReconciliationError(problems)


def complete_record(record: ReceiptRecord) -> ReceiptRecord:
    """Fill the fields the form derives: amount in words and denomination amounts."""
    counts = tuple(
        replace(entry, amount=entry.amount or denomination_amount(entry.denomination, entry.count))
        for entry in record.denomination_counts
    )
    words = record.amount_in_words
    if not words and record.total_amount:
        words = amount_in_words(record.total_amount)
    return replace(record, amount_in_words=words, denomination_counts=counts)
