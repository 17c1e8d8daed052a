"""Receipt record - the structured input of a render."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Union

DENOMINATIONS = (2000, 500, 200, 100, 50, 20, 10)

_COLLECTIONS = ('fee_items', 'denomination_counts')


class PaymentMethod(str, Enum):
    CASH = 'Cash'
    CHEQUE = 'Cheque'
    DD = 'DD'


@dataclass(frozen=True)
class FeeItem:
    label: str = ''
    amount: str = ''  # decimal as text, e.g. '5000'


@dataclass(frozen=True)
class DenominationCount:
    denomination: int
    count: str = ''
    amount: str = ''


@dataclass(frozen=True)
class ReceiptRecord:
    """One fee payment as entered on the form.

    Every field is optional; the renderer prints blanks for missing values and
    does not check that the fee, total and denomination figures agree.
    """

    student_name: str = ''
    number: str = ''
    term: str = ''
    class_name: str = ''
    date: str = ''
    payment_method: Union[PaymentMethod, str] = ''
    drawn: str = ''
    branch: str = ''
    fee_items: Tuple[FeeItem, ...] = ()
    total_amount: str = ''
    amount_in_words: str = ''
    denomination_counts: Tuple[DenominationCount, ...] = ()

    def __post_init__(self):
        # frozen, so blanks are filled in through object.__setattr__
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in _COLLECTIONS:
                object.__setattr__(self, f.name, tuple(value or ()))
            elif value is None:
                object.__setattr__(self, f.name, '')

    @property
    def payment_label(self) -> str:
        if isinstance(self.payment_method, PaymentMethod):
            return self.payment_method.value
        return self.payment_method

    def denomination(self, value: int) -> Optional[DenominationCount]:
        """First entry supplied for ``value``, matched by face value."""
        for entry in self.denomination_counts:
            if entry.denomination == value:
                return entry
        return None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'ReceiptRecord':
        """Build a record from the form's JSON payload (camelCase keys)."""
        data = data or {}
        return cls(
            student_name=_text(data.get('studentName')),
            number=_text(data.get('number')),
            term=_text(data.get('term')),
            class_name=_text(data.get('className')),
            date=_text(data.get('date')),
            payment_method=_payment_method(data.get('paymentMethod')),
            drawn=_text(data.get('drawn')),
            branch=_text(data.get('branch')),
            fee_items=tuple(
                FeeItem(label=_text(fee.get('label')), amount=_text(fee.get('amount')))
                for fee in (data.get('fees') or [])
                if isinstance(fee, Mapping)
            ),
            total_amount=_text(data.get('totalAmount')),
            amount_in_words=_text(data.get('amountInWords')),
            denomination_counts=tuple(
                entry
                for entry in (_denomination(item) for item in (data.get('denominations') or []))
                if entry is not None
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'studentName': self.student_name,
            'number': self.number,
            'term': self.term,
            'className': self.class_name,
            'date': self.date,
            'paymentMethod': self.payment_label,
            'drawn': self.drawn,
            'branch': self.branch,
            'fees': [{'label': fee.label, 'amount': fee.amount} for fee in self.fee_items],
            'totalAmount': self.total_amount,
            'amountInWords': self.amount_in_words,
            'denominations': [
                {'denomination': d.denomination, 'count': d.count, 'amount': d.amount}
                for d in self.denomination_counts
            ],
        }


def _text(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _payment_method(value: Any) -> Union[PaymentMethod, str]:
    text = _text(value)
    try:
        return PaymentMethod(text)
    except ValueError:
        return text


def _denomination(item: Any) -> Optional[DenominationCount]:
    if not isinstance(item, Mapping):
        return None
    try:
        value = int(item.get('denomination'))
    except (TypeError, ValueError):
        return None
    return DenominationCount(
        denomination=value,
        count=_text(item.get('count')),
        amount=_text(item.get('amount')),
    )


__all__ = [
    'DENOMINATIONS',
    'PaymentMethod',
    'FeeItem',
    'DenominationCount',
    'ReceiptRecord',
]
