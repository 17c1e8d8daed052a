import pytest

from fee_receipt.config import get_settings
from fee_receipt.models import ReceiptRecord

ASHA = {
    "studentName": "Asha R",
    "number": "12",
    "term": "Term 1",
    "className": "UKG",
    "date": "2024-06-01",
    "paymentMethod": "Cash",
    "fees": [{"label": "Tuition", "amount": "5000"}],
    "totalAmount": "5000",
    "amountInWords": "five thousand only",
    "denominations": [
        {"denomination": 2000, "count": "2", "amount": "4000"},
        {"denomination": 500, "count": "2", "amount": "1000"},
    ],
}


@pytest.fixture
def asha_payload():
    return {**ASHA, "fees": [dict(f) for f in ASHA["fees"]],
            "denominations": [dict(d) for d in ASHA["denominations"]]}


@pytest.fixture
def asha(asha_payload):
    return ReceiptRecord.from_dict(asha_payload)


@pytest.fixture
def empty_record():
    return ReceiptRecord()


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in ("RECEIPT_OUTPUT_DIR", "RECEIPT_SCHOOL_NAME", "RECEIPT_SCHOOL_ADDRESS",
                 "RECEIPT_SCHOOL_PHONE", "RECEIPT_FOOTER", "RECEIPT_COMPRESS", "RECEIPT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
