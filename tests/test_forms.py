import pytest

from fee_receipt.errors import ReconciliationError
from fee_receipt.forms import (
    amount_in_words,
    check_totals,
    complete_record,
    denomination_amount,
    validate_totals,
)
from fee_receipt.models import DenominationCount, FeeItem, ReceiptRecord


@pytest.mark.parametrize("value, words", [
    (5000, "five thousand only"),
    ("5000", "five thousand only"),
    (21, "twenty one only"),
    (100, "one hundred only"),
    (1234, "one thousand two hundred and thirty four only"),
    (125050, "one lakh twenty five thousand and fifty only"),
    (10000000, "one crore only"),
    (0, "zero only"),
    (1000000000, "overflow"),
    ("12.5", ""),
    ("abc", ""),
    (-4, ""),
])
def test_amount_in_words(value, words):
    assert amount_in_words(value) == words


def test_denomination_amount():
    assert denomination_amount(500, "3") == "1500"
    assert denomination_amount(2000, 2) == "4000"
    assert denomination_amount(10, "") == ""
    assert denomination_amount(10, None) == ""
    assert denomination_amount(10, "x") == ""


def test_asha_totals_agree(asha):
    assert check_totals(asha) == []
    validate_totals(asha)


def test_mismatched_totals_are_reported():
    record = ReceiptRecord(
        fee_items=(FeeItem("Tuition", "3000"), FeeItem("Books", "1500")),
        total_amount="5000",
        denomination_counts=(DenominationCount(2000, "2", "4000"),),
    )
    problems = check_totals(record)
    assert problems == [
        "Total amount should be the sum of all fee items!",
        "Sum of denominations should match the total amount!",
    ]
    with pytest.raises(ReconciliationError) as info:
        validate_totals(record)
    assert info.value.problems == problems


def test_non_numeric_values_are_reported():
    record = ReceiptRecord(fee_items=(FeeItem("Tuition", "five"),), total_amount="0")
    assert check_totals(record) == ["fee 'Tuition' has a non-numeric amount 'five'"]
    assert check_totals(ReceiptRecord(total_amount="n/a")) == ["total amount 'n/a' is not a number"]


def test_complete_record_fills_derived_fields():
    record = ReceiptRecord(
        total_amount="2500",
        denomination_counts=(DenominationCount(2000, "1"), DenominationCount(500, "1", "500")),
    )
    filled = complete_record(record)
    assert filled.amount_in_words == "two thousand five hundred only"
    assert filled.denomination(2000).amount == "2000"
    assert filled.denomination(500).amount == "500"
    assert complete_record(filled) == filled
