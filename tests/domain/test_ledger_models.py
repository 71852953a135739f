"""Tests for the ledger domain models."""

from datetime import date
from decimal import ROUND_FLOOR, Decimal, localcontext

from src.domain.constants import MetaDataKey
from src.domain.models import (
    Amount,
    Ledger,
    LedgerAccount,
    Posting,
    Transaction,
    TransactionMetaData,
)


def test_amount_negation_keeps_commodity_and_digits() -> None:
    """Negating an amount only flips its sign."""
    amount = Amount(Decimal("4.500"), "CAD", 3)

    assert -amount == Amount(Decimal("-4.500"), "CAD", 3)


def test_amount_negation_never_yields_negative_zero() -> None:
    """Zero stays unsigned, also from a signed zero or a flooring context."""
    with localcontext() as context:
        context.rounding = ROUND_FLOOR
        negated = -Amount(Decimal("0.00"), "CAD", 2)

    assert str(negated.number) == "0.00"
    assert str((-Amount(Decimal("-0.00"), "CAD", 2)).number) == "0.00"


def test_ledger_account_liability_types() -> None:
    """Credit, liability and payable accounts count as liabilities."""
    assert LedgerAccount("Liabilities:CC", "CREDIT").is_liability
    assert LedgerAccount("Liabilities:Loan", "liability").is_liability
    assert not LedgerAccount("Assets:Bank", "BANK").is_liability


def test_ledger_account_meta_reads_known_keys() -> None:
    """Metadata lookups go through the shared keys."""
    account = LedgerAccount(
        "Liabilities:CC",
        "CREDIT",
        metadata={"last-four": "1234"},
    )

    assert account.meta(MetaDataKey.LAST_FOUR) == "1234"
    assert account.meta(MetaDataKey.IMPORTER_TYPE) is None


def test_posting_weight_with_unit_price() -> None:
    """A unit price multiplies the amount."""
    posting = Posting(
        "Expenses:Travel",
        Amount(Decimal("10.00"), "USD", 2),
        price=Amount(Decimal("1.35"), "CAD", 2),
    )

    assert posting.weight().number == Decimal("13.5000")
    assert posting.weight().commodity == "CAD"


def test_ledger_reference_numbers_collects_activity_ids() -> None:
    """Only transactions carrying an activity id contribute."""
    ledger = Ledger(
        transactions=(
            Transaction(
                TransactionMetaData(
                    date(2023, 4, 1),
                    "Coffee Shop",
                    metadata={"rogers-bank-id": "REF42"},
                )
            ),
            Transaction(TransactionMetaData(date(2023, 4, 2), "Manual entry")),
        )
    )

    assert ledger.reference_numbers() == {"REF42"}
