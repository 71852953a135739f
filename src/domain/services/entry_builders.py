"""Builders for ledger entries from Rogers Bank records."""

from datetime import date

from src.domain.constants import MetaDataKey
from src.domain.models import (
    Activity,
    Amount,
    Balance,
    BankAccount,
    BankAmount,
    Posting,
    Transaction,
    TransactionMetaData,
)
from src.domain.services.account_resolver import LedgerAccountResolver
from src.utils.decimal_utils import parse_amount_decimal


def to_amount(bank_amount: BankAmount) -> Amount:
    """Convert a bank amount into an exact ledger amount."""
    number, decimal_digits = parse_amount_decimal(bank_amount.value)
    return Amount(
        number=number,
        commodity=bank_amount.currency,
        decimal_digits=decimal_digits,
    )


def build_transaction(
    activity: Activity,
    posted_date: date,
    reference_number: str,
    *,
    resolver: LedgerAccountResolver,
    expense_account: str,
) -> Transaction:
    """Build the ledger transaction for an activity.

    The card leg carries the negated bank amount. The expense leg carries the
    bank amount, or the original foreign amount priced at the bank amount.

    Args:
        activity: Activity to convert.
        posted_date: Date of the transaction.
        reference_number: Deduplication key stored in the metadata.
        resolver: Resolver for the card account.
        expense_account: Account receiving the expense leg.

    Returns:
        Transaction: Two-legged transaction.

    Raises:
        AccountNotFoundError: If the card has no ledger account.
    """
    account_name = resolver.resolve(activity.card_last4)
    amount = to_amount(activity.amount)
    metadata = TransactionMetaData(
        date=posted_date,
        payee=activity.merchant.name,
        metadata={MetaDataKey.ACTIVITY_ID.value: reference_number},
    )
    if activity.foreign is not None:
        expense_posting = Posting(
            account_name=expense_account,
            amount=to_amount(activity.foreign.original_amount),
            price=amount,
            total_price=True,
        )
    else:
        expense_posting = Posting(account_name=expense_account, amount=amount)
    return Transaction(
        metadata=metadata,
        postings=(
            Posting(account_name=account_name, amount=-amount),
            expense_posting,
        ),
    )


def build_balance(
    account: BankAccount,
    *,
    resolver: LedgerAccountResolver,
    on_date: date,
) -> Balance:
    """Build the balance assertion for a card account.

    The bank reports the owed balance as positive, liabilities are negative
    in the ledger.
    """
    account_name = resolver.resolve(account.customer.card_last4)
    return Balance(
        date=on_date,
        account_name=account_name,
        amount=-to_amount(account.current_balance),
    )


__all__ = ["to_amount", "build_transaction", "build_balance"]
