"""PieCash-backed ledger repository."""

from contextlib import contextmanager
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import (
    Amount,
    Ledger,
    LedgerAccount,
    Posting,
    Transaction,
    TransactionMetaData,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.piecash_compat import load_piecash, open_ledger_book


class PieCashLedgerRepository(LedgerRepositoryPort):
    """Ledger snapshot read from a GnuCash book through piecash."""

    def __init__(self, book_path: Path | str, logger=None) -> None:
        """Initialize the repository.

        Args:
            book_path: Path or URI to the GnuCash book supported by piecash.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._piecash = load_piecash()
        self._book_path = book_path
        self._logger = logger or get_app_logger()

    @contextmanager
    def _open_book(self):
        book = open_ledger_book(self._piecash, self._book_path)
        try:
            yield book
        finally:
            close_method = getattr(book, "close", None)
            if callable(close_method):
                close_method()

    @staticmethod
    def _normalize_account_type(raw_type) -> str:
        if raw_type is None:
            return ""
        if hasattr(raw_type, "name"):
            return str(raw_type.name).upper()
        return str(raw_type).upper()

    @staticmethod
    def _coerce_date(raw_value) -> date | None:
        if isinstance(raw_value, datetime):
            return raw_value.date()
        if isinstance(raw_value, date):
            return raw_value
        return None

    @staticmethod
    def _string_slots(entity) -> dict[str, str]:
        """Return the string-valued slots of a piecash object."""
        metadata = {}
        for slot in getattr(entity, "slots", None) or []:
            value = getattr(slot, "value", None)
            if isinstance(value, str):
                metadata[slot.name] = value
        return metadata

    @staticmethod
    def _to_amount(value, commodity: str) -> Amount:
        number = value if isinstance(value, Decimal) else Decimal(str(value))
        exponent = number.as_tuple().exponent
        return Amount(
            number=number,
            commodity=commodity,
            decimal_digits=max(0, -exponent) if isinstance(exponent, int) else 0,
        )

    def _map_account(self, account) -> LedgerAccount:
        name = getattr(account, "fullname", None) or account.name
        return LedgerAccount(
            name=name,
            account_type=self._normalize_account_type(
                getattr(account, "type", None)
            ),
            metadata=self._string_slots(account),
        )

    def _map_transaction(self, transaction) -> Transaction | None:
        post_date = self._coerce_date(getattr(transaction, "post_date", None))
        if post_date is None:
            self._logger.warning(
                "Skipping transaction without post date: "
                f"{getattr(transaction, 'guid', '?')}"
            )
            return None
        currency = getattr(transaction, "currency", None)
        commodity = getattr(currency, "mnemonic", "") or ""
        postings = tuple(
            Posting(
                account_name=(
                    getattr(split.account, "fullname", None)
                    or split.account.name
                ),
                amount=self._to_amount(split.value, commodity),
            )
            for split in getattr(transaction, "splits", None) or []
        )
        return Transaction(
            metadata=TransactionMetaData(
                date=post_date,
                payee=getattr(transaction, "description", "") or "",
                metadata=self._string_slots(transaction),
            ),
            postings=postings,
        )

    def fetch_ledger(self) -> Ledger:
        """Return the accounts and transactions of the book.

        Returns:
            Ledger: Accounts sorted by full name, transactions in book order.
        """
        with self._open_book() as book:
            accounts = tuple(
                sorted(
                    (self._map_account(account) for account in book.accounts),
                    key=lambda account: account.name,
                )
            )
            transactions = []
            for raw in book.transactions:
                transaction = self._map_transaction(raw)
                if transaction is not None:
                    transactions.append(transaction)
        self._logger.info(
            f"Read {len(accounts)} accounts and {len(transactions)} "
            "transactions from piecash book"
        )
        return Ledger(accounts=accounts, transactions=tuple(transactions))


__all__ = ["PieCashLedgerRepository"]
