"""SQLAlchemy-backed ledger repository reading the GnuCash SQL schema."""

from collections import defaultdict
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
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


SELECT_ACCOUNTS_SQL = text(
    """
    SELECT guid, name, account_type, parent_guid
    FROM accounts
    """
)

SELECT_STRING_SLOTS_SQL = text(
    """
    SELECT obj_guid, name, string_val
    FROM slots
    WHERE string_val IS NOT NULL
    """
)

SELECT_TRANSACTIONS_SQL = text(
    """
    SELECT t.guid, t.post_date, t.description, c.mnemonic
    FROM transactions t
    LEFT JOIN commodities c ON c.guid = t.currency_guid
    ORDER BY t.post_date, t.guid
    """
)

SELECT_SPLITS_SQL = text(
    """
    SELECT tx_guid, account_guid, value_num, value_denom
    FROM splits
    ORDER BY tx_guid, guid
    """
)

_ROOT_TYPES = {"ROOT"}


def _split_amount(value_num, value_denom, commodity: str) -> Amount:
    """Return the exact amount of a rational GnuCash value."""
    numerator = Decimal(int(value_num))
    denominator = int(value_denom) or 1
    digits = len(str(denominator)) - 1
    if denominator == 10**digits:
        number = numerator.scaleb(-digits)
    else:
        number = numerator / Decimal(denominator)
        digits = max(0, -number.as_tuple().exponent)
    return Amount(number=number, commodity=commodity, decimal_digits=digits)


def _coerce_date(raw_value) -> date | None:
    if isinstance(raw_value, datetime):
        return raw_value.date()
    if isinstance(raw_value, date):
        return raw_value
    if isinstance(raw_value, str) and raw_value:
        return datetime.fromisoformat(raw_value.strip()).date()
    return None


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Ledger snapshot read from a GnuCash SQL database."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the GnuCash engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_ledger(self) -> Ledger:
        """Return the accounts and transactions of the GnuCash database.

        Returns:
            Ledger: Accounts sorted by full name, transactions by post date.
        """
        engine = self._db_port.get_gnucash_engine()
        with engine.connect() as conn:
            account_rows = conn.execute(SELECT_ACCOUNTS_SQL).all()
            slot_rows = conn.execute(SELECT_STRING_SLOTS_SQL).all()
            transaction_rows = conn.execute(SELECT_TRANSACTIONS_SQL).all()
            split_rows = conn.execute(SELECT_SPLITS_SQL).all()

        slots: dict[str, dict[str, str]] = defaultdict(dict)
        for row in slot_rows:
            slots[row.obj_guid][row.name] = row.string_val

        full_names = self._full_names(account_rows)
        accounts = sorted(
            (
                LedgerAccount(
                    name=full_names[row.guid],
                    account_type=str(row.account_type or "").upper(),
                    metadata=dict(slots.get(row.guid, {})),
                )
                for row in account_rows
                if row.guid in full_names
            ),
            key=lambda account: account.name,
        )
        transactions = self._build_transactions(
            transaction_rows,
            split_rows,
            slots,
            full_names,
        )
        self._logger.info(
            f"Read {len(accounts)} accounts and {len(transactions)} "
            "transactions from GnuCash database"
        )
        return Ledger(accounts=tuple(accounts), transactions=tuple(transactions))

    @staticmethod
    def _full_names(account_rows) -> dict[str, str]:
        """Return colon-joined account names keyed by GUID, roots excluded."""
        by_guid = {row.guid: row for row in account_rows}
        names: dict[str, str] = {}
        for row in account_rows:
            if str(row.account_type or "").upper() in _ROOT_TYPES:
                continue
            parts = []
            current = row
            seen = set()
            while (
                current is not None
                and current.guid not in seen
                and str(current.account_type or "").upper() not in _ROOT_TYPES
            ):
                seen.add(current.guid)
                parts.append(current.name)
                current = by_guid.get(current.parent_guid)
            names[row.guid] = ":".join(reversed(parts))
        return names

    def _build_transactions(
        self,
        transaction_rows,
        split_rows,
        slots: dict[str, dict[str, str]],
        full_names: dict[str, str],
    ) -> list[Transaction]:
        splits_by_tx = defaultdict(list)
        for row in split_rows:
            splits_by_tx[row.tx_guid].append(row)

        transactions = []
        for row in transaction_rows:
            post_date = _coerce_date(row.post_date)
            if post_date is None:
                self._logger.warning(
                    f"Skipping transaction without post date: {row.guid}"
                )
                continue
            commodity = row.mnemonic or ""
            postings = tuple(
                Posting(
                    account_name=full_names.get(
                        split.account_guid,
                        split.account_guid,
                    ),
                    amount=_split_amount(
                        split.value_num,
                        split.value_denom,
                        commodity,
                    ),
                )
                for split in splits_by_tx.get(row.guid, [])
            )
            transactions.append(
                Transaction(
                    metadata=TransactionMetaData(
                        date=post_date,
                        payee=row.description or "",
                        metadata=dict(slots.get(row.guid, {})),
                    ),
                    postings=postings,
                )
            )
        return transactions


__all__ = [
    "SqlAlchemyLedgerRepository",
    "SELECT_ACCOUNTS_SQL",
    "SELECT_STRING_SLOTS_SQL",
    "SELECT_TRANSACTIONS_SQL",
    "SELECT_SPLITS_SQL",
]
