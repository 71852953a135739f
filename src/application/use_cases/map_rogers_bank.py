"""Mapping of downloaded Rogers Bank records to ledger entries."""

from collections.abc import Callable, Iterable
from datetime import date

from src.domain.constants import DEFAULT_EXPENSE_ACCOUNT
from src.domain.models import Activity, Balance, BankAccount, Ledger, Transaction
from src.domain.policies import AccountMatchPolicy
from src.domain.services import (
    LedgerAccountResolver,
    build_balance,
    build_transaction,
    select_new_activities,
)
from src.infrastructure.logging.logger import get_app_logger


class RogersBankMapper:
    """Map Rogers Bank accounts and activities to ledger entries.

    The ledger is only read: to look up account names and the activity ids
    which were already imported. Merging the returned entries is up to the
    caller.
    """

    def __init__(
        self,
        ledger: Ledger,
        logger=None,
        expense_account: str = DEFAULT_EXPENSE_ACCOUNT,
        importer_type: str | None = None,
        policy: AccountMatchPolicy = AccountMatchPolicy.FIRST_MATCH,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the mapper.

        Args:
            ledger: Ledger snapshot used for lookups.
            logger: Optional logger compatible with logging.Logger-like API.
            expense_account: Account receiving the expense legs.
            importer_type: Optional importer-type tag accounts must carry.
            policy: Handling of several accounts matching one card.
            today: Clock used to date balance assertions.
        """
        self._ledger = ledger
        self._logger = logger or get_app_logger()
        self._expense_account = expense_account
        self._importer_type = importer_type
        self._policy = policy
        self._today = today

    def _resolver(self) -> LedgerAccountResolver:
        return LedgerAccountResolver(
            self._ledger.accounts,
            logger=self._logger,
            importer_type=self._importer_type,
            policy=self._policy,
        )

    def map_account_to_balance(self, account: BankAccount) -> Balance:
        """Map an account to a balance assertion for today.

        Args:
            account: Downloaded credit card account.

        Returns:
            Balance: Assertion of the current balance.

        Raises:
            AccountNotFoundError: If no ledger account matches the card.
        """
        return build_balance(
            account,
            resolver=self._resolver(),
            on_date=self._today(),
        )

    def map_activities_to_transactions(
        self,
        activities: Iterable[Activity],
    ) -> list[Transaction]:
        """Map activities which are not in the ledger yet to transactions.

        Args:
            activities: Downloaded activities in bank order.

        Returns:
            list[Transaction]: New transactions, in activity order.

        Raises:
            RogersBankMappingError: On the first activity which cannot be
                mapped; nothing is returned in that case.
        """
        activities = list(activities)
        resolver = self._resolver()
        transactions: list[Transaction] = []
        for item in select_new_activities(
            activities,
            self._ledger.reference_numbers(),
            logger=self._logger,
        ):
            transactions.append(
                build_transaction(
                    item.activity,
                    item.date,
                    item.reference_number,
                    resolver=resolver,
                    expense_account=self._expense_account,
                )
            )
        self._logger.info(
            f"Mapped {len(transactions)} of {len(activities)} activities "
            "to new transactions"
        )
        return transactions


__all__ = ["RogersBankMapper"]
