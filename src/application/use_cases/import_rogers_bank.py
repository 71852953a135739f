"""Use case to import downloaded Rogers Bank data against the ledger.

The use case reads a ledger snapshot and the downloaded records through
their ports, maps them with RogersBankMapper and returns the new entries.
Nothing is written back to the ledger.
"""

from dataclasses import dataclass

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.ports.rogers_source import RogersSourcePort
from src.application.use_cases.map_rogers_bank import RogersBankMapper
from src.domain.constants import DEFAULT_EXPENSE_ACCOUNT
from src.domain.models import Balance, Transaction
from src.domain.policies import AccountMatchPolicy
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ImportRogersBankResult:
    """Result of an import run.

    Attributes:
        balances: One balance assertion per downloaded account.
        transactions: Transactions not present in the ledger yet.
    """

    balances: list[Balance]
    transactions: list[Transaction]


class ImportRogersBankUseCase:
    """Map downloaded Rogers Bank records to new ledger entries."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        rogers_source: RogersSourcePort,
        logger=None,
        expense_account: str = DEFAULT_EXPENSE_ACCOUNT,
        importer_type: str | None = None,
        policy: AccountMatchPolicy = AccountMatchPolicy.FIRST_MATCH,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing the ledger snapshot.
            rogers_source: Port providing downloaded accounts and activities.
            logger: Optional logger compatible with logging.Logger-like API.
            expense_account: Account receiving the expense legs.
            importer_type: Optional importer-type tag accounts must carry.
            policy: Handling of several accounts matching one card.
        """
        self._ledger_repository = ledger_repository
        self._rogers_source = rogers_source
        self._logger = logger or get_app_logger()
        self._expense_account = expense_account
        self._importer_type = importer_type
        self._policy = policy

    def execute(self) -> ImportRogersBankResult:
        """Run the import.

        Returns:
            ImportRogersBankResult: Entries to merge into the ledger.

        Raises:
            RogersBankMappingError: If a record cannot be mapped.
        """
        ledger = self._ledger_repository.fetch_ledger()
        self._logger.info(
            f"Loaded ledger with {len(ledger.accounts)} accounts and "
            f"{len(ledger.transactions)} transactions"
        )
        mapper = RogersBankMapper(
            ledger,
            logger=self._logger,
            expense_account=self._expense_account,
            importer_type=self._importer_type,
            policy=self._policy,
        )
        balances = [
            mapper.map_account_to_balance(account)
            for account in self._rogers_source.fetch_accounts()
        ]
        transactions = mapper.map_activities_to_transactions(
            self._rogers_source.fetch_activities()
        )
        return ImportRogersBankResult(
            balances=balances,
            transactions=transactions,
        )


__all__ = ["ImportRogersBankUseCase", "ImportRogersBankResult"]
