"""Resolution of ledger accounts from card digits."""

from collections.abc import Iterable
from logging import Logger

from src.domain.constants import MetaDataKey
from src.domain.errors import AccountNotFoundError, AmbiguousAccountError
from src.domain.models import LedgerAccount
from src.domain.policies import AccountMatchPolicy


class LedgerAccountResolver:
    """Find the liability account tagged with a card's last four digits.

    The candidate index is built once from the ledger accounts and keeps
    ledger order, so FIRST_MATCH returns the same account as a linear scan.
    """

    def __init__(
        self,
        accounts: Iterable[LedgerAccount],
        *,
        logger: Logger,
        importer_type: str | None = None,
        policy: AccountMatchPolicy = AccountMatchPolicy.FIRST_MATCH,
    ) -> None:
        """Initialize the resolver.

        Args:
            accounts: Ledger accounts in ledger order.
            logger: Logger used for warnings.
            importer_type: Optional sentinel the importer-type tag must equal.
            policy: Handling of several qualifying accounts.
        """
        self._logger = logger
        self._policy = policy
        self._importer_type = importer_type
        self._index = self._build_index(accounts)

    def _build_index(
        self,
        accounts: Iterable[LedgerAccount],
    ) -> dict[str, list[str]]:
        index: dict[str, list[str]] = {}
        for account in accounts:
            if not account.is_liability:
                continue
            last_four = account.meta(MetaDataKey.LAST_FOUR)
            if last_four is None:
                continue
            if (
                self._importer_type is not None
                and account.meta(MetaDataKey.IMPORTER_TYPE)
                != self._importer_type
            ):
                continue
            index.setdefault(last_four, []).append(account.name)
        return index

    def resolve(self, last_four: str) -> str:
        """Return the ledger account name for a card.

        Args:
            last_four: Last four digits of the card number.

        Returns:
            str: Name of the matching ledger account.

        Raises:
            AccountNotFoundError: If no liability account matches.
            AmbiguousAccountError: If several match under the strict policy.
        """
        candidates = self._index.get(last_four)
        if not candidates:
            raise AccountNotFoundError(last_four)
        if len(candidates) > 1:
            if self._policy == AccountMatchPolicy.STRICT:
                raise AmbiguousAccountError(last_four, candidates)
            self._logger.warning(
                f"Multiple ledger accounts match card {last_four}, "
                f"using {candidates[0]}"
            )
        return candidates[0]


__all__ = ["LedgerAccountResolver"]
