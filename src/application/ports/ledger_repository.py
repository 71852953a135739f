"""Port for reading the ledger snapshot."""

from typing import Protocol

from src.domain.models import Ledger


class LedgerRepositoryPort(Protocol):
    """Port exposing read access to the ledger accounts and transactions."""

    def fetch_ledger(self) -> Ledger:
        """Return a read-only snapshot of the ledger.

        Accounts are sorted by full name on every backend, so the first
        match for a shared last four does not depend on storage order.
        """


__all__ = ["LedgerRepositoryPort"]
