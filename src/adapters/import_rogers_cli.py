"""CLI adapter to map a Rogers Bank export against the ledger.

Prints the balance assertions and transactions which would be added to the
ledger. Nothing is written.
"""

import sys

from src.domain.errors import RogersBankMappingError
from src.domain.models import Amount, Balance, Transaction
from src.infrastructure.container import build_import_use_case
from src.infrastructure.logging.logger import get_app_logger


def _format_amount(amount: Amount) -> str:
    return f"{amount.number:.{amount.decimal_digits}f} {amount.commodity}"


def _format_balance(balance: Balance) -> str:
    return (
        f"{balance.date.isoformat()} balance {balance.account_name} "
        f"{_format_amount(balance.amount)}"
    )


def _format_transaction(transaction: Transaction) -> str:
    header = transaction.metadata
    legs = []
    for posting in transaction.postings:
        leg = f"{posting.account_name} {_format_amount(posting.amount)}"
        if posting.price is not None:
            marker = "@@" if posting.total_price else "@"
            leg += f" {marker} {_format_amount(posting.price)}"
        legs.append(leg)
    return f"{header.date.isoformat()} {header.payee}: {', '.join(legs)}"


def main() -> int:
    """Run the import and print the resulting entries.

    Returns:
        int: Process exit code.
    """
    logger = get_app_logger()
    try:
        use_case = build_import_use_case()
        result = use_case.execute()
    except (RogersBankMappingError, RuntimeError, ValueError) as exc:
        logger.error(str(exc))
        return 1

    for balance in result.balances:
        print(_format_balance(balance))
    for transaction in result.transactions:
        print(_format_transaction(transaction))
    print(
        f"Mapped {len(result.balances)} balances and "
        f"{len(result.transactions)} new transactions."
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
