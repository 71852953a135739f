"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from src.domain.constants import DEFAULT_EXPENSE_ACCOUNT, IMPORTER_TYPE
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class MapperSettings:
    """Settings for importing Rogers Bank data.

    Attributes:
        backend: Ledger backend identifier (piecash or sqlalchemy).
        piecash_file: Optional path or URI to the piecash book.
        export_file: Optional path to the downloaded Rogers Bank JSON export.
        expense_account: Account receiving the expense legs.
        importer_type: Optional importer-type tag accounts must carry. A
            boolean true in ROGERS_IMPORTER_TYPE selects the default tag
            (rogers); any other value is used as the tag itself.
        strict_accounts: Refuse cards matching several ledger accounts.
    """

    backend: str = "piecash"
    piecash_file: Optional[Path | str] = None
    export_file: Optional[Path] = None
    expense_account: str = DEFAULT_EXPENSE_ACCOUNT
    importer_type: Optional[str] = None
    strict_accounts: bool = False

    @classmethod
    def from_env(cls) -> "MapperSettings":
        """Build settings from environment variables.

        Returns:
            MapperSettings: Settings sourced from environment variables.
        """
        backend = os.getenv("LEDGER_BACKEND", "piecash").strip().lower()
        logger = get_app_logger()
        raw_piecash = os.getenv("PIECASH_FILE")
        if raw_piecash:
            piecash_file = cls._normalize_path(raw_piecash, logger=logger)
        else:
            piecash_file = cls._default_piecash_file(logger=logger)
        raw_export = os.getenv("ROGERS_EXPORT_FILE")
        export_file = (
            Path(raw_export).expanduser().resolve() if raw_export else None
        )
        expense_account = (
            os.getenv("ROGERS_EXPENSE_ACCOUNT", "").strip()
            or DEFAULT_EXPENSE_ACCOUNT
        )
        importer_type = os.getenv("ROGERS_IMPORTER_TYPE", "").strip() or None
        if importer_type and importer_type.lower() in _TRUE_VALUES:
            importer_type = IMPORTER_TYPE
        strict_accounts = (
            os.getenv("ROGERS_STRICT_ACCOUNTS", "").strip().lower()
            in _TRUE_VALUES
        )
        return cls(
            backend=backend,
            piecash_file=piecash_file,
            export_file=export_file,
            expense_account=expense_account,
            importer_type=importer_type,
            strict_accounts=strict_accounts,
        )

    @staticmethod
    def _normalize_path(
        raw_path: str,
        logger,
    ) -> Path | str:
        """Normalize the piecash file path or URI.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path | str: Normalized filesystem path or URI string.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme and parsed.scheme != "file":
            return raw_path
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"PieCash file does not exist at {path}")
        return path

    @staticmethod
    def _default_piecash_file(logger) -> Path | None:
        """Return the single GnuCash book in data/, if any."""
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.gnucash"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .gnucash files found in data/. "
                "Set PIECASH_FILE to choose one."
            )
        return None


__all__ = ["MapperSettings"]
