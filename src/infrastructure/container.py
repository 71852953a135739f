"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.ports.rogers_source import RogersSourcePort
from src.application.use_cases.import_rogers_bank import ImportRogersBankUseCase
from src.domain.policies import parse_account_match_policy
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository_factory import (
    create_ledger_repository,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.rogers_export_reader import RogersExportReader
from src.infrastructure.settings import MapperSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    settings: MapperSettings,
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the configured ledger repository."""
    resolved_db = db_port or build_database_adapter()
    return create_ledger_repository(
        resolved_db,
        logger=get_app_logger(),
        settings=settings,
    )


def build_rogers_source(settings: MapperSettings) -> RogersSourcePort:
    """Return the reader for the downloaded Rogers Bank export."""
    if settings.export_file is None:
        raise RuntimeError("ROGERS_EXPORT_FILE is required to import data.")
    return RogersExportReader(settings.export_file, logger=get_app_logger())


def build_import_use_case(
    settings: MapperSettings | None = None,
) -> ImportRogersBankUseCase:
    """Return the import use case wired from settings."""
    resolved_settings = settings or MapperSettings.from_env()
    return ImportRogersBankUseCase(
        ledger_repository=build_ledger_repository(resolved_settings),
        rogers_source=build_rogers_source(resolved_settings),
        logger=get_app_logger(),
        expense_account=resolved_settings.expense_account,
        importer_type=resolved_settings.importer_type,
        policy=parse_account_match_policy(resolved_settings.strict_accounts),
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_rogers_source",
    "build_import_use_case",
]
