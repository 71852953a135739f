"""Application ports package."""

from .database import DatabaseEnginePort
from .ledger_repository import LedgerRepositoryPort
from .rogers_source import RogersSourcePort

__all__ = [
    "DatabaseEnginePort",
    "LedgerRepositoryPort",
    "RogersSourcePort",
]
