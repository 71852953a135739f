"""Application use cases package."""

from .import_rogers_bank import ImportRogersBankResult, ImportRogersBankUseCase
from .map_rogers_bank import RogersBankMapper

__all__ = [
    "ImportRogersBankResult",
    "ImportRogersBankUseCase",
    "RogersBankMapper",
]
