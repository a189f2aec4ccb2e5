"""Утилиты приложения."""

from budget_manager.utils.logger import setup_logging, get_logger
from budget_manager.utils.console import Console
from budget_manager.utils.error_handler import ErrorHandler, safe_handler
from budget_manager.utils.exceptions import (
    BudgetManagerError,
    ValidationError,
    InputParseError,
    UnknownCategoryError,
    LedgerFormatError,
    StorageError,
    InputClosedError,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "Console",
    "ErrorHandler",
    "safe_handler",
    "BudgetManagerError",
    "ValidationError",
    "InputParseError",
    "UnknownCategoryError",
    "LedgerFormatError",
    "StorageError",
    "InputClosedError",
]
