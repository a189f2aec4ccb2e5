"""Модели данных Budget Manager."""

from budget_manager.models.enums import Category
from budget_manager.models.models import Purchase, Balance, Ledger, FIELD_SEPARATOR

__all__ = [
    "Category",
    "Purchase",
    "Balance",
    "Ledger",
    "FIELD_SEPARATOR",
]
