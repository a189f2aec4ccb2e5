__all__ = [
    "add_income",
    "add_purchase",
    "serialize_ledger",
    "parse_ledger",
    "save_ledger",
    "load_ledger",
    "LedgerFileService",
]

from budget_manager.services.ledger_service import (
    add_income,
    add_purchase,
    serialize_ledger,
    parse_ledger,
    save_ledger,
    load_ledger
)

from budget_manager.services.storage_service import LedgerFileService
