"""
Контекст сеанса работы с бюджетом.

Сеанс владеет балансом, списком покупок, файловым сервисом и консолью;
обработчики меню получают его явным параметром.
"""

from dataclasses import dataclass, field

from budget_manager.models import Balance, Ledger
from budget_manager.services.storage_service import LedgerFileService
from budget_manager.utils.console import Console


@dataclass
class BudgetSession:
    storage: LedgerFileService
    console: Console = field(default_factory=Console)
    balance: Balance = field(default_factory=Balance)
    ledger: Ledger = field(default_factory=Ledger)
