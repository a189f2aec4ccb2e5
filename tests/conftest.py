"""
Конфигурация pytest для тестов budget_manager.
"""
import os
import tempfile

# Настройки и логи тестов не должны попадать в домашнюю директорию
os.environ.setdefault("BUDGET_MANAGER_HOME", tempfile.mkdtemp(prefix="budget_manager_test_"))

from decimal import Decimal

import pytest

from budget_manager.models import Balance, Category, Ledger
from budget_manager.services.storage_service import LedgerFileService
from budget_manager.session import BudgetSession
from console_test_helpers import make_console


@pytest.fixture
def ledger_path(tmp_path):
    """Путь к файлу покупок во временной директории (файл ещё не создан)."""
    return tmp_path / "purchases.txt"


@pytest.fixture
def storage(ledger_path):
    return LedgerFileService(ledger_path)


@pytest.fixture
def session(storage):
    """
    Централизованная фикстура сеанса: пустой список покупок, нулевой баланс,
    консоль без ввода.
    """
    return BudgetSession(storage=storage, console=make_console())


@pytest.fixture
def sample_ledger():
    """
    Список покупок из нескольких категорий.

    Returns:
        Ledger: Bread 3.50 и Milk 2.00 (Food), Shirt 20 (Clothes), Cinema 12.25 (Entertainment)
    """
    ledger = Ledger()
    ledger.add_record(Category.FOOD, "Bread", Decimal("3.50"))
    ledger.add_record(Category.CLOTHES, "Shirt", Decimal("20"))
    ledger.add_record(Category.FOOD, "Milk", Decimal("2.00"))
    ledger.add_record(Category.ENTERTAINMENT, "Cinema", Decimal("12.25"))
    return ledger


@pytest.fixture
def balance():
    return Balance(Decimal("100"))
