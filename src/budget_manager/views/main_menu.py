"""
Дерево меню приложения и обработчики пунктов.

Обработчики получают сеанс явным параметром и печатают только через
session.console. Ошибки перехватывает safe_handler: сообщение
выводится пользователю, работа продолжается.
"""

from typing import Callable, List, Tuple

from budget_manager.models import Category
from budget_manager.services import ledger_service
from budget_manager.session import BudgetSession
from budget_manager.utils.error_handler import safe_handler
from budget_manager.utils.logger import get_logger
from budget_manager.views.menu import Action, Menu, Navigation

logger = get_logger(__name__)

MAIN_MENU_TITLE = "Choose your action:"
ADD_PURCHASE_TITLE = "Choose the type of purchase"
SHOW_PURCHASES_TITLE = "Choose the type of purchases"
ANALYZE_TITLE = "How do you want to sort?"


def go_back(session: BudgetSession) -> Navigation:
    return Navigation.BACK


def _category_menu(
    title: str,
    handler: Callable[[BudgetSession, Category], object]
) -> Menu:
    """Меню с пунктами 1..4 по категориям в порядке объявления."""
    menu = Menu(title)
    for option, category in enumerate(Category, start=1):
        menu.add_action(option, category.label, lambda session, c=category: handler(session, c))
    return menu


@safe_handler()
def add_income(session: BudgetSession) -> None:
    session.console.print("Enter income:")
    amount = session.console.read_decimal("income")
    ledger_service.add_income(session, amount)
    session.console.print("Income was added!")


@safe_handler()
def add_purchase(session: BudgetSession, category: Category) -> None:
    """Диалог новой покупки: название, цена, затем списание с баланса."""
    console = session.console
    console.print("Enter purchase name:")
    name = console.read_line().strip()
    console.print("Enter its price:")
    price = console.read_decimal("price")
    ledger_service.add_purchase(session, category, name, price)
    console.print("Purchase was added!!")


@safe_handler()
def show_category(session: BudgetSession, category: Category) -> None:
    session.console.print_lines(session.ledger.show_by_category(category))


@safe_handler()
def show_all(session: BudgetSession) -> None:
    session.console.print_lines(session.ledger.show_all())


@safe_handler()
def show_type_summary(session: BudgetSession) -> None:
    session.console.print_lines(session.ledger.show_by_type_summary())


@safe_handler()
def show_balance(session: BudgetSession) -> None:
    session.console.print(session.balance.show())


@safe_handler()
def save(session: BudgetSession) -> None:
    if ledger_service.save_ledger(session):
        session.console.print("Purchases were saved!")
    else:
        session.console.print(f"Could not save purchases to {session.storage.path}")


@safe_handler()
def load(session: BudgetSession) -> None:
    ledger_service.load_ledger(session)
    session.console.print("Purchases were loaded!")


def exit_app(session: BudgetSession) -> Navigation:
    session.console.print("Bye!")
    logger.info("Выход по команде пользователя")
    return Navigation.EXIT


def add_purchase_menu(session: BudgetSession) -> Menu:
    menu = _category_menu(ADD_PURCHASE_TITLE, add_purchase)
    menu.add_action(5, "Back", go_back)
    return menu


def show_purchases_menu(session: BudgetSession) -> Menu:
    menu = _category_menu(SHOW_PURCHASES_TITLE, show_category)
    menu.add_action(5, "All", show_all)
    menu.add_action(6, "Back", go_back)
    return menu


def _show_category_and_return(session: BudgetSession, category: Category) -> Navigation:
    show_category(session, category)
    session.console.print()
    return Navigation.BACK


def certain_type_menu(session: BudgetSession) -> Menu:
    """После вывода категории пользователь возвращается в меню анализа."""
    return _category_menu(ADD_PURCHASE_TITLE, _show_category_and_return)


def analyze_menu(session: BudgetSession) -> Menu:
    """Сортирует покупки по убыванию цены и открывает меню анализа."""
    session.ledger.sort_by_price_descending()
    menu = Menu(ANALYZE_TITLE)
    menu.add_action(1, "Sort all purchases", show_all)
    menu.add_action(2, "Sort by type", show_type_summary)
    menu.add_action(3, "Sort certain type", certain_type_menu)
    menu.add_action(4, "Back", go_back)
    return menu


def build_main_menu() -> Menu:
    menu = Menu(MAIN_MENU_TITLE)
    actions: List[Tuple[int, str, Action]] = [
        (1, "Add income", add_income),
        (2, "Add purchase", add_purchase_menu),
        (3, "Show list of purchases", show_purchases_menu),
        (4, "Balance", show_balance),
        (5, "Save", save),
        (6, "Load", load),
        (7, "Analyze (Sort)", analyze_menu),
        (0, "Exit", exit_app),
    ]
    for option, label, action in actions:
        menu.add_action(option, label, action)
    return menu
