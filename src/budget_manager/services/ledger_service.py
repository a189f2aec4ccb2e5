"""
Модуль сервисного слоя для Budget Manager.

Содержит бизнес-логику работы с бюджетом:
- add_income: пополнение баланса
- add_purchase: новая покупка с уменьшением баланса
- serialize_ledger / parse_ledger: текстовый формат файла покупок
- save_ledger / load_ledger: сохранение и загрузка через файловый сервис

Все функции принимают сеанс как параметр (Dependency Injection).
"""

from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple
import logging

from pydantic import ValidationError as PydanticValidationError

from budget_manager.models import Balance, Category, Ledger, Purchase, FIELD_SEPARATOR
from budget_manager.utils.exceptions import LedgerFormatError, ValidationError
from budget_manager.utils.formatting import natural_decimal

if TYPE_CHECKING:
    from budget_manager.session import BudgetSession


logger = logging.getLogger(__name__)


def add_income(session: "BudgetSession", amount: Decimal) -> Decimal:
    """
    Увеличивает баланс на сумму дохода.

    Args:
        session: Текущий сеанс
        amount: Сумма дохода (знак не проверяется)

    Returns:
        Decimal: Баланс после пополнения
    """
    session.balance.add(amount)
    logger.info(f"Добавлен доход {amount}, баланс: {session.balance.value}")
    return session.balance.value


def add_purchase(
    session: "BudgetSession",
    category: Category,
    name: str,
    price: Decimal
) -> Purchase:
    """
    Создаёт покупку, уменьшает баланс на её цену и добавляет в список.

    Args:
        session: Текущий сеанс
        category: Категория покупки
        name: Название покупки
        price: Цена покупки

    Returns:
        Purchase: Созданная покупка

    Raises:
        ValidationError: Если цена отрицательная или название ломает формат файла
    """
    try:
        purchase = Purchase(name=name, price=price, category=category)
    except PydanticValidationError as e:
        error_msg = "; ".join(err["msg"] for err in e.errors())
        logger.error(f"Ошибка валидации покупки: {error_msg}")
        raise ValidationError(error_msg) from e

    session.balance.subtract(purchase.price)
    session.ledger.append(purchase)
    logger.info(
        f"Покупка добавлена: {purchase.name} ({purchase.category.label}) {purchase.price}",
        extra={"category": purchase.category},
    )
    return purchase


def serialize_ledger(balance: Balance, ledger: Ledger) -> str:
    """
    Текстовое представление сеанса для сохранения.

    Первая строка - баланс, далее по строке на покупку в текущем порядке.
    """
    lines = [natural_decimal(balance.value)]
    lines.extend(purchase.to_line() for purchase in ledger)
    return "\n".join(lines) + "\n"


def _parse_amount(text: str, line_number: int) -> Decimal:
    try:
        value = Decimal(text.strip())
    except InvalidOperation as e:
        raise LedgerFormatError(f"line {line_number}: {text!r} is not a number") from e
    if not value.is_finite():
        raise LedgerFormatError(f"line {line_number}: {text!r} is not a finite number")
    return value


def parse_ledger(lines: Iterable[str]) -> Tuple[Optional[Decimal], List[Purchase]]:
    """
    Разбирает строки файла покупок.

    Строки покупок, в которых не ровно три поля, молча пропускаются.
    Разбор выполняется целиком до применения, поэтому при ошибке
    состояние сеанса не меняется.

    Args:
        lines: Строки файла

    Returns:
        Баланс (None для пустого файла или файла из пустых строк)
        и список покупок в порядке файла

    Raises:
        UnknownCategoryError: Неизвестная метка категории
        LedgerFormatError: Нечисловой баланс или цена, недопустимая покупка
    """
    lines = list(lines)
    if not any(line.strip() for line in lines):
        return None, []

    balance = _parse_amount(lines[0], 1)
    purchases: List[Purchase] = []

    for line_number, line in enumerate(lines[1:], start=2):
        fields = line.split(FIELD_SEPARATOR)
        if len(fields) != 3:
            logger.debug(f"Строка {line_number} пропущена: полей {len(fields)}")
            continue

        label, name, price_text = fields
        category = Category.from_label(label)
        price = _parse_amount(price_text, line_number)
        try:
            purchases.append(Purchase(name=name, price=price, category=category))
        except PydanticValidationError as e:
            error_msg = "; ".join(err["msg"] for err in e.errors())
            raise LedgerFormatError(f"line {line_number}: {error_msg}") from e

    return balance, purchases


def save_ledger(session: "BudgetSession") -> bool:
    """
    Сохраняет баланс и все покупки сеанса, перезаписывая файл.

    Returns:
        bool: True, если файл записан
    """
    text = serialize_ledger(session.balance, session.ledger)
    saved = session.storage.save(text)
    if saved:
        logger.info(f"Сохранено покупок: {len(session.ledger)}")
    return saved


def load_ledger(session: "BudgetSession") -> int:
    """
    Загружает файл покупок в сеанс.

    Баланс заменяется значением из файла, покупки добавляются в конец
    текущего списка без изменения баланса. Пустой файл ничего не меняет.

    Returns:
        int: Количество загруженных покупок

    Raises:
        StorageError: Файл не удалось прочитать
        UnknownCategoryError: Неизвестная метка категории
        LedgerFormatError: Некорректное содержимое файла
    """
    lines = session.storage.load_lines()
    try:
        balance, purchases = parse_ledger(lines)
    except ValidationError as e:
        logger.error(f"Ошибка разбора файла покупок: {e}")
        raise
    except LedgerFormatError as e:
        logger.error(f"Некорректный формат файла покупок: {e}")
        raise

    if balance is not None:
        session.balance.set(balance)
    for purchase in purchases:
        session.ledger.append(purchase)

    logger.info(f"Загружено покупок: {len(purchases)}, баланс: {session.balance.value}")
    return len(purchases)
