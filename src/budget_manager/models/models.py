"""
Модуль моделей данных для Budget Manager.

Содержит определения:
- Purchase: Pydantic модель покупки (неизменяемая, с валидацией)
- Balance: текущий баланс счёта
- Ledger: упорядоченный список покупок сеанса с агрегатами и выводом
"""

from decimal import Decimal
from typing import Iterable, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from budget_manager.models.enums import Category
from budget_manager.utils.formatting import money, natural_decimal, print_price

FIELD_SEPARATOR = ";"


class Purchase(BaseModel):
    """
    Pydantic модель покупки.

    Экземпляры неизменяемы: после создания цена и категория не меняются.

    Attributes:
        name: Название покупки (без ";" и переводов строки)
        price: Цена (не может быть отрицательной)
        category: Категория покупки
    """
    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal = Field(ge=Decimal('0'), description="Цена не может быть отрицательной")
    category: Category

    @field_validator('name')
    @classmethod
    def name_fits_line_format(cls, v: str) -> str:
        """
        Обрезает пробелы и проверяет, что название не ломает формат файла.

        Raises:
            ValueError: Если название содержит ";" или перевод строки
        """
        v = v.strip()
        if FIELD_SEPARATOR in v or len(v.splitlines()) > 1:
            raise ValueError("purchase name must not contain ';' or line breaks")
        return v

    def display(self, for_category: Category) -> Optional[str]:
        """Строка списка, если покупка относится к указанной категории, иначе None."""
        if self.category != for_category:
            return None
        return self.display_all()

    def display_all(self) -> str:
        return f"{self.name} ${money(self.price)}"

    def to_line(self) -> str:
        """Строка файла покупок: category;name;price."""
        return FIELD_SEPARATOR.join((self.category.label, self.name, natural_decimal(self.price)))


class Balance:
    """
    Баланс счёта.

    Хранит только текущее значение, без истории операций.
    Может уходить в минус: ограничения снизу нет.
    """

    def __init__(self, value: Decimal = Decimal('0')):
        self._value = Decimal(value)

    @property
    def value(self) -> Decimal:
        return self._value

    def add(self, amount: Decimal) -> None:
        self._value += Decimal(amount)

    def subtract(self, amount: Decimal) -> None:
        self._value -= Decimal(amount)

    def set(self, amount: Decimal) -> None:
        """Перезаписывает баланс (используется при загрузке из файла)."""
        self._value = Decimal(amount)

    def show(self) -> str:
        return f"Balance: ${money(self._value)}"

    def __repr__(self) -> str:
        return f"Balance({self._value!r})"


class Ledger:
    """
    Упорядоченный список покупок сеанса.

    Порядок вставки сохраняется; изменить его может только
    sort_by_price_descending(). Удаления нет. Методы show_* возвращают
    строки для вывода в консоль.
    """

    def __init__(self, purchases: Iterable[Purchase] = ()):
        self._items: List[Purchase] = list(purchases)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Purchase]:
        return iter(self._items)

    @property
    def purchases(self) -> Tuple[Purchase, ...]:
        return tuple(self._items)

    def append(self, purchase: Purchase) -> Purchase:
        self._items.append(purchase)
        return purchase

    def add_record(self, category: Category, name: str, price: Decimal) -> Purchase:
        """Добавляет покупку без изменения баланса (восстановление из файла)."""
        return self.append(Purchase(name=name, price=price, category=category))

    def total_price(self, category: Optional[Category] = None) -> Decimal:
        """Сумма цен всех покупок или покупок одной категории (0 для пустого списка)."""
        return sum(
            (p.price for p in self._items if category is None or p.category == category),
            Decimal('0'),
        )

    def count(self, category: Optional[Category] = None) -> int:
        if category is None:
            return len(self._items)
        return sum(1 for p in self._items if p.category == category)

    def totals_by_category(self) -> List[Tuple[Category, Decimal]]:
        """
        Суммы по всем категориям, по убыванию суммы.

        Категории без покупок включаются с нулевой суммой. При равных
        суммах сохраняется порядок объявления категорий.
        """
        totals = [(category, self.total_price(category)) for category in Category]
        return sorted(totals, key=lambda item: item[1], reverse=True)

    def sort_by_price_descending(self) -> None:
        # list.sort устойчива и с reverse=True: равные цены сохраняют порядок
        self._items.sort(key=lambda p: p.price, reverse=True)

    def show_by_category(self, category: Category) -> List[str]:
        if self.count(category) == 0:
            return ["The purchase list is empty"]
        lines = [f"{category.label}:"]
        lines.extend(filter(None, (p.display(category) for p in self._items)))
        lines.append(f"Total sum: ${print_price(self.total_price(category))}")
        return lines

    def show_all(self) -> List[str]:
        if not self._items:
            return ["The purchase list is empty!"]
        lines = ["All:"]
        lines.extend(p.display_all() for p in self._items)
        lines.append(f"Total: ${print_price(self.total_price())}")
        return lines

    def show_by_type_summary(self) -> List[str]:
        lines = ["Types:"]
        lines.extend(
            f"{category.label} - ${print_price(total)}"
            for category, total in self.totals_by_category()
        )
        lines.append(f"Total sum: ${print_price(self.total_price())}")
        return lines
