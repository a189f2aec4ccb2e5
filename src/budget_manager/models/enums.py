"""
Модуль перечислений (enums) для Budget Manager.

Содержит Enum классы, используемые в моделях данных.
"""

from enum import Enum

from budget_manager.utils.exceptions import UnknownCategoryError


class Category(str, Enum):
    """
    Категория покупки.

    Значение совпадает с меткой, которая выводится в меню и
    записывается в файл покупок. Порядок объявления используется
    как порядок отображения и для разрешения равенства сумм в сводке.

    Attributes:
        FOOD: Еда
        CLOTHES: Одежда
        ENTERTAINMENT: Развлечения
        OTHER: Прочее
    """
    FOOD = "Food"
    CLOTHES = "Clothes"
    ENTERTAINMENT = "Entertainment"
    OTHER = "Other"

    @property
    def label(self) -> str:
        """Метка категории для вывода и сохранения."""
        return self.value

    @classmethod
    def from_label(cls, label: str) -> "Category":
        """
        Возвращает категорию по точному совпадению метки.

        Args:
            label: Метка категории (например, "Food")

        Returns:
            Category: Найденная категория

        Raises:
            UnknownCategoryError: Если метка не входит в набор категорий
        """
        for category in cls:
            if category.value == label:
                return category
        raise UnknownCategoryError(label)
