"""
Модуль пользовательских исключений приложения.
"""

class BudgetManagerError(Exception):
    """Базовый класс для всех исключений приложения."""
    pass

class ValidationError(BudgetManagerError):
    """Исключение при ошибке валидации данных (пользовательский ввод)."""
    pass

class InputParseError(ValidationError):
    """Исключение когда ввод с консоли не удалось разобрать как число."""
    pass

class UnknownCategoryError(ValidationError, ValueError):
    """Исключение когда метка категории не входит в фиксированный набор."""

    def __init__(self, label: str):
        super().__init__(f"Unknown category: {label!r}")
        self.label = label

class LedgerFormatError(BudgetManagerError):
    """Исключение при некорректном содержимом файла покупок."""
    pass

class StorageError(BudgetManagerError):
    """Исключение при ошибках чтения или записи файла покупок."""
    pass

class InputClosedError(BudgetManagerError):
    """Исключение когда поток ввода закрыт (EOF)."""
    pass
