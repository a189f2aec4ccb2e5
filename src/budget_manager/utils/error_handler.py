"""
Модуль централизованной обработки ошибок.
Предоставляет инструменты для перехвата, логирования и вывода ошибок в консоль.
"""

import functools
import logging
import traceback
from typing import Callable, Optional

from budget_manager.utils.console import Console
from budget_manager.utils.exceptions import (
    ValidationError,
    UnknownCategoryError,
    LedgerFormatError,
    StorageError,
    InputClosedError,
)

logger = logging.getLogger(__name__)

class ErrorHandler:
    """
    Класс для централизованной обработки ошибок.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console

    def handle(self, exception: Exception, context_message: str = ""):
        """
        Обрабатывает возникшее исключение: логирует и показывает сообщение пользователю.

        Args:
            exception: Исключение, которое нужно обработать.
            context_message: Дополнительное сообщение о контексте ошибки.
        """
        error_message = self._get_user_message(exception)
        log_message = f"{context_message}: {str(exception)}" if context_message else str(exception)

        if isinstance(exception, ValidationError):
            logger.warning(f"User error: {log_message}")
        else:
            logger.error(f"System error: {log_message}\n{traceback.format_exc()}")

        if self.console:
            self.console.print(error_message)

    def _get_user_message(self, exception: Exception) -> str:
        """Возвращает понятное пользователю сообщение об ошибке."""
        if isinstance(exception, (UnknownCategoryError, LedgerFormatError)):
            return f"Could not load purchases: {str(exception)}"
        elif isinstance(exception, ValidationError):
            return f"Invalid input: {str(exception)}"
        elif isinstance(exception, StorageError):
            return f"File error: {str(exception)}"
        else:
            return f"Unexpected error: {str(exception)}"


def safe_handler(console_getter: Callable[..., Optional[Console]] = None):
    """
    Декоратор для обработчиков пунктов меню.
    Перехватывает ошибки и передает их в ErrorHandler, сеанс продолжается.

    InputClosedError пропускается дальше: закрытый ввод завершает сеанс.

    Args:
        console_getter: Опциональная функция, получающая те же аргументы, что и
                        обработчик, и возвращающая Console. Если не указана,
                        берётся атрибут console первого аргумента.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except InputClosedError:
                raise
            except Exception as e:
                console = None
                if callable(console_getter):
                    console = console_getter(*args, **kwargs)
                elif args and hasattr(args[0], 'console'):
                    console = args[0].console

                handler = ErrorHandler(console)
                handler.handle(e, context_message=f"Error in {func.__name__}")
                return None
        return wrapper
    return decorator
