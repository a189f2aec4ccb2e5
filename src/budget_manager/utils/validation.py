
from decimal import Decimal, InvalidOperation
import logging

from budget_manager.utils.exceptions import InputParseError

logger = logging.getLogger(__name__)

def parse_decimal(text: str, field_name: str = "amount") -> Decimal:
    """
    Разбор десятичного числа из строки ввода.

    Args:
        text: Строка для разбора
        field_name: Название поля для сообщения об ошибке

    Returns:
        Decimal: Конечное десятичное число

    Raises:
        InputParseError: Если строка не является конечным числом
    """
    try:
        value = Decimal(text.strip())
    except (InvalidOperation, AttributeError) as e:
        error_msg = f"Invalid {field_name}: {text!r} is not a number"
        logger.error(error_msg)
        raise InputParseError(error_msg) from e
    if not value.is_finite():
        error_msg = f"Invalid {field_name}: {text!r} is not a finite number"
        logger.error(error_msg)
        raise InputParseError(error_msg)
    return value

def parse_int(text: str, field_name: str = "option") -> int:
    """
    Разбор целого числа из строки ввода.

    Raises:
        InputParseError: Если строка не является целым числом
    """
    try:
        return int(text.strip())
    except (ValueError, AttributeError) as e:
        error_msg = f"Invalid {field_name}: {text!r} is not an integer"
        logger.error(error_msg)
        raise InputParseError(error_msg) from e
