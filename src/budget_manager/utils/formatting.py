"""
Функции форматирования денежных сумм для вывода и сохранения.
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext

TWO_PLACES = Decimal("0.01")


def natural_decimal(value: Decimal) -> str:
    """
    Возвращает "естественную" запись числа.

    Без экспоненты, без незначащих нулей, но минимум с одним знаком
    после точки: 20 -> "20.0", 3.50 -> "3.5", 0 -> "0.0".

    Args:
        value: Сумма

    Returns:
        str: Строковое представление суммы
    """
    value = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(value.as_tuple().digits))
        text = format(value.normalize(), "f")
    if "." not in text:
        text += ".0"
    if text.startswith("-") and value == 0:
        text = text[1:]
    return text


def print_price(value: Decimal) -> str:
    """Итоговая сумма в списках: "0" для нуля, иначе естественная запись."""
    if value == 0:
        return "0"
    return natural_decimal(value)


def money(value: Decimal) -> str:
    """
    Сумма с двумя знаками после точки (округление half-up).

    Точность контекста поднимается под порядок числа, иначе quantize
    не помещает большие суммы в 28 значащих цифр.
    """
    value = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return str(value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP))
