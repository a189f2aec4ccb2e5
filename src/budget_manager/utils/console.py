"""
Консольный ввод-вывод приложения.

Все меню и действия читают и печатают только через Console, что
позволяет подменять потоки в тестах.
"""

import logging
import sys
from decimal import Decimal
from typing import Iterable, Optional, TextIO

from budget_manager.utils.exceptions import InputClosedError
from budget_manager.utils.validation import parse_decimal, parse_int

logger = logging.getLogger(__name__)


class Console:
    """
    Построчный консольный ввод-вывод.

    Args:
        stdin: Поток ввода (по умолчанию sys.stdin)
        stdout: Поток вывода (по умолчанию sys.stdout)
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def print(self, text: str = "") -> None:
        """Печатает одну строку."""
        self.stdout.write(f"{text}\n")
        self.stdout.flush()

    def print_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.print(line)

    def read_line(self) -> str:
        """
        Читает одну строку без символа перевода строки.

        Raises:
            InputClosedError: Если поток ввода закрыт
        """
        line = self.stdin.readline()
        if line == "":
            logger.info("Поток ввода закрыт")
            raise InputClosedError("Input stream is closed")
        return line.rstrip("\r\n")

    def read_int(self, field_name: str = "option") -> int:
        return parse_int(self.read_line(), field_name)

    def read_decimal(self, field_name: str = "amount") -> Decimal:
        return parse_decimal(self.read_line(), field_name)
