"""
Модуль настройки логирования для Budget Manager.

Обеспечивает:
- Структурированное логирование (JSON формат) в файл сеанса
- Вывод предупреждений и ошибок в stderr
- Поддержку русского языка в сообщениях
"""

import json
import logging
import sys
from pathlib import Path
from datetime import datetime, date
from typing import Any, Dict, Optional
from decimal import Decimal
from enum import Enum

from budget_manager.config import settings

_STANDARD_ATTRS = frozenset([
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module",
    "msecs", "message", "msg", "name", "pathname", "process",
    "processName", "relativeCreated", "stack_info", "thread", "threadName",
    "taskName",
])

class JsonFormatter(logging.Formatter):
    """
    Форматтер для вывода логов в формате JSON.
    Соответствует требованиям структурированного логирования.
    """
    def format(self, record: logging.LogRecord) -> str:
        """
        Форматирует запись лога в JSON строку.

        Args:
            record: Запись лога

        Returns:
            str: JSON строка
        """
        log_record: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S'),
            "level": record.levelname,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        # Дополнительные поля из extra
        # Пример: logger.info("message", extra={"category": Category.FOOD})
        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS:
                log_record[key] = self._serialize_value(value)

        if record.exc_info:
            log_record['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_record, ensure_ascii=False)

    def _serialize_value(self, value: Any) -> Any:
        """
        Преобразует значение в JSON-сериализуемый формат.

        Args:
            value: Значение для сериализации

        Returns:
            JSON-сериализуемое значение
        """
        if isinstance(value, (date, datetime)):
            return value.isoformat()
        elif isinstance(value, Decimal):
            return str(value)
        elif isinstance(value, Enum):
            return value.value
        elif isinstance(value, Path):
            return str(value)
        elif hasattr(value, '__dict__'):
            return str(value)
        else:
            return value

def setup_logging(log_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Настраивает систему логирования приложения.

    - Создаёт новый файл лога для каждого сеанса (формат: budget_manager_YYYYMMDD_HHMMSS.log)
    - Настраивает JSON форматирование для файла
    - Настраивает текстовый формат для stderr (stdout занят меню)

    Args:
        log_dir: Директория логов (по умолчанию берётся из settings.log_file)

    Returns:
        Path к файлу лога сеанса или None, если файловый лог недоступен
    """
    if log_dir is None:
        log_dir = Path(settings.log_file).parent

    if not log_dir.exists():
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            print(f"CRITICAL: could not create log directory: {e}", file=sys.stderr)
            log_dir = None

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)
    root_logger.handlers = []

    session_log_file = None
    if log_dir is not None:
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        session_log_file = log_dir / f"budget_manager_{timestamp}.log"
        try:
            file_handler = logging.FileHandler(session_log_file, encoding='utf-8')
            file_handler.setFormatter(JsonFormatter())
            root_logger.addHandler(file_handler)
        except OSError as e:
            print(f"CRITICAL: could not open log file: {e}", file=sys.stderr)
            session_log_file = None

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(settings.console_log_level)
    console_handler.setFormatter(logging.Formatter(
        fmt='%(asctime)s | %(levelname)-8s | %(module)s:%(funcName)s | %(message)s',
        datefmt='%H:%M:%S'
    ))
    root_logger.addHandler(console_handler)

    logging.info("Система логирования инициализирована")
    if session_log_file is not None:
        logging.info(f"Логи записываются в: {session_log_file}")
    return session_log_file

def get_logger(name: str) -> logging.Logger:
    """
    Возвращает логгер с указанным именем.

    Args:
        name: Имя логгера (обычно __name__)

    Returns:
        logging.Logger: Настроенный логгер
    """
    return logging.getLogger(name)
