"""
Модуль конфигурации приложения Budget Manager.

Содержит настройки:
- Основные параметры приложения (название, версия)
- Путь к файлу покупок
- Настройки логирования
- Персистентность настроек (загрузка/сохранение)
- Управление пользовательской директорией данных
"""

import os
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

class Config:
    """
    Класс конфигурации приложения.
    Реализует паттерн Singleton для доступа к настройкам из любой части приложения.

    Настройки и логи хранятся в директории ~/.budget_manager_data/
    (или в директории из переменной окружения BUDGET_MANAGER_HOME).
    Файл покупок по умолчанию лежит в текущей рабочей директории.
    """

    _instance = None

    # Константы приложения
    APP_NAME = "Budget Manager"
    VERSION = "1.0.0"
    HOME_ENV = "BUDGET_MANAGER_HOME"
    DEFAULT_LEDGER_FILE = "purchases.txt"

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """
        Возвращает путь к директории пользовательских данных.

        Создаёт директорию и поддиректорию logs/ для файлов логов.

        Returns:
            Path: Путь к ~/.budget_manager_data/ или к BUDGET_MANAGER_HOME
        """
        override = os.environ.get(cls.HOME_ENV)
        data_dir = Path(override) if override else Path.home() / ".budget_manager_data"

        data_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Директория пользовательских данных: {data_dir}")

        logs_dir = data_dir / "logs"
        logs_dir.mkdir(exist_ok=True)
        logger.debug(f"Директория логов: {logs_dir}")

        return data_dir

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True

        self.user_data_dir = self.get_user_data_dir()

        self.config_file: str = str(self.user_data_dir / "config.json")
        self.log_file: str = str(self.user_data_dir / "logs" / "budget_manager.log")

        self.ledger_file: str = self.DEFAULT_LEDGER_FILE

        # Настройки логирования
        self.log_level: str = "INFO"
        # Консольный хендлер пишет в stderr, чтобы не мешать выводу меню
        self.console_log_level: str = "WARNING"

        self.load()

    @property
    def ledger_path(self) -> Path:
        """Путь к файлу покупок; относительный путь считается от рабочей директории."""
        return Path(self.ledger_file).expanduser()

    def load(self) -> None:
        """
        Загружает настройки из файла конфигурации.

        Если файл не существует, используются значения по умолчанию.
        """
        if not os.path.exists(self.config_file):
            logger.info(f"Файл конфигурации не найден, используются значения по умолчанию: {self.config_file}")
            return

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)

            self.ledger_file = data.get("ledger_file", self.DEFAULT_LEDGER_FILE)
            self.log_level = data.get("log_level", "INFO")
            self.console_log_level = data.get("console_log_level", "WARNING")

            logger.info(f"Конфигурация загружена из {self.config_file}")

        except Exception as e:
            logger.error(f"Ошибка при загрузке конфигурации: {e}")

    def save(self) -> None:
        """Сохраняет текущие настройки в файл конфигурации."""
        data = {
            "ledger_file": self.ledger_file,
            "log_level": self.log_level,
            "console_log_level": self.console_log_level,
        }

        try:
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=4, ensure_ascii=False)
            logger.info(f"Конфигурация сохранена в {self.config_file}")
        except Exception as e:
            logger.error(f"Ошибка при сохранении конфигурации: {e}")

# Глобальный экземпляр конфигурации
settings = Config()
