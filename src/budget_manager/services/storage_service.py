"""
Сервис хранения файла покупок.

Файл всегда перезаписывается целиком: это снимок состояния, а не журнал.
"""

from pathlib import Path
from typing import List, Union

from budget_manager.utils.exceptions import StorageError
from budget_manager.utils.logger import get_logger

logger = get_logger(__name__)


class LedgerFileService:
    """
    Чтение и запись файла покупок.

    При создании сервиса файл создаётся пустым, если его ещё нет.

    Args:
        path: Путь к файлу покупок

    Raises:
        StorageError: Если файл не удалось создать
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        if not self.path.exists():
            try:
                self.path.touch()
                logger.info(f"Создан пустой файл покупок: {self.path}")
            except OSError as e:
                logger.error(f"Не удалось создать файл покупок {self.path}: {e}")
                raise StorageError(f"cannot create {self.path}: {e}") from e

    def save(self, text: str) -> bool:
        """
        Перезаписывает файл целиком.

        Ошибка записи не прерывает сеанс: она логируется и возвращается False.

        Args:
            text: Новое содержимое файла

        Returns:
            bool: True, если запись прошла успешно
        """
        try:
            with open(self.path, 'w', encoding='utf-8') as f:
                f.write(text)
        except OSError as e:
            logger.error(f"Ошибка при записи файла покупок {self.path}: {e}")
            return False

        logger.info(f"Файл покупок сохранён: {self.path}")
        return True

    def load_lines(self) -> List[str]:
        """
        Читает файл как список строк без символов перевода строки.

        Raises:
            StorageError: Если файл не удалось прочитать
        """
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Ошибка при чтении файла покупок {self.path}: {e}")
            raise StorageError(f"cannot read {self.path}: {e}") from e

        logger.debug(f"Прочитано {len(lines)} строк из {self.path}")
        return lines
