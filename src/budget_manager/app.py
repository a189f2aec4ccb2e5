from pathlib import Path
from typing import Optional, Union

from budget_manager.config import settings
from budget_manager.services.storage_service import LedgerFileService
from budget_manager.session import BudgetSession
from budget_manager.utils.console import Console
from budget_manager.utils.exceptions import StorageError
from budget_manager.utils.logger import setup_logging, get_logger
from budget_manager.views.main_menu import build_main_menu
from budget_manager.views.menu import MenuNavigator

logger = get_logger(__name__)

def create_session(
    ledger_path: Optional[Union[str, Path]] = None,
    console: Optional[Console] = None
) -> BudgetSession:
    """Создаёт сеанс с пустым списком покупок и нулевым балансом."""
    path = Path(ledger_path) if ledger_path is not None else settings.ledger_path
    storage = LedgerFileService(path)
    return BudgetSession(storage=storage, console=console or Console())

def run(session: BudgetSession) -> None:
    MenuNavigator(build_main_menu(), session).run()

def main(ledger_path: Optional[Union[str, Path]] = None, console: Optional[Console] = None) -> int:
    # 1. Настройка логирования
    setup_logging()
    logger.info(f"Запуск приложения {settings.APP_NAME} {settings.VERSION}")

    # 2. Файл покупок
    try:
        session = create_session(ledger_path, console)
    except StorageError as e:
        logger.error(f"Ошибка инициализации файла покупок: {e}")
        (console or Console()).print(f"Critical error: {e}")
        return 1

    # 3. Главное меню
    run(session)
    logger.info("Работа приложения завершена")
    return 0
