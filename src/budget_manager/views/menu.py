"""
Консольные меню и диспетчер выбора пунктов.

Вложенные меню хранятся в явном стеке: вход в подменю кладёт его
на вершину, "Back" снимает вершину, Exit очищает стек.
"""

from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Tuple, Union

from budget_manager.utils.console import Console
from budget_manager.utils.error_handler import ErrorHandler
from budget_manager.utils.exceptions import InputClosedError, InputParseError
from budget_manager.utils.logger import get_logger

if TYPE_CHECKING:
    from budget_manager.session import BudgetSession

logger = get_logger(__name__)


class Navigation(Enum):
    """
    Переход после выполнения пункта меню.

    Attributes:
        STAY: Остаться в текущем меню
        BACK: Вернуться в родительское меню
        EXIT: Завершить работу
    """
    STAY = "stay"
    BACK = "back"
    EXIT = "exit"


ActionResult = Union[None, Navigation, "Menu"]
Action = Callable[["BudgetSession"], ActionResult]


class Menu:
    """
    Именованный упорядоченный набор пунктов.

    Пункт - это номер, подпись и действие. Действие получает сеанс и
    может вернуть Navigation или новое Menu, которое откроется как подменю.
    """

    def __init__(self, name: str):
        self.name = name
        self._actions: Dict[int, Tuple[str, Action]] = {}

    def add_action(self, option: int, label: str, action: Action) -> "Menu":
        self._actions[option] = (label, action)
        return self

    @property
    def options(self) -> List[Tuple[int, str]]:
        return [(option, label) for option, (label, _) in self._actions.items()]

    def show(self, console: Console) -> None:
        console.print(self.name)
        for option, label in self.options:
            console.print(f"{option}) {label}")

    def execute(self, option: int, session: "BudgetSession") -> ActionResult:
        """Выполняет пункт меню; для неизвестного номера печатает "Invalid option."."""
        entry = self._actions.get(option)
        if entry is None:
            logger.debug(f"Неизвестный пункт {option} в меню {self.name!r}")
            session.console.print("Invalid option.")
            return Navigation.STAY
        label, action = entry
        logger.debug(f"Выбран пункт {option}) {label}")
        return action(session)

    def __repr__(self) -> str:
        return f"Menu({self.name!r})"


class MenuNavigator:
    """
    Цикл чтения и выполнения пунктов для стека меню.

    Args:
        root: Главное меню
        session: Сеанс, передаваемый каждому действию
    """

    def __init__(self, root: Menu, session: "BudgetSession"):
        self.session = session
        self.stack: List[Menu] = [root]
        self._errors = ErrorHandler(session.console)

    @property
    def current(self) -> Optional[Menu]:
        return self.stack[-1] if self.stack else None

    def apply(self, result: ActionResult) -> None:
        if isinstance(result, Menu):
            self.stack.append(result)
        elif result is Navigation.BACK:
            if len(self.stack) > 1:
                self.stack.pop()
        elif result is Navigation.EXIT:
            self.stack.clear()

    def step(self) -> None:
        """
        Один шаг: показать меню, прочитать номер, выполнить пункт.

        Пустая строка после действия печатается, только если остаёмся в
        текущем меню; подменю, возврат и выход показываются сразу.
        """
        console = self.session.console
        menu = self.current
        menu.show(console)
        try:
            choice = console.read_int()
        except InputParseError as e:
            console.print()
            self._errors.handle(e, context_message=f"Menu {menu.name!r}")
            console.print()
            return
        console.print()
        result = menu.execute(choice, self.session)
        if result is None or result is Navigation.STAY:
            console.print()
        self.apply(result)

    def run(self) -> None:
        """Работает, пока стек не опустеет или не закроется поток ввода."""
        try:
            while self.stack:
                self.step()
        except InputClosedError:
            logger.info("Ввод закрыт, работа завершается")
            self.stack.clear()
