"""Консольные меню приложения."""

from budget_manager.views.menu import Menu, MenuNavigator, Navigation
from budget_manager.views.main_menu import build_main_menu

__all__ = [
    "Menu",
    "MenuNavigator",
    "Navigation",
    "build_main_menu",
]
