"""
Budget Manager - консольный учёт доходов и покупок по категориям.

Запуск: python -m budget_manager или команда budget-manager.
"""

__version__ = "1.0.0"
