"""
Точка входа для запуска через python -m budget_manager
"""
import sys

from budget_manager.app import main

if __name__ == "__main__":
    sys.exit(main())
