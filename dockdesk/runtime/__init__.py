"""Адаптер docker CLI: запуск команд, разбор вывода и фасад операций."""
