"""Настройки приложения: группы, валидаторы и реестр config.json."""
