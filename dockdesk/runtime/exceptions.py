"""Ошибки слоя работы с CLI контейнерного рантайма.

Два уровня: ошибки вызова (процесс не запустился, завершился с ненулевым
кодом или по таймауту) и ошибки разбора вывода.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

LOGGER = logging.getLogger(__name__)


class RuntimeAPIError(Exception):
    """Базовое исключение; сообщение показывается пользователю как есть."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)
        LOGGER.error("%s | context=%s", message.strip(), self.context)


class InvocationError(RuntimeAPIError):
    """Внешний процесс не отработал успешно."""


class SpawnError(InvocationError):
    """Исполняемый файл не удалось запустить (не найден, нет прав)."""


class CommandFailedError(InvocationError):
    """Процесс завершился с ненулевым кодом; сообщение - его stderr."""

    def __init__(self, stderr: str, returncode: int, *, command: str = "") -> None:
        self.returncode = returncode
        super().__init__(stderr, context={"returncode": returncode, "command": command})


class CommandTimeoutError(InvocationError):
    """Процесс не завершился за отведённое время."""


class DecodeError(RuntimeAPIError):
    """Вывод CLI не удалось привести к ожидаемой структуре."""


class NotFoundError(RuntimeAPIError):
    """CLI ответил корректно, но объекта в ответе нет."""


class UnknownActionError(RuntimeAPIError):
    """Запрошено действие над контейнером, которого нет в таблице команд."""

    def __init__(self, action: str) -> None:
        self.action = action
        super().__init__(f"Unknown action: {action}", context={"action": action})
