"""Запуск docker CLI и получение его вывода."""

from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

from dockdesk.runtime.exceptions import (
    CommandFailedError,
    CommandTimeoutError,
    InvocationError,
    SpawnError,
)

LOGGER = logging.getLogger(__name__)

Runner = Callable[..., "subprocess.CompletedProcess[str]"]


class CommandStatus(str, Enum):
    """Исход запуска внешней команды."""

    SUCCESS = "success"
    FAILED = "failed"
    SPAWN_ERROR = "spawn_error"
    TIMEOUT = "timeout"


@dataclass(slots=True)
class CommandResult:
    """Результат одного вызова CLI.

    При SUCCESS полезные данные лежат в ``stdout``; при остальных статусах
    текст ошибки возвращает свойство ``error``.
    """

    status: CommandStatus
    command: str
    stdout: str = ""
    stderr: str = ""
    returncode: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status is CommandStatus.SUCCESS

    @property
    def error(self) -> str:
        return "" if self.ok else self.stderr

    def unwrap(self) -> str:
        """Возвращает stdout или поднимает исключение, соответствующее статусу."""

        if self.status is CommandStatus.SUCCESS:
            return self.stdout
        if self.status is CommandStatus.SPAWN_ERROR:
            raise SpawnError(self.stderr, context={"command": self.command})
        if self.status is CommandStatus.TIMEOUT:
            raise CommandTimeoutError(self.stderr, context={"command": self.command})
        if self.status is CommandStatus.FAILED:
            raise CommandFailedError(self.stderr, self.returncode or 0, command=self.command)
        raise InvocationError(self.stderr, context={"command": self.command})  # pragma: no cover


class CliClient:
    """Вызывает бинарник рантайма с заданными аргументами.

    Каждый вызов порождает отдельный процесс и дожидается его завершения;
    общего состояния между вызовами нет. ``runner`` позволяет подменить
    ``subprocess.run`` в тестах.
    """

    def __init__(
        self,
        binary: str = "docker",
        *,
        env: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
        runner: Optional[Runner] = None,
    ) -> None:
        self.binary = binary
        self.env = env
        self.timeout = timeout if timeout and timeout > 0 else None
        self._runner: Runner = runner or subprocess.run

    def run(self, *args: str) -> CommandResult:
        command = [self.binary, *args]
        printable = shlex.join(command)
        LOGGER.debug("Running %s", printable)
        kwargs: Dict[str, Any] = {
            "capture_output": True,
            "text": True,
            "encoding": "utf-8",
            "errors": "replace",
            "check": False,
            "env": self.env,
        }
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        try:
            completed = self._runner(command, **kwargs)
        except (OSError, ValueError) as exc:
            # ValueError: NUL-байт в аргументе
            message = f"Failed to execute {self.binary} command: {exc}"
            LOGGER.warning("%s", message)
            return CommandResult(CommandStatus.SPAWN_ERROR, printable, stderr=message)
        except subprocess.TimeoutExpired:
            message = f"Command timed out after {self.timeout} seconds: {printable}"
            LOGGER.warning("%s", message)
            return CommandResult(CommandStatus.TIMEOUT, printable, stderr=message)

        stdout = completed.stdout or ""
        stderr = completed.stderr or ""
        if completed.returncode == 0:
            return CommandResult(
                CommandStatus.SUCCESS, printable, stdout=stdout, stderr=stderr, returncode=0
            )
        LOGGER.warning(
            "Command %s exited with code %s: %s", printable, completed.returncode, stderr.strip()
        )
        return CommandResult(
            CommandStatus.FAILED,
            printable,
            stdout=stdout,
            stderr=stderr,
            returncode=completed.returncode,
        )
