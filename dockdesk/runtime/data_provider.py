"""Фасад операций для интерфейса.

Класс собирает ``CliClient`` из настроек ``runtime`` и функции модулей
``containers``/``images``/``volumes`` в набор именованных команд. Каждая
команда возвращает ``OperationResult``: либо значение (список записей,
словарь или строку), либо текст ошибки. Исключения наружу не выходят.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Protocol

from dockdesk.runtime import containers, images, volumes
from dockdesk.runtime.client import CliClient
from dockdesk.runtime.exceptions import RuntimeAPIError

LOGGER = logging.getLogger(__name__)

# имена команд, доступных через invoke()
COMMANDS = (
    "list_containers",
    "container_action",
    "get_container_logs",
    "inspect_container",
    "get_container_stats",
    "list_images",
    "remove_image",
    "pull_image",
    "list_volumes",
    "remove_volume",
    "create_volume",
)


class SettingsReader(Protocol):
    def get_value(self, group: str, key: str, default: Any = None) -> Any:  # pragma: no cover
        ...


@dataclass(slots=True)
class OperationResult:
    """Итог команды: ``ok`` и ``value`` при успехе, ``error`` при ошибке."""

    ok: bool
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: Any) -> "OperationResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "OperationResult":
        return cls(ok=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        if self.ok:
            return {"ok": True, "value": self.value}
        return {"ok": False, "error": self.error}


class RuntimeDataProvider:
    """Высокоуровневый API контейнеров, образов и томов для GUI."""

    def __init__(self, settings: SettingsReader) -> None:
        self._settings = settings

    # ------------------------------------------------------------------ helpers
    def _create_client(self) -> CliClient:
        """Создаёт клиента CLI по текущим настройкам; новый на каждый вызов."""

        binary = self._settings.get_value("runtime", "binary", default="docker")
        timeout = int(self._settings.get_value("runtime", "command_timeout_sec", default=0) or 0)
        return CliClient(binary, env=self.build_cli_env(), timeout=timeout or None)

    def build_cli_env(self) -> Optional[Dict[str, str]]:
        """Окружение процесса CLI; None означает окружение текущего процесса."""

        docker_host = self._settings.get_value("runtime", "docker_host", default="") or ""
        if not docker_host:
            return None
        env = os.environ.copy()
        env["DOCKER_HOST"] = docker_host
        return env

    def _execute(self, description: str, operation: Callable[[CliClient], Any]) -> OperationResult:
        try:
            value = operation(self._create_client())
        except (RuntimeAPIError, ValueError) as exc:
            LOGGER.error("Cannot %s: %s", description, str(exc).strip())
            return OperationResult.failure(str(exc))
        return OperationResult.success(value)

    # ---------------------------------------------------------------- containers
    def list_containers(self) -> OperationResult:
        return self._execute(
            "list containers",
            lambda client: [item.to_dict() for item in containers.list_containers(client)],
        )

    def container_action(self, container_id: str, action: str) -> OperationResult:
        return self._execute(
            f"{action} container {container_id}",
            lambda client: containers.container_action(client, container_id, action),
        )

    def get_container_logs(self, container_id: str, tail: Optional[int] = None) -> OperationResult:
        if tail is None:
            tail = int(self._settings.get_value("runtime", "logs_tail", default=500))
        return self._execute(
            f"fetch logs for {container_id}",
            lambda client: containers.fetch_logs(client, container_id, tail=int(tail)),
        )

    def inspect_container(self, container_id: str) -> OperationResult:
        return self._execute(
            f"inspect {container_id}",
            lambda client: containers.inspect_container(client, container_id),
        )

    def get_container_stats(self, container_id: str) -> OperationResult:
        return self._execute(
            f"fetch stats for {container_id}",
            lambda client: containers.fetch_stats(client, container_id).to_dict(),
        )

    # -------------------------------------------------------------------- images
    def list_images(self) -> OperationResult:
        return self._execute(
            "list images",
            lambda client: [item.to_dict() for item in images.list_images(client)],
        )

    def remove_image(self, image_id: str) -> OperationResult:
        return self._execute(
            f"remove image {image_id}",
            lambda client: images.remove_image(client, image_id),
        )

    def pull_image(self, image_name: str) -> OperationResult:
        return self._execute(
            f"pull image {image_name}",
            lambda client: images.pull_image(client, image_name),
        )

    # ------------------------------------------------------------------- volumes
    def list_volumes(self) -> OperationResult:
        return self._execute(
            "list volumes",
            lambda client: [item.to_dict() for item in volumes.list_volumes(client)],
        )

    def remove_volume(self, volume_name: str) -> OperationResult:
        return self._execute(
            f"remove volume {volume_name}",
            lambda client: volumes.remove_volume(client, volume_name),
        )

    def create_volume(self, volume_name: str) -> OperationResult:
        return self._execute(
            f"create volume {volume_name}",
            lambda client: volumes.create_volume(client, volume_name),
        )

    # ------------------------------------------------------------------ dispatch
    def invoke(self, command: str, **arguments: Any) -> OperationResult:
        """Вызывает команду по имени, как это делает оболочка GUI."""

        if command not in COMMANDS:
            LOGGER.error("Unknown command requested: %s", command)
            return OperationResult.failure(f"Unknown command: {command}")
        handler = getattr(self, command)
        try:
            return handler(**arguments)
        except TypeError as exc:
            LOGGER.error("Invalid arguments for %s: %s", command, exc)
            return OperationResult.failure(f"Invalid arguments for {command}: {exc}")
