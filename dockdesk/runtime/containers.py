"""Операции над контейнерами через docker CLI."""

from __future__ import annotations

import json
from typing import Dict, List, Tuple

from dockdesk.runtime.client import CliClient
from dockdesk.runtime.decoders import decode_container, decode_lines, decode_stats
from dockdesk.runtime.exceptions import DecodeError, NotFoundError, UnknownActionError
from dockdesk.runtime.models import Container, ContainerStats

JSON_FORMAT = "{{json .}}"

# действие интерфейса -> подкоманда CLI (id контейнера добавляется в конец)
CONTAINER_ACTIONS: Dict[str, Tuple[str, ...]] = {
    "start": ("start",),
    "stop": ("stop",),
    "restart": ("restart",),
    "remove": ("rm", "-f"),
    "pause": ("pause",),
    "unpause": ("unpause",),
}


def list_containers(client: CliClient) -> List[Container]:
    """Возвращает все контейнеры, включая остановленные."""

    output = client.run("ps", "-a", "--format", JSON_FORMAT).unwrap()
    return decode_lines(output, decode_container)


def container_action(client: CliClient, container_id: str, action: str) -> str:
    """Выполняет действие жизненного цикла и возвращает вывод CLI без разбора."""

    subcommand = CONTAINER_ACTIONS.get(action)
    if subcommand is None:
        raise UnknownActionError(action)
    return client.run(*subcommand, container_id).unwrap()


def fetch_logs(client: CliClient, container_id: str, *, tail: int = 500) -> str:
    if tail < 0:
        raise ValueError(f"tail must be non-negative, got {tail}")
    return client.run("logs", "--tail", str(tail), container_id).unwrap()


def inspect_container(client: CliClient, container_id: str) -> str:
    """Возвращает первый элемент ответа ``inspect`` в виде компактного JSON.

    Порядок ключей сохраняется таким, каким его вернул CLI.
    """

    output = client.run("inspect", container_id).unwrap()
    try:
        parsed = json.loads(output)
    except (ValueError, RecursionError) as exc:
        raise DecodeError(f"Failed to parse inspect output: {exc}") from exc
    if not isinstance(parsed, list):
        raise DecodeError(
            f"Failed to parse inspect output: expected array, got {type(parsed).__name__}"
        )
    if not parsed:
        raise NotFoundError("No container found", context={"container_id": container_id})
    return json.dumps(parsed[0], ensure_ascii=False, separators=(",", ":"))


def fetch_stats(client: CliClient, container_id: str) -> ContainerStats:
    """Снимает один срез ``stats`` без потокового режима."""

    output = client.run("stats", "--no-stream", "--format", JSON_FORMAT, container_id).unwrap()
    for line in output.splitlines():
        if line.strip():
            return decode_stats(line.strip())
    raise NotFoundError("No stats available", context={"container_id": container_id})
