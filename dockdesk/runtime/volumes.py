"""Операции над томами через docker CLI."""

from __future__ import annotations

from typing import List

from dockdesk.runtime.client import CliClient
from dockdesk.runtime.containers import JSON_FORMAT
from dockdesk.runtime.decoders import decode_lines, decode_volume
from dockdesk.runtime.models import Volume


def list_volumes(client: CliClient) -> List[Volume]:
    """Возвращает тома из ``volume ls``: имя, драйвер, точку монтирования и scope."""

    output = client.run("volume", "ls", "--format", JSON_FORMAT).unwrap()
    return decode_lines(output, decode_volume)


def create_volume(client: CliClient, name: str) -> str:
    return client.run("volume", "create", name).unwrap()


def remove_volume(client: CliClient, name: str) -> str:
    return client.run("volume", "rm", name).unwrap()
