"""Преобразование строк ``--format {{json .}}`` в записи моделей."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

from dockdesk.runtime.exceptions import DecodeError
from dockdesk.runtime.models import Container, ContainerStats, Image, Volume
from dockdesk.runtime.parsers import (
    parse_created_at,
    parse_labels,
    parse_percent,
    parse_ports,
    parse_size,
    parse_usage_pair,
)

LOGGER = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")

_NONE_VALUE = "<none>"
_DIGEST_PREFIX = "sha256:"


def decode_lines(output: str, decoder: Callable[[str], Optional[RecordT]]) -> List[RecordT]:
    """Декодирует каждую непустую строку вывода, пропуская нераспознанные."""

    records: List[RecordT] = []
    for line in output.splitlines():
        line = line.strip()
        if not line:
            continue
        record = decoder(line)
        if record is None:
            LOGGER.warning("Skipping undecodable line: %.200s", line)
            continue
        records.append(record)
    return records


def decode_container(line: str) -> Optional[Container]:
    payload = _load_object(line)
    if payload is None:
        return None
    identifier = _text(payload, "ID")
    if not identifier:
        return None
    return Container(
        id=identifier,
        names=[name for name in _text(payload, "Names").split(",") if name],
        image=_text(payload, "Image"),
        command=_text(payload, "Command"),
        created=parse_created_at(_text(payload, "CreatedAt")),
        ports=parse_ports(_text(payload, "Ports")),
        state=_text(payload, "State"),
        status=_text(payload, "Status"),
        labels=parse_labels(_text(payload, "Labels")),
    )


def decode_image(line: str) -> Optional[Image]:
    """Образ из ``images``: короткий ID дополняется префиксом ``sha256:``."""

    payload = _load_object(line)
    if payload is None:
        return None
    repository = _text(payload, "Repository", _NONE_VALUE)
    tag = _text(payload, "Tag", _NONE_VALUE)
    repo_tags = [f"{repository}:{tag}"] if repository != _NONE_VALUE else []

    identifier = _text(payload, "ID")
    if not identifier.startswith(_DIGEST_PREFIX):
        identifier = f"{_DIGEST_PREFIX}{identifier}"

    virtual_size = payload.get("VirtualSize")
    return Image(
        id=identifier,
        repo_tags=repo_tags,
        created=parse_created_at(_text(payload, "CreatedAt")),
        size=parse_size(_text(payload, "Size", "0B")),
        virtual_size=parse_size(virtual_size) if isinstance(virtual_size, str) else None,
        containers=_count(payload.get("Containers")),
    )


def decode_volume(line: str) -> Optional[Volume]:
    payload = _load_object(line)
    if payload is None:
        return None
    return Volume(
        name=_text(payload, "Name"),
        driver=_text(payload, "Driver"),
        mountpoint=_text(payload, "Mountpoint"),
        scope=_text(payload, "Scope", "local"),
    )


def decode_stats(line: str) -> ContainerStats:
    """Декодирует одну строку ``stats --no-stream``.

    В отличие от списков, здесь строка единственная, поэтому ошибка разбора
    превращается в DecodeError.
    """

    try:
        payload = json.loads(line)
    except (ValueError, RecursionError) as exc:
        raise DecodeError(f"Failed to parse stats: {exc}") from exc
    if not isinstance(payload, dict):
        raise DecodeError(f"Failed to parse stats: expected object, got {type(payload).__name__}")

    memory_usage, memory_limit = parse_usage_pair(_text(payload, "MemUsage", "0B / 0B"))
    network_rx, network_tx = parse_usage_pair(_text(payload, "NetIO", "0B / 0B"))
    block_read, block_write = parse_usage_pair(_text(payload, "BlockIO", "0B / 0B"))
    return ContainerStats(
        cpu_percent=parse_percent(_text(payload, "CPUPerc", "0%")),
        memory_usage=memory_usage,
        memory_limit=memory_limit,
        memory_percent=parse_percent(_text(payload, "MemPerc", "0%")),
        network_rx=network_rx,
        network_tx=network_tx,
        block_read=block_read,
        block_write=block_write,
    )


def _load_object(line: str) -> Optional[Dict[str, Any]]:
    try:
        payload = json.loads(line)
    except (ValueError, RecursionError):
        return None
    return payload if isinstance(payload, dict) else None


def _text(payload: Dict[str, Any], key: str, default: str = "") -> str:
    value = payload.get(key)
    return value if isinstance(value, str) else default


def _count(value: Any) -> int:
    # docker images печатает "N/A", если счётчик не вычислялся
    if isinstance(value, int) and not isinstance(value, bool):
        return max(value, 0)
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    return 0
