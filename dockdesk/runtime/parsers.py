"""Разбор человекочитаемых значений из вывода docker CLI.

Ни одна функция модуля не бросает исключений: при ошибке разбора
подставляется значение по умолчанию (0, пустая коллекция или текущее время),
чтобы одна испорченная строка не ломала весь список.
"""

from __future__ import annotations

import logging
import math
import re
import time
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from dockdesk.runtime.models import Port

LOGGER = logging.getLogger(__name__)

# Все единицы считаются двоичными, в том числе "GB"/"MB"/"KB"
_SIZE_UNITS: Tuple[Tuple[Tuple[str, ...], int], ...] = (
    (("GB", "GiB"), 1024 * 1024 * 1024),
    (("MB", "MiB"), 1024 * 1024),
    (("KB", "KiB", "kB"), 1024),
)
_TRAILING_UNIT = re.compile(r"[^0-9.]+$")
_DECIMAL = re.compile(r"\d+(?:\.\d*)?|\.\d+")
_CREATED_AT = re.compile(
    r"(?P<stamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}) (?P<offset>[+-]\d{4})"
    r"(?: [A-Za-z]+| [+-]\d{2,4})?"
)
_CREATED_AT_FORMAT = "%Y-%m-%d %H:%M:%S %z"
_MAX_PORT = 65535


def parse_size(value: Any) -> int:
    """Переводит строку вида "1.5GiB", "300kB" или "12B" в байты."""

    if not isinstance(value, str):
        return 0
    text = value.strip()
    multiplier = 1
    for suffixes, factor in _SIZE_UNITS:
        if text.endswith(suffixes):
            multiplier = factor
            break
    number_text = _TRAILING_UNIT.sub("", text)
    if not _DECIMAL.fullmatch(number_text):
        if text:
            LOGGER.debug("Cannot parse size %r, using 0", value)
        return 0
    number = float(number_text)
    if not math.isfinite(number) or number <= 0:
        return 0
    return int(number * multiplier)


def parse_percent(value: Any) -> float:
    """Переводит "12.5%" в 12.5; всё нечисловое даёт 0.0."""

    if not isinstance(value, str):
        return 0.0
    try:
        number = float(value.strip().rstrip("%").strip())
    except ValueError:
        LOGGER.debug("Cannot parse percent %r, using 0.0", value)
        return 0.0
    return number if math.isfinite(number) else 0.0


def parse_usage_pair(value: Any) -> Tuple[int, int]:
    """Разбирает пару "used / limit" (или "rx / tx") в два размера в байтах."""

    if not isinstance(value, str):
        return 0, 0
    parts = value.split(" / ")
    if len(parts) != 2:
        return 0, 0
    return parse_size(parts[0]), parse_size(parts[1])


def parse_created_at(value: Any) -> int:
    """Возвращает epoch-секунды для "2024-01-15 10:30:00 +0000 UTC".

    Буквенное имя зоны после смещения необязательно и не учитывается.
    Если строку разобрать нельзя, возвращается текущее время.
    """

    match = _CREATED_AT.fullmatch(value.strip()) if isinstance(value, str) else None
    if match is not None:
        try:
            moment = datetime.strptime(
                f"{match.group('stamp')} {match.group('offset')}", _CREATED_AT_FORMAT
            )
            return int(moment.timestamp())
        except ValueError:
            pass
    if value:
        LOGGER.debug("Cannot parse timestamp %r, using current time", value)
    return int(time.time())


def parse_ports(value: Any) -> List[Port]:
    """Разбирает "0.0.0.0:8080->80/tcp, 443/tcp" в список опубликованных портов.

    Неопубликованные порты (без "->") пропускаются.
    """

    if not isinstance(value, str) or not value:
        return []
    ports: List[Port] = []
    for token in value.split(", "):
        parts = token.split("->")
        if len(parts) != 2:
            continue
        host_part, container_part = parts

        ip: Optional[str] = None
        if ":" in host_part:
            ip, public_text = host_part.rsplit(":", 1)
        else:
            public_text = host_part

        if "/" in container_part:
            private_text, port_type = container_part.split("/", 1)
            port_type = port_type or "tcp"
        else:
            private_text, port_type = container_part, "tcp"

        ports.append(
            Port(
                ip=ip,
                private_port=_parse_port_number(private_text),
                public_port=_parse_port_number(public_text),
                type=port_type,
            )
        )
    return ports


def parse_labels(value: Any) -> Dict[str, str]:
    """Разбирает "key=value,other=1" из ``ps --format`` в словарь."""

    if not isinstance(value, str) or not value:
        return {}
    labels: Dict[str, str] = {}
    for item in value.split(","):
        if not item:
            continue
        key, _, label_value = item.partition("=")
        labels[key] = label_value
    return labels


def _parse_port_number(text: str) -> int:
    if text.isascii() and text.isdigit():
        number = int(text)
        if number <= _MAX_PORT:
            return number
    LOGGER.debug("Cannot parse port %r, using 0", text)
    return 0
