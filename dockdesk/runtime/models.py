"""Записи, которые слой рантайма отдаёт интерфейсу.

Каждая запись - снимок на момент запроса; ``to_dict`` возвращает словарь
с ключами в том виде, в каком их ожидает фронтенд.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(slots=True)
class Port:
    """Опубликованный порт контейнера."""

    private_port: int
    ip: Optional[str] = None
    public_port: Optional[int] = None
    type: str = "tcp"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "IP": self.ip,
            "PrivatePort": self.private_port,
            "PublicPort": self.public_port,
            "Type": self.type,
        }


@dataclass(slots=True)
class Container:
    """Контейнер из ``ps -a``."""

    id: str
    names: List[str] = field(default_factory=list)
    image: str = ""
    image_id: str = ""  # в выводе ps отсутствует
    command: str = ""
    created: int = 0
    ports: List[Port] = field(default_factory=list)
    state: str = ""
    status: str = ""
    labels: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Id": self.id,
            "Names": list(self.names),
            "Image": self.image,
            "ImageID": self.image_id,
            "Command": self.command,
            "Created": self.created,
            "Ports": [port.to_dict() for port in self.ports],
            "State": self.state,
            "Status": self.status,
            "Labels": dict(self.labels),
        }


@dataclass(slots=True)
class Image:
    """Образ из ``images``. Счётчики, которых нет в компактном выводе, равны нулю."""

    id: str
    parent_id: str = ""
    repo_tags: List[str] = field(default_factory=list)
    repo_digests: Optional[List[str]] = None
    created: int = 0
    size: int = 0
    shared_size: int = 0
    virtual_size: Optional[int] = None
    labels: Optional[Dict[str, str]] = None
    containers: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Id": self.id,
            "ParentId": self.parent_id,
            "RepoTags": list(self.repo_tags),
            "RepoDigests": self.repo_digests,
            "Created": self.created,
            "Size": self.size,
            "SharedSize": self.shared_size,
            "VirtualSize": self.virtual_size,
            "Labels": self.labels,
            "Containers": self.containers,
        }


@dataclass(slots=True)
class UsageData:
    size: int
    ref_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"Size": self.size, "RefCount": self.ref_count}


@dataclass(slots=True)
class Volume:
    """Том из ``volume ls``; расширенные метаданные не заполняются."""

    name: str
    driver: str = ""
    mountpoint: str = ""
    scope: str = "local"
    created_at: Optional[str] = None
    status: Optional[Dict[str, str]] = None
    labels: Optional[Dict[str, str]] = None
    options: Optional[Dict[str, str]] = None
    usage_data: Optional[UsageData] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Name": self.name,
            "Driver": self.driver,
            "Mountpoint": self.mountpoint,
            "CreatedAt": self.created_at,
            "Status": self.status,
            "Labels": self.labels,
            "Scope": self.scope,
            "Options": self.options,
            "UsageData": self.usage_data.to_dict() if self.usage_data else None,
        }


@dataclass(slots=True)
class ContainerStats:
    """Мгновенный срез потребления ресурсов контейнером (байты и проценты)."""

    cpu_percent: float = 0.0
    memory_usage: int = 0
    memory_limit: int = 0
    memory_percent: float = 0.0
    network_rx: int = 0
    network_tx: int = 0
    block_read: int = 0
    block_write: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cpu_percent": self.cpu_percent,
            "memory_usage": self.memory_usage,
            "memory_limit": self.memory_limit,
            "memory_percent": self.memory_percent,
            "network_rx": self.network_rx,
            "network_tx": self.network_tx,
            "block_read": self.block_read,
            "block_write": self.block_write,
        }
