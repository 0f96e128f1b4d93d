"""Дефолтная схема config.json."""

from __future__ import annotations

from typing import Any, Dict

# DEFAULT_CONFIG записывается на диск при первом запуске
DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "logging": {
        "enabled": True,
        "level": "INFO",
        "max_file_size_mb": 10,
        "max_archived_files": 5,
    },
    "runtime": {
        "binary": "docker",
        "docker_host": "",
        "command_timeout_sec": 0,
        "logs_tail": 500,
    },
}
