"""Пути рабочего каталога приложения."""

from __future__ import annotations

import os
from pathlib import Path


def config_dir() -> Path:
    """Каталог с config.json и logs; корень можно переопределить через DOCKDESK_HOME."""

    return Path(os.environ.get("DOCKDESK_HOME", Path.home())) / ".dockdesk"
