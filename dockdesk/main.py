"""Точка входа dockdesk: выполняет одну команду фасада и печатает результат в JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from dockdesk import __version__
from dockdesk.runtime.containers import CONTAINER_ACTIONS
from dockdesk.runtime.data_provider import RuntimeDataProvider
from dockdesk.settings.exceptions import SettingsError
from dockdesk.settings.registry import SettingsRegistry
from dockdesk.utils.logger import configure_logging
from dockdesk.utils.paths import config_dir

LOGGER = logging.getLogger(__name__)


def initialize_settings(config_path: Path) -> SettingsRegistry:
    """Создаёт реестр настроек и загружает config.json."""

    registry = SettingsRegistry(config_path=config_path)
    registry.load_from_disk()
    return registry


def setup_logging_from_settings(base_dir: Path, settings: Any) -> None:
    """Настраивает журналирование по группе ``logging``."""

    logging_settings = settings.get_group("logging")
    if not logging_settings.get("enabled"):
        logging.disable(logging.CRITICAL)
        return

    logging.disable(logging.NOTSET)
    configure_logging(
        log_dir=base_dir / "logs",
        level_name=logging_settings.get("level", "INFO"),
        max_bytes=logging_settings.get("max_file_size_mb", 10) * 1024 * 1024,
        backup_count=logging_settings.get("max_archived_files", 5),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dockdesk",
        description="Query and control containers, images and volumes via the docker CLI.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list-containers", help="list all containers")

    action = commands.add_parser("container-action", help="start/stop/... a container")
    action.add_argument("container_id")
    action.add_argument("action", help=", ".join(CONTAINER_ACTIONS))

    logs = commands.add_parser("logs", help="print container logs")
    logs.add_argument("container_id")
    logs.add_argument("--tail", type=int, default=None)

    inspect = commands.add_parser("inspect", help="inspect a container")
    inspect.add_argument("container_id")

    stats = commands.add_parser("stats", help="one resource usage snapshot")
    stats.add_argument("container_id")

    commands.add_parser("list-images", help="list images")
    remove_image = commands.add_parser("remove-image", help="remove an image")
    remove_image.add_argument("image_id")
    pull_image = commands.add_parser("pull-image", help="pull an image")
    pull_image.add_argument("image_name")

    commands.add_parser("list-volumes", help="list volumes")
    create_volume = commands.add_parser("create-volume", help="create a volume")
    create_volume.add_argument("volume_name")
    remove_volume = commands.add_parser("remove-volume", help="remove a volume")
    remove_volume.add_argument("volume_name")
    return parser


# подкоманда argparse -> имя команды фасада
_COMMAND_NAMES: Dict[str, str] = {
    "list-containers": "list_containers",
    "container-action": "container_action",
    "logs": "get_container_logs",
    "inspect": "inspect_container",
    "stats": "get_container_stats",
    "list-images": "list_images",
    "remove-image": "remove_image",
    "pull-image": "pull_image",
    "list-volumes": "list_volumes",
    "create-volume": "create_volume",
    "remove-volume": "remove_volume",
}


def main(argv: Optional[List[str]] = None) -> int:
    """Разбирает аргументы, выполняет команду и возвращает код завершения."""

    args = build_parser().parse_args(argv)
    base_dir = config_dir()
    try:
        settings = initialize_settings(base_dir / "config.json")
    except SettingsError as exc:
        print(json.dumps({"ok": False, "error": exc.message}))
        return 1
    setup_logging_from_settings(base_dir, settings)

    arguments = {key: value for key, value in vars(args).items() if key != "command"}
    command = _COMMAND_NAMES[args.command]
    LOGGER.debug("dockdesk %s: %s %s", __version__, command, arguments)

    provider = RuntimeDataProvider(settings)
    result = provider.invoke(command, **arguments)
    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
