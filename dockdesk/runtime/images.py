"""Операции над образами через docker CLI."""

from __future__ import annotations

from typing import List

from dockdesk.runtime.client import CliClient
from dockdesk.runtime.containers import JSON_FORMAT
from dockdesk.runtime.decoders import decode_image, decode_lines
from dockdesk.runtime.models import Image


def list_images(client: CliClient) -> List[Image]:
    output = client.run("images", "--format", JSON_FORMAT).unwrap()
    return decode_lines(output, decode_image)


def remove_image(client: CliClient, image_id: str) -> str:
    return client.run("rmi", image_id).unwrap()


def pull_image(client: CliClient, image_name: str) -> str:
    """Скачивает образ; возвращает прогресс загрузки в том виде, как его напечатал CLI."""

    return client.run("pull", image_name).unwrap()
