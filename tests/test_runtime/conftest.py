"""Общие фикстуры: подмена subprocess.run для CliClient."""

from __future__ import annotations

import subprocess
from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest

from dockdesk.runtime.client import CliClient


class FakeRunner:
    """Записывает вызовы и возвращает заранее заданный результат процесса."""

    def __init__(
        self,
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
        error: Optional[BaseException] = None,
    ) -> None:
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode
        self.error = error
        self.calls: List[Tuple[List[str], Dict[str, Any]]] = []

    def __call__(self, command: List[str], **kwargs: Any) -> "subprocess.CompletedProcess[str]":
        self.calls.append((command, kwargs))
        if self.error is not None:
            raise self.error
        return subprocess.CompletedProcess(
            command, self.returncode, stdout=self.stdout, stderr=self.stderr
        )

    @property
    def commands(self) -> List[List[str]]:
        return [command for command, _ in self.calls]


@pytest.fixture
def make_client() -> Callable[..., Tuple[CliClient, FakeRunner]]:
    def factory(**kwargs: Any) -> Tuple[CliClient, FakeRunner]:
        runner = FakeRunner(**kwargs)
        return CliClient("docker", runner=runner), runner

    return factory


@pytest.fixture
def fake_runner() -> Callable[..., FakeRunner]:
    """Фабрика FakeRunner для тестов, которым нужен сам runner."""

    return FakeRunner
