"""Группы настроек с валидацией значений."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

from dockdesk.settings.exceptions import SettingsNotFoundError, SettingsValidationError
from dockdesk.settings.validators import (
    CompositeValidator,
    EnumValidator,
    RangeValidator,
    RegexValidator,
    TypeValidator,
    Validator,
)

# исполняемый файл CLI: одно слово без пробелов (имя из PATH или абсолютный путь)
BINARY_PATTERN = r"\S+"
# пустая строка либо адрес в формате DOCKER_HOST
DOCKER_HOST_PATTERN = r"(|(unix|tcp|ssh|npipe|http|https)://\S+)"


class SettingsGroup(ABC):
    """Базовый класс группы: дефолты, валидаторы и текущие значения."""

    group_name: str = ""

    def __init__(self) -> None:
        self._defaults: Dict[str, Any] = {}
        self._validators: Dict[str, Validator] = {}
        self._values: Dict[str, Any] = {}
        self._initialize_defaults()
        self._setup_validators()
        self.reset_to_defaults()

    @abstractmethod
    def _initialize_defaults(self) -> None:
        """Заполняет self._defaults."""

    @abstractmethod
    def _setup_validators(self) -> None:
        """Заполняет self._validators."""

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._defaults.keys())

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        return self._values.get(key, default)

    def validate(self, key: str, value: Any) -> Tuple[bool, str]:
        validator = self._validators.get(key)
        if not validator:
            return True, ""
        return validator.validate(value)

    def set(self, key: str, value: Any) -> None:
        """Сохраняет значение; невалидное значение приводит к SettingsValidationError."""

        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        is_valid, error = self.validate(key, value)
        if not is_valid:
            raise SettingsValidationError(
                key=f"{self.group_name}.{key}",
                value=value,
                reason=error,
            )
        self._values[key] = value

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def from_dict(self, data: Dict[str, Any]) -> None:
        """Загружает известные ключи из словаря, неизвестные игнорируются."""

        for key, value in data.items():
            if key in self._defaults:
                self.set(key, value)

    def reset_to_defaults(self) -> None:
        self._values = dict(self._defaults)


class LoggingSettings(SettingsGroup):
    """Настройки журналирования."""

    group_name = "logging"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "enabled": True,
            "level": "INFO",
            "max_file_size_mb": 10,
            "max_archived_files": 5,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "enabled": TypeValidator(bool),
            "level": EnumValidator(["DEBUG", "INFO", "WARNING", "ERROR"]),
            "max_file_size_mb": RangeValidator(1, 1000),
            "max_archived_files": RangeValidator(1, 50),
        }


class RuntimeSettings(SettingsGroup):
    """Параметры вызова CLI контейнерного рантайма."""

    group_name = "runtime"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "binary": "docker",
            "docker_host": "",
            "command_timeout_sec": 0,  # 0 - ждать завершения процесса без ограничения
            "logs_tail": 500,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "binary": CompositeValidator([TypeValidator(str), RegexValidator(BINARY_PATTERN)]),
            "docker_host": RegexValidator(DOCKER_HOST_PATTERN),
            "command_timeout_sec": RangeValidator(0, 3600),
            "logs_tail": RangeValidator(0, 100000),
        }
