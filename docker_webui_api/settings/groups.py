"""Классы групп настроек с полной поддержкой валидации."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

from docker_webui_api.settings.exceptions import SettingsNotFoundError, SettingsValidationError
from docker_webui_api.settings.validators import (
    CompositeValidator,
    EnumValidator,
    ItemsValidator,
    RangeValidator,
    RegexValidator,
    TypeValidator,
    Validator,
)

DOCKER_URL_PATTERN = r"^((unix|tcp|npipe|http|https|ssh)://.+|/.+)$"
HOST_PATTERN = r"^[A-Za-z0-9\.\-:\[\]]+$"


class SettingsGroup(ABC):
    """Абстрактная база для конкретных групп настроек."""

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
        """Задаёт значения по умолчанию для группы."""

    @abstractmethod
    def _setup_validators(self) -> None:
        """Привязывает валидаторы к ключам группы."""

    def keys(self) -> Tuple[str, ...]:
        """Возвращает доступные ключи группы."""

        return tuple(self._defaults.keys())

    def get(self, key: str, default: Any = None) -> Any:
        """Возвращает значение настройки."""

        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        return self._values.get(key, default)

    def validate(self, key: str, value: Any) -> Tuple[bool, str]:
        """Применяет соответствующий валидатор и возвращает результат."""

        validator = self._validators.get(key)
        if not validator:
            return True, ""
        return validator.validate(value)

    def set(self, key: str, value: Any) -> None:
        """Сохраняет значение, выбрасывая ошибку при невалидных данных."""

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
        """Возвращает копию всех значений."""

        return dict(self._values)

    def from_dict(self, data: Dict[str, Any]) -> None:
        """Заполняет значениями из словаря (использует set для валидации)."""

        for key, value in data.items():
            if key in self._defaults:
                self.set(key, value)

    def reset_to_defaults(self) -> None:
        """Сбрасывает значения группы к дефолтным."""

        self._values = dict(self._defaults)


class ServerSettings(SettingsGroup):
    """Параметры HTTP-сервера."""

    group_name = "server"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "host": "0.0.0.0",
            "port": 3300,
            "cors_origins": ["*"],
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "host": RegexValidator(HOST_PATTERN),
            "port": CompositeValidator([TypeValidator(int), RangeValidator(1, 65535)]),
            "cors_origins": ItemsValidator(TypeValidator(str)),
        }


class DockerSettings(SettingsGroup):
    """Подключение к Docker Engine."""

    group_name = "docker"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "base_url": "unix:///var/run/docker.sock",
            "timeout_sec": 60,
            "connection_timeout_sec": 5,
            "inspect_workers": 8,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "base_url": RegexValidator(DOCKER_URL_PATTERN),
            "timeout_sec": CompositeValidator([TypeValidator(int), RangeValidator(1, 3600)]),
            # 0 отключает ограничение на время создания клиента
            "connection_timeout_sec": CompositeValidator(
                [TypeValidator(int), RangeValidator(0, 120)]
            ),
            "inspect_workers": CompositeValidator([TypeValidator(int), RangeValidator(1, 64)]),
        }


class LoggingSettings(SettingsGroup):
    """Настройки логирования сервиса."""

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
