"""Точка входа сервиса Docker WebUI API."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import uvicorn

from docker_webui_api import __version__
from docker_webui_api.app import create_application
from docker_webui_api.docker_api.data_provider import DockerDataProvider
from docker_webui_api.settings.exceptions import SettingsError
from docker_webui_api.settings.registry import SettingsRegistry
from docker_webui_api.utils.logger import configure_logging

LOGGER = logging.getLogger(__name__)


def initialize_settings(config_path: Path) -> SettingsRegistry:
    """Получает singleton реестр настроек и загружает config.json."""

    registry = SettingsRegistry(config_path=config_path)
    registry.load_from_disk()
    return registry


def setup_logging_from_settings(base_dir: Path, settings: SettingsRegistry) -> None:
    """Настраивает логирование в соответствии с LoggingSettings."""

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


def initialize_workdir(base_dir: Path) -> bool:
    """Создаёт рабочую структуру (~/.docker-webui-api/logs)."""

    try:
        base_dir.mkdir(parents=True, exist_ok=True)
        (base_dir / "logs").mkdir(exist_ok=True)
        return True
    except OSError as exc:
        LOGGER.error("Cannot initialize workspace directory %s: %s", base_dir, exc)
        return False


def main() -> int:
    """Основная точка входа: готовит окружение и запускает HTTP-сервер."""

    home_dir = Path(os.environ.get("DWA_HOME", Path.home()))
    base_dir = home_dir / ".docker-webui-api"
    if not initialize_workdir(base_dir):
        return 1
    configure_logging(base_dir / "logs")

    try:
        settings = initialize_settings(base_dir / "config.json")
    except SettingsError:
        return 1
    setup_logging_from_settings(base_dir, settings)

    provider = DockerDataProvider(settings)
    app = create_application(settings, provider)

    host = settings.get_value("server", "host")
    port = settings.get_value("server", "port")
    LOGGER.info("Starting Docker WebUI API %s on http://%s:%s", __version__, host, port)
    uvicorn.run(app, host=host, port=port, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
