"""Функции для работы с томами Docker."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from docker_webui_api.docker_api.batch import inspect_all
from docker_webui_api.docker_api.client import ENGINE_ERRORS, DockerClientWrapper
from docker_webui_api.docker_api.exceptions import DockerAPIError
from docker_webui_api.docker_api.models import VolumeCreateOptions

LOGGER = logging.getLogger(__name__)


def list_volumes(client: DockerClientWrapper, *, max_workers: int = 8) -> List[Dict[str, Any]]:
    """Возвращает inspect-записи всех томов.

    Предупреждения движка из ответа на list только логируются.
    """

    raw = client.get_raw_client()
    try:
        response = raw.volumes() or {}
        for warning in response.get("Warnings") or []:
            LOGGER.warning("Volume listing warning: %s", warning)
        return inspect_all(
            [volume["Name"] for volume in response.get("Volumes") or []],
            raw.inspect_volume,
            max_workers=max_workers,
        )
    except ENGINE_ERRORS as exc:
        LOGGER.error("Error listing volumes: %s", exc)
        raise DockerAPIError(str(exc), context={"operation": "list_volumes"}) from exc


def inspect_volume(client: DockerClientWrapper, name: str) -> Dict[str, Any]:
    raw = client.get_raw_client()
    try:
        return raw.inspect_volume(name)
    except ENGINE_ERRORS as exc:
        LOGGER.error("Error inspecting volume %s: %s", name, exc)
        raise DockerAPIError(str(exc), context={"volume": name}) from exc


def create_volume(client: DockerClientWrapper, options: VolumeCreateOptions) -> Dict[str, Any]:
    """Создаёт том и возвращает его inspect-запись."""

    raw = client.get_raw_client()
    try:
        created = raw.create_volume(
            name=options.name,
            driver=options.driver,
            driver_opts=options.driver_opts,
            labels=options.labels,
        )
        name = created.get("Name", options.name)
        LOGGER.info("Volume %s created successfully", name)
        data = raw.inspect_volume(name)
    except ENGINE_ERRORS as exc:
        LOGGER.error("Error creating volume %s: %s", options.name, exc)
        raise DockerAPIError(str(exc), context={"volume": options.name}) from exc
    LOGGER.info("Volume %s created and inspected successfully", name)
    return data


def remove_volume(client: DockerClientWrapper, name: str, force: bool = False) -> bool:
    """Удаляет том."""

    raw = client.get_raw_client()
    try:
        raw.remove_volume(name, force=force)
    except ENGINE_ERRORS as exc:
        LOGGER.error("Error deleting volume %s: %s", name, exc)
        raise DockerAPIError(str(exc), context={"volume": name}) from exc
    LOGGER.info("Volume %s deleted successfully", name)
    return True
