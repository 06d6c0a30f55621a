"""Функции для работы с образами Docker."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from docker_webui_api.docker_api.batch import inspect_all
from docker_webui_api.docker_api.client import ENGINE_ERRORS, DockerClientWrapper
from docker_webui_api.docker_api.exceptions import DockerAPIError

LOGGER = logging.getLogger(__name__)


def list_images(client: DockerClientWrapper, *, max_workers: int = 8) -> List[Dict[str, Any]]:
    """Возвращает inspect-записи всех образов."""

    raw = client.get_raw_client()
    try:
        summaries = raw.images()
        return inspect_all(
            [summary["Id"] for summary in summaries],
            raw.inspect_image,
            max_workers=max_workers,
        )
    except ENGINE_ERRORS as exc:
        LOGGER.error("Error listing images: %s", exc)
        raise DockerAPIError(str(exc), context={"operation": "list_images"}) from exc


def inspect_image(client: DockerClientWrapper, image_id: str) -> Dict[str, Any]:
    """Возвращает inspect-запись образа."""

    raw = client.get_raw_client()
    try:
        return raw.inspect_image(image_id)
    except ENGINE_ERRORS as exc:
        LOGGER.error("Error inspecting image %s: %s", image_id, exc)
        raise DockerAPIError(str(exc), context={"image": image_id}) from exc


def remove_image(client: DockerClientWrapper, image_id: str, force: bool = False) -> bool:
    """Удаляет образ."""

    raw = client.get_raw_client()
    try:
        raw.remove_image(image_id, force=force)
    except ENGINE_ERRORS as exc:
        LOGGER.error("Error deleting image %s: %s", image_id, exc)
        raise DockerAPIError(str(exc), context={"image": image_id}) from exc
    LOGGER.info("Image %s deleted successfully", image_id)
    return True
