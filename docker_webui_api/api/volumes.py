"""Маршруты для томов."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, status

from docker_webui_api.api.dependencies import get_provider
from docker_webui_api.api.errors import bad_request, engine_failure
from docker_webui_api.api.schemas import MessageResponse, VolumeCreateRequest, VolumeIdRequest
from docker_webui_api.docker_api.data_provider import DockerDataProvider
from docker_webui_api.docker_api.exceptions import DockerAPIError
from docker_webui_api.docker_api.models import VolumeCreateOptions

LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/volumes", tags=["volumes"])


@router.get("")
def list_volumes(provider: DockerDataProvider = Depends(get_provider)) -> List[Dict[str, Any]]:
    """Список всех томов в виде inspect-записей."""

    try:
        return provider.fetch_volumes()
    except DockerAPIError as exc:
        raise engine_failure("Failed to list volumes", exc) from exc


@router.post("", status_code=status.HTTP_201_CREATED)
def create_volume(
    payload: Optional[VolumeCreateRequest] = None,
    provider: DockerDataProvider = Depends(get_provider),
) -> Dict[str, Any]:
    """Создаёт том и возвращает его inspect-запись."""

    if payload is None or not payload.name:
        raise bad_request("Volume name is required")
    LOGGER.info("Received request to create volume %s (driver=%s)", payload.name, payload.driver)
    options = VolumeCreateOptions(
        name=payload.name,
        driver=payload.driver,
        driver_opts=payload.driver_opts,
        labels=payload.labels,
    )
    try:
        return provider.create_volume(options)
    except DockerAPIError as exc:
        raise engine_failure("Failed to create volume", exc) from exc


@router.delete("", response_model=MessageResponse)
def delete_volume(
    payload: Optional[VolumeIdRequest] = None,
    provider: DockerDataProvider = Depends(get_provider),
) -> MessageResponse:
    volume_id = payload.volume_id if payload else None
    if not volume_id:
        raise bad_request("Volume ID is required")
    try:
        provider.remove_volume(volume_id, force=payload.force)
    except DockerAPIError as exc:
        raise engine_failure("Failed to delete volume", exc) from exc
    return MessageResponse(message="Volume deleted successfully")


@router.get("/{name}")
def inspect_volume(name: str, provider: DockerDataProvider = Depends(get_provider)) -> Dict[str, Any]:
    try:
        return provider.inspect_volume(name)
    except DockerAPIError as exc:
        raise engine_failure("Failed to inspect volume", exc) from exc
