"""Маршруты для образов."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends

from docker_webui_api.api.dependencies import get_provider
from docker_webui_api.api.errors import bad_request, engine_failure
from docker_webui_api.api.schemas import ImageIdRequest, MessageResponse
from docker_webui_api.docker_api.data_provider import DockerDataProvider
from docker_webui_api.docker_api.exceptions import DockerAPIError

router = APIRouter(prefix="/images", tags=["images"])


@router.get("")
def list_images(provider: DockerDataProvider = Depends(get_provider)) -> List[Dict[str, Any]]:
    """Список всех образов в виде inspect-записей."""

    try:
        return provider.fetch_images()
    except DockerAPIError as exc:
        raise engine_failure("Failed to list images", exc) from exc


@router.delete("", response_model=MessageResponse)
def delete_image(
    payload: Optional[ImageIdRequest] = None,
    provider: DockerDataProvider = Depends(get_provider),
) -> MessageResponse:
    image_id = payload.image_id if payload else None
    if not image_id:
        raise bad_request("Image ID is required")
    try:
        provider.remove_image(image_id, force=payload.force)
    except DockerAPIError as exc:
        raise engine_failure("Failed to delete image", exc) from exc
    return MessageResponse(message="Image deleted successfully")


@router.get("/{image_id:path}")
def inspect_image(image_id: str, provider: DockerDataProvider = Depends(get_provider)) -> Dict[str, Any]:
    # Ссылка на образ может содержать "/" (registry/repo:tag)
    try:
        return provider.inspect_image(image_id)
    except DockerAPIError as exc:
        raise engine_failure("Failed to inspect image", exc) from exc
