"""Маршруты для сетей."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from docker_webui_api.api.dependencies import get_provider
from docker_webui_api.api.errors import engine_failure
from docker_webui_api.docker_api.data_provider import DockerDataProvider
from docker_webui_api.docker_api.exceptions import DockerAPIError

router = APIRouter(prefix="/networks", tags=["networks"])


@router.get("")
def list_networks(provider: DockerDataProvider = Depends(get_provider)) -> List[Dict[str, Any]]:
    """Список всех сетей в виде inspect-записей."""

    try:
        return provider.fetch_networks()
    except DockerAPIError as exc:
        raise engine_failure("Failed to list networks", exc) from exc


@router.get("/{network_id}")
def inspect_network(
    network_id: str, provider: DockerDataProvider = Depends(get_provider)
) -> Dict[str, Any]:
    try:
        return provider.inspect_network(network_id)
    except DockerAPIError as exc:
        raise engine_failure("Failed to inspect network", exc) from exc
