"""Функции для работы с сетями Docker."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from docker_webui_api.docker_api.batch import inspect_all
from docker_webui_api.docker_api.client import ENGINE_ERRORS, DockerClientWrapper
from docker_webui_api.docker_api.exceptions import DockerAPIError

LOGGER = logging.getLogger(__name__)


def list_networks(client: DockerClientWrapper, *, max_workers: int = 8) -> List[Dict[str, Any]]:
    """Возвращает inspect-записи всех сетей."""

    raw = client.get_raw_client()
    try:
        summaries = raw.networks()
        return inspect_all(
            [summary["Id"] for summary in summaries],
            raw.inspect_network,
            max_workers=max_workers,
        )
    except ENGINE_ERRORS as exc:
        LOGGER.error("Error listing networks: %s", exc)
        raise DockerAPIError(str(exc), context={"operation": "list_networks"}) from exc


def inspect_network(client: DockerClientWrapper, network_id: str) -> Dict[str, Any]:
    raw = client.get_raw_client()
    try:
        return raw.inspect_network(network_id)
    except ENGINE_ERRORS as exc:
        LOGGER.error("Error inspecting network %s: %s", network_id, exc)
        raise DockerAPIError(str(exc), context={"network": network_id}) from exc
