"""Маршруты для контейнеров."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from fastapi import APIRouter, Depends, status

from docker_webui_api.api.dependencies import get_provider
from docker_webui_api.api.errors import bad_request, engine_failure
from docker_webui_api.api.schemas import (
    ContainerCreateRequest,
    ContainerIdRequest,
    MessageResponse,
)
from docker_webui_api.docker_api.containers import build_create_options
from docker_webui_api.docker_api.data_provider import DockerDataProvider
from docker_webui_api.docker_api.exceptions import DockerAPIError

LOGGER = logging.getLogger(__name__)

router = APIRouter(prefix="/containers", tags=["containers"])


@router.get("")
def list_containers(provider: DockerDataProvider = Depends(get_provider)) -> List[Dict[str, Any]]:
    """Список всех контейнеров в виде inspect-записей."""

    try:
        return provider.fetch_containers()
    except DockerAPIError as exc:
        raise engine_failure("Failed to list containers", exc) from exc


@router.post("", status_code=status.HTTP_201_CREATED)
def create_container(
    payload: Optional[ContainerCreateRequest] = None,
    provider: DockerDataProvider = Depends(get_provider),
) -> Dict[str, Any]:
    """Создаёт и запускает контейнер, возвращает его inspect-запись."""

    form = payload.form_data if payload else None
    if form is None or not form.image_name or not form.container_name:
        raise bad_request("Image and name are required")

    try:
        options = build_create_options(
            form.image_name,
            form.container_name,
            ports=[port.model_dump(by_alias=True) for port in form.ports or []],
            command=form.command,
            autoremove=form.autoremove,
        )
    except ValueError as exc:
        LOGGER.warning(
            "Rejected command %r for container %s: %s", form.command, form.container_name, exc
        )
        raise bad_request("Invalid command") from exc
    LOGGER.info(
        "Received request to create container %s from %s (ports=%s, command=%s, autoremove=%s)",
        options.name,
        options.image,
        options.port_bindings,
        options.command,
        options.auto_remove,
    )
    try:
        return provider.create_container(options)
    except DockerAPIError as exc:
        raise engine_failure("Failed to create container", exc) from exc


@router.delete("", response_model=MessageResponse)
def delete_container(
    payload: Optional[ContainerIdRequest] = None,
    provider: DockerDataProvider = Depends(get_provider),
) -> MessageResponse:
    container_id = _require_container_id(payload)
    return _remove(provider, container_id)


@router.post("/restart", response_model=MessageResponse)
def restart_container(
    payload: Optional[ContainerIdRequest] = None,
    provider: DockerDataProvider = Depends(get_provider),
) -> MessageResponse:
    return _run_action(provider.restart_container, payload, "restart", "restarted")


@router.post("/stop", response_model=MessageResponse)
def stop_container(
    payload: Optional[ContainerIdRequest] = None,
    provider: DockerDataProvider = Depends(get_provider),
) -> MessageResponse:
    return _run_action(provider.stop_container, payload, "stop", "stopped")


@router.post("/start", response_model=MessageResponse)
def start_container(
    payload: Optional[ContainerIdRequest] = None,
    provider: DockerDataProvider = Depends(get_provider),
) -> MessageResponse:
    return _run_action(provider.start_container, payload, "start", "started")


@router.post("/pause", response_model=MessageResponse)
def pause_container(
    payload: Optional[ContainerIdRequest] = None,
    provider: DockerDataProvider = Depends(get_provider),
) -> MessageResponse:
    return _run_action(provider.pause_container, payload, "pause", "paused")


@router.post("/unpause", response_model=MessageResponse)
def unpause_container(
    payload: Optional[ContainerIdRequest] = None,
    provider: DockerDataProvider = Depends(get_provider),
) -> MessageResponse:
    return _run_action(provider.unpause_container, payload, "unpause", "unpaused")


@router.post("/kill", response_model=MessageResponse)
def kill_container(
    payload: Optional[ContainerIdRequest] = None,
    provider: DockerDataProvider = Depends(get_provider),
) -> MessageResponse:
    return _run_action(provider.kill_container, payload, "kill", "killed")


@router.get("/{container_id}")
def inspect_container(
    container_id: str, provider: DockerDataProvider = Depends(get_provider)
) -> Dict[str, Any]:
    try:
        return provider.inspect_container(container_id)
    except DockerAPIError as exc:
        raise engine_failure("Failed to inspect container", exc) from exc


@router.delete("/{container_id}", response_model=MessageResponse)
def delete_container_by_id(
    container_id: str, provider: DockerDataProvider = Depends(get_provider)
) -> MessageResponse:
    return _remove(provider, container_id)


# ----------------------------------------------------------------- helpers
def _require_container_id(payload: Optional[ContainerIdRequest]) -> str:
    container_id = payload.container_id if payload else None
    if not container_id:
        raise bad_request("Container ID is required")
    return container_id


def _remove(provider: DockerDataProvider, container_id: str) -> MessageResponse:
    try:
        provider.remove_container(container_id)
    except DockerAPIError as exc:
        raise engine_failure("Failed to delete container", exc) from exc
    return MessageResponse(message="Container deleted successfully")


def _run_action(
    action: Callable[[str], None],
    payload: Optional[ContainerIdRequest],
    verb: str,
    done: str,
) -> MessageResponse:
    container_id = _require_container_id(payload)
    try:
        action(container_id)
    except DockerAPIError as exc:
        raise engine_failure(f"Failed to {verb} container", exc) from exc
    return MessageResponse(message=f"Container {done} successfully")
