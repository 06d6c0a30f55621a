"""Функции для работы с контейнерами через Docker APIClient."""

from __future__ import annotations

import logging
import shlex
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from docker_webui_api.docker_api.batch import inspect_all
from docker_webui_api.docker_api.client import ENGINE_ERRORS, DockerClientWrapper
from docker_webui_api.docker_api.exceptions import DockerAPIError
from docker_webui_api.docker_api.models import ContainerCreateOptions

LOGGER = logging.getLogger(__name__)


def list_containers(client: DockerClientWrapper, *, max_workers: int = 8) -> List[Dict[str, Any]]:
    """Возвращает полные inspect-записи всех контейнеров (включая остановленные)."""

    raw = client.get_raw_client()
    try:
        summaries = raw.containers(all=True)
        return inspect_all(
            [summary["Id"] for summary in summaries],
            raw.inspect_container,
            max_workers=max_workers,
        )
    except ENGINE_ERRORS as exc:
        LOGGER.error("Error listing containers: %s", exc)
        raise DockerAPIError(str(exc), context={"operation": "list_containers"}) from exc


def inspect_container(client: DockerClientWrapper, container_id: str) -> Dict[str, Any]:
    """Возвращает результат docker inspect."""

    raw = client.get_raw_client()
    try:
        return raw.inspect_container(container_id)
    except ENGINE_ERRORS as exc:
        LOGGER.error("Error inspecting container %s: %s", container_id, exc)
        raise DockerAPIError(str(exc), context={"container": container_id}) from exc


def start_container(client: DockerClientWrapper, container_id: str) -> None:
    """Запускает контейнер."""

    _run_action(client, "start", container_id, "started")


def stop_container(client: DockerClientWrapper, container_id: str) -> None:
    """Останавливает контейнер."""

    _run_action(client, "stop", container_id, "stopped")


def restart_container(client: DockerClientWrapper, container_id: str) -> None:
    """Перезапускает контейнер."""

    _run_action(client, "restart", container_id, "restarted")


def pause_container(client: DockerClientWrapper, container_id: str) -> None:
    """Ставит контейнер на паузу."""

    _run_action(client, "pause", container_id, "paused")


def unpause_container(client: DockerClientWrapper, container_id: str) -> None:
    """Снимает контейнер с паузы."""

    _run_action(client, "unpause", container_id, "unpaused")


def kill_container(client: DockerClientWrapper, container_id: str) -> None:
    """Посылает контейнеру SIGKILL."""

    _run_action(client, "kill", container_id, "killed")


def remove_container(client: DockerClientWrapper, container_id: str) -> bool:
    """Останавливает и удаляет контейнер.

    Ошибка остановки (например, контейнер уже остановлен) только логируется,
    удаление выполняется в любом случае.
    """

    raw = client.get_raw_client()
    try:
        raw.stop(container_id)
    except ENGINE_ERRORS as exc:
        LOGGER.error("Error stopping container %s: %s", container_id, exc)
    try:
        raw.remove_container(container_id)
    except ENGINE_ERRORS as exc:
        LOGGER.error("Error deleting container %s: %s", container_id, exc)
        raise DockerAPIError(str(exc), context={"container": container_id}) from exc
    LOGGER.info("Container %s deleted successfully", container_id)
    return True


def build_create_options(
    image: str,
    name: str,
    *,
    ports: Iterable[Mapping[str, Any]] | None = None,
    command: str | Sequence[str] | None = None,
    autoremove: bool | None = False,
) -> ContainerCreateOptions:
    """Собирает параметры создания контейнера из плоских полей формы.

    Каждая пара hostPort/containerPort даёт один открытый порт и одну
    привязку; записи без одного из портов пропускаются. Несколько hostPort
    для одного containerPort копятся в списке. Строковая команда
    разбивается по правилам shell (`ValueError` для незакрытых кавычек).
    """

    options = ContainerCreateOptions(image=image, name=name, auto_remove=bool(autoremove))
    for mapping in ports or []:
        host_port = _clean_port(mapping.get("hostPort"))
        container_port = _clean_port(mapping.get("containerPort"))
        if not host_port or not container_port:
            continue
        port, protocol = _split_protocol(container_port)
        if (port, protocol) not in options.exposed_ports:
            options.exposed_ports.append((port, protocol))
        host_ports = options.port_bindings.setdefault(f"{port}/{protocol}", [])
        if host_port not in host_ports:
            host_ports.append(host_port)

    if isinstance(command, str):
        options.command = shlex.split(command) or None
    elif command:
        options.command = [str(part) for part in command]
    return options


def create_container(client: DockerClientWrapper, options: ContainerCreateOptions) -> Dict[str, Any]:
    """Создаёт контейнер, запускает его и возвращает inspect-запись."""

    raw = client.get_raw_client()
    try:
        host_config = raw.create_host_config(
            port_bindings=options.port_bindings or None,
            auto_remove=options.auto_remove,
        )
        created = raw.create_container(
            image=options.image,
            command=options.command,
            name=options.name,
            tty=options.tty,
            ports=options.exposed_ports or None,
            host_config=host_config,
        )
        for warning in created.get("Warnings") or []:
            LOGGER.warning("Container %s: %s", options.name, warning)
        container_id = created["Id"]
        raw.start(container_id)
        LOGGER.info("Container %s started successfully", options.name)
        data = raw.inspect_container(container_id)
    except ENGINE_ERRORS as exc:
        LOGGER.error("Error creating container %s: %s", options.name, exc)
        raise DockerAPIError(
            str(exc), context={"container": options.name, "image": options.image}
        ) from exc
    LOGGER.info("Container %s created and started successfully", options.name)
    return data


def _run_action(client: DockerClientWrapper, action: str, container_id: str, done: str) -> None:
    """Вызывает одноимённый метод APIClient (start/stop/...) для контейнера."""

    raw = client.get_raw_client()
    try:
        getattr(raw, action)(container_id)
    except ENGINE_ERRORS as exc:
        LOGGER.error("Error during %s of container %s: %s", action, container_id, exc)
        raise DockerAPIError(str(exc), context={"container": container_id, "action": action}) from exc
    LOGGER.info("Container %s %s successfully", container_id, done)


def _clean_port(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _split_protocol(container_port: str) -> tuple[str, str]:
    port, _, protocol = container_port.partition("/")
    return port, (protocol or "tcp").lower()
