"""Поставщик Docker-данных для HTTP-слоя.

Класс объединяет настройки подключения и функции из
`docker_webui_api.docker_api`: для каждой операции создаётся клиент Docker
Engine, выполняется вызов и клиент закрывается. Ошибки движка не
перехватываются и доходят до обработчиков маршрутов как `DockerAPIError`.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, TimeoutError
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional, Protocol

from docker_webui_api.docker_api import containers, images, networks, volumes
from docker_webui_api.docker_api.client import DockerClientWrapper
from docker_webui_api.docker_api.exceptions import DockerAPIError
from docker_webui_api.docker_api.models import ContainerCreateOptions, VolumeCreateOptions
from docker_webui_api.utils.helpers import normalize_docker_url

LOGGER = logging.getLogger(__name__)


class SettingsSource(Protocol):
    """Минимальный интерфейс реестра настроек."""

    def get_value(self, group: str, key: str, default: Any = None) -> Any:  # pragma: no cover
        """Возвращает значение настройки."""


ClientFactory = Callable[[], DockerClientWrapper]


class DockerDataProvider:
    """Предоставляет высокоуровневый API для работы с Docker-данными."""

    def __init__(
        self, settings: SettingsSource, client_factory: Optional[ClientFactory] = None
    ) -> None:
        self._settings = settings
        self._client_factory = client_factory or self._default_client

    # ------------------------------------------------------------------ helpers
    def _default_client(self) -> DockerClientWrapper:
        base_url = normalize_docker_url(
            str(self._settings.get_value("docker", "base_url", default="unix:///var/run/docker.sock"))
        )
        timeout = int(self._settings.get_value("docker", "timeout_sec", default=60))
        return DockerClientWrapper(base_url, timeout=timeout)

    def _create_client(self) -> DockerClientWrapper:
        """Создаёт Docker client с ограничением времени подключения."""

        timeout = int(self._settings.get_value("docker", "connection_timeout_sec", default=5))
        if timeout <= 0:
            return self._client_factory()

        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(self._client_factory)
        try:
            return future.result(timeout=timeout)
        except TimeoutError as exc:
            if not future.cancel():
                future.add_done_callback(_close_abandoned_client)
            LOGGER.error("Docker client creation timeout after %s seconds", timeout)
            raise DockerAPIError(f"Connection timeout after {timeout} seconds") from exc
        finally:
            executor.shutdown(wait=False)

    @contextmanager
    def _client(self) -> Iterator[DockerClientWrapper]:
        client = self._create_client()
        try:
            yield client
        finally:
            client.close()

    @property
    def _max_workers(self) -> int:
        return int(self._settings.get_value("docker", "inspect_workers", default=8))

    def ping(self) -> bool:
        """Проверяет доступность Docker Engine."""

        try:
            with self._client() as client:
                return client.ping()
        except DockerAPIError:
            return False

    # --------------------------------------------------------------- containers
    def fetch_containers(self) -> List[Dict[str, Any]]:
        """Возвращает inspect-записи всех контейнеров."""

        with self._client() as client:
            return containers.list_containers(client, max_workers=self._max_workers)

    def inspect_container(self, container_id: str) -> Dict[str, Any]:
        with self._client() as client:
            return containers.inspect_container(client, container_id)

    def create_container(self, options: ContainerCreateOptions) -> Dict[str, Any]:
        """Создаёт и запускает контейнер."""

        with self._client() as client:
            return containers.create_container(client, options)

    def start_container(self, container_id: str) -> None:
        with self._client() as client:
            containers.start_container(client, container_id)

    def stop_container(self, container_id: str) -> None:
        with self._client() as client:
            containers.stop_container(client, container_id)

    def restart_container(self, container_id: str) -> None:
        with self._client() as client:
            containers.restart_container(client, container_id)

    def pause_container(self, container_id: str) -> None:
        with self._client() as client:
            containers.pause_container(client, container_id)

    def unpause_container(self, container_id: str) -> None:
        with self._client() as client:
            containers.unpause_container(client, container_id)

    def kill_container(self, container_id: str) -> None:
        with self._client() as client:
            containers.kill_container(client, container_id)

    def remove_container(self, container_id: str) -> bool:
        """Останавливает и удаляет контейнер."""

        with self._client() as client:
            return containers.remove_container(client, container_id)

    # ------------------------------------------------------------------- images
    def fetch_images(self) -> List[Dict[str, Any]]:
        """Возвращает inspect-записи всех образов."""

        with self._client() as client:
            return images.list_images(client, max_workers=self._max_workers)

    def inspect_image(self, image_id: str) -> Dict[str, Any]:
        with self._client() as client:
            return images.inspect_image(client, image_id)

    def remove_image(self, image_id: str, force: bool = False) -> bool:
        with self._client() as client:
            return images.remove_image(client, image_id, force=force)

    # ----------------------------------------------------------------- networks
    def fetch_networks(self) -> List[Dict[str, Any]]:
        """Возвращает inspect-записи всех сетей."""

        with self._client() as client:
            return networks.list_networks(client, max_workers=self._max_workers)

    def inspect_network(self, network_id: str) -> Dict[str, Any]:
        with self._client() as client:
            return networks.inspect_network(client, network_id)

    # ------------------------------------------------------------------ volumes
    def fetch_volumes(self) -> List[Dict[str, Any]]:
        """Возвращает inspect-записи всех томов."""

        with self._client() as client:
            return volumes.list_volumes(client, max_workers=self._max_workers)

    def inspect_volume(self, name: str) -> Dict[str, Any]:
        with self._client() as client:
            return volumes.inspect_volume(client, name)

    def create_volume(self, options: VolumeCreateOptions) -> Dict[str, Any]:
        with self._client() as client:
            return volumes.create_volume(client, options)

    def remove_volume(self, name: str, force: bool = False) -> bool:
        with self._client() as client:
            return volumes.remove_volume(client, name, force=force)


def _close_abandoned_client(future: Future[DockerClientWrapper]) -> None:
    """Закрывает клиент, созданный уже после истечения таймаута."""

    if future.cancelled() or future.exception() is not None:
        return
    LOGGER.debug("Closing Docker client created after connection timeout")
    future.result().close()
