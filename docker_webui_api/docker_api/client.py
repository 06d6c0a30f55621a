"""Обёртка над низкоуровневым клиентом docker-py."""

from __future__ import annotations

import logging
from typing import Any, Tuple, Type

import docker
from docker.errors import DockerException
from requests.exceptions import RequestException

from docker_webui_api.docker_api.exceptions import DockerAPIError

LOGGER = logging.getLogger(__name__)

# Ошибки, которые считаются сбоем Docker Engine (API, сокет, HTTP-транспорт)
ENGINE_ERRORS: Tuple[Type[Exception], ...] = (DockerException, RequestException)


class DockerClientWrapper:
    """Управляет созданием и использованием docker APIClient."""

    def __init__(self, base_url: str, *, timeout: int = 60, raw_client: Any | None = None) -> None:
        self.base_url = base_url  # Адрес сокета Docker Engine
        self.timeout = timeout
        self._client = raw_client or self._create_client()

    def _create_client(self) -> Any:
        try:
            return docker.APIClient(base_url=self.base_url, timeout=self.timeout)
        except ENGINE_ERRORS as exc:
            LOGGER.error("Docker client init error via %s: %s", self.base_url, exc)
            raise DockerAPIError(str(exc), context={"base_url": self.base_url}) from exc

    def get_raw_client(self) -> Any:
        """Возвращает внутренний docker APIClient."""

        return self._client

    def ping(self) -> bool:
        """Проверяет доступность Docker."""

        try:
            return bool(self._client.ping())
        except ENGINE_ERRORS as exc:
            LOGGER.error("Docker ping failed: %s", exc)
            return False

    def close(self) -> None:
        """Закрывает HTTP-сессию клиента."""

        close = getattr(self._client, "close", None)
        if callable(close):
            close()
