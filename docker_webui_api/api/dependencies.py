"""Зависимости FastAPI."""

from __future__ import annotations

from fastapi import Request

from docker_webui_api.docker_api.data_provider import DockerDataProvider


def get_provider(request: Request) -> DockerDataProvider:
    """Возвращает поставщика Docker-данных, созданного при сборке приложения."""

    return request.app.state.provider
