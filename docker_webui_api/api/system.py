"""Служебные маршруты: корень и проверка состояния."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from docker_webui_api.api.dependencies import get_provider
from docker_webui_api.api.schemas import HealthResponse
from docker_webui_api.docker_api.data_provider import DockerDataProvider

router = APIRouter(tags=["system"])


@router.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "This is an API for Docker webUI"


@router.get("/health", response_model=HealthResponse)
def health(provider: DockerDataProvider = Depends(get_provider)) -> HealthResponse:
    """Сервис жив всегда; доступность Docker Engine сообщается отдельно."""

    engine = "online" if provider.ping() else "offline"
    return HealthResponse(status="OK", engine=engine)
