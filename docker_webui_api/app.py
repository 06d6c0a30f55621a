"""Сборка FastAPI-приложения."""

from __future__ import annotations

from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docker_webui_api import __version__
from docker_webui_api.api import containers, images, networks, system, volumes
from docker_webui_api.api.errors import register_exception_handlers
from docker_webui_api.docker_api.data_provider import DockerDataProvider, SettingsSource


def create_application(settings: SettingsSource, docker_data_provider: DockerDataProvider) -> FastAPI:
    """Фабрика HTTP-приложения: маршруты, CORS и обработчики ошибок."""

    app = FastAPI(
        title="Docker WebUI API",
        description="HTTP API for the Docker web UI",
        version=__version__,
    )
    app.state.provider = docker_data_provider

    origins: List[str] = list(settings.get_value("server", "cors_origins", default=["*"]))
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    for module in (system, containers, images, networks, volumes):
        app.include_router(module.router)
    return app
