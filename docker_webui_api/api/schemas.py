"""Модели тел запросов и ответов HTTP API.

Имена полей JSON повторяют формат веб-интерфейса (camelCase для форм,
PascalCase для параметров тома, как в Docker Engine API).
"""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class PortMapping(BaseModel):
    """Пара портов из формы создания контейнера."""

    model_config = ConfigDict(populate_by_name=True)

    host_port: Optional[Union[int, str]] = Field(default=None, alias="hostPort")
    container_port: Optional[Union[int, str]] = Field(default=None, alias="containerPort")


class ContainerCreateForm(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    container_name: Optional[str] = Field(default=None, alias="containerName")
    image_name: Optional[str] = Field(default=None, alias="imageName")
    ports: Optional[List[PortMapping]] = None
    command: Optional[Union[str, List[str]]] = None
    autoremove: Optional[bool] = None


class ContainerCreateRequest(BaseModel):
    """Конверт формы: {"formData": {...}}."""

    model_config = ConfigDict(populate_by_name=True)

    form_data: Optional[ContainerCreateForm] = Field(default=None, alias="formData")


class ContainerIdRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    container_id: Optional[str] = Field(default=None, alias="containerId")


class ImageIdRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_id: Optional[str] = Field(default=None, alias="imageId")
    force: bool = False


class VolumeIdRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    volume_id: Optional[str] = Field(default=None, alias="volumeId")
    force: bool = False


class VolumeCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(default=None, alias="Name")
    driver: Optional[str] = Field(default=None, alias="Driver")
    driver_opts: Optional[Dict[str, str]] = Field(default=None, alias="DriverOpts")
    labels: Optional[Dict[str, str]] = Field(default=None, alias="Labels")


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    engine: str
