"""Исключения слоя доступа к Docker Engine."""

from __future__ import annotations

from typing import Any, Dict, Optional


class DockerAPIError(Exception):
    """Любая ошибка, полученная от Docker Engine или клиента docker-py."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)
