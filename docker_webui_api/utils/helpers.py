"""Различные вспомогательные функции."""

from __future__ import annotations


_SOCKET_SCHEMES = ("unix://", "tcp://", "npipe://", "http://", "https://", "ssh://")


def normalize_docker_url(raw_value: str) -> str:
    """Возвращает адрес Docker Engine с корректным префиксом.

    Абсолютный путь к сокету получает префикс unix://, адреса со схемой
    возвращаются без изменений.
    """

    value = raw_value.strip()
    if not value:
        return value
    if value.lower().startswith(_SOCKET_SCHEMES):
        return value
    if value.startswith("/"):
        return f"unix://{value}"
    return value
