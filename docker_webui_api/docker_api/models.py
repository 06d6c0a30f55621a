"""Упрощённые структуры параметров создания объектов Docker."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(slots=True)
class ContainerCreateOptions:
    """Параметры создания контейнера, собранные из формы запроса."""

    image: str
    name: str
    command: Optional[List[str]] = None
    exposed_ports: List[Tuple[str, str]] = field(default_factory=list)  # (порт, протокол)
    port_bindings: Dict[str, List[str]] = field(default_factory=dict)  # "80/tcp" -> ["8080"]
    auto_remove: bool = False
    tty: bool = True


@dataclass(slots=True)
class VolumeCreateOptions:
    """Параметры создания тома."""

    name: str
    driver: Optional[str] = None
    driver_opts: Optional[Dict[str, str]] = None
    labels: Optional[Dict[str, str]] = None
