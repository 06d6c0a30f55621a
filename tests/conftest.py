"""Общие заглушки Docker Engine для тестов."""

from __future__ import annotations

import threading
from typing import Any, Dict, List, Optional, Set, Tuple

import pytest
from docker.errors import APIError

from docker_webui_api.docker_api.client import DockerClientWrapper
from docker_webui_api.docker_api.data_provider import DockerDataProvider


class FakeAPIClient:
    """Имитация docker.APIClient с записью вызовов и внедрением ошибок."""

    def __init__(self) -> None:
        self.containers_data: Dict[str, Dict[str, Any]] = {
            "c1": {"Id": "c1", "Name": "/web", "State": {"Status": "running"}},
            "c2": {"Id": "c2", "Name": "/db", "State": {"Status": "exited"}},
        }
        self.images_data: Dict[str, Dict[str, Any]] = {
            "sha256:aaa": {"Id": "sha256:aaa", "RepoTags": ["nginx:latest"]},
        }
        self.networks_data: Dict[str, Dict[str, Any]] = {
            "n1": {"Id": "n1", "Name": "bridge", "Driver": "bridge"},
            "n2": {"Id": "n2", "Name": "host", "Driver": "host"},
        }
        self.volumes_data: Dict[str, Dict[str, Any]] = {
            "data": {"Name": "data", "Driver": "local", "Mountpoint": "/var/lib/docker/volumes/data"},
        }
        self.volume_warnings: Optional[List[str]] = None
        self.calls: List[Tuple[str, Any]] = []
        self.failures: Set[Tuple[str, Optional[str]]] = set()
        self.closed = 0
        self.ping_ok = True
        self._lock = threading.Lock()

    # ------------------------------------------------------------- helpers
    def fail(self, method: str, target: Optional[str] = None) -> None:
        """Заставляет метод (для конкретного объекта или всех) бросать APIError."""

        self.failures.add((method, target))

    def _record(self, method: str, target: Any = None) -> None:
        with self._lock:
            self.calls.append((method, target))
        # точечные отказы задаются только по строковому идентификатору
        key = target if isinstance(target, str) else None
        if (method, None) in self.failures or (method, key) in self.failures:
            raise APIError(f"{method} failed for {target}")

    def called(self, method: str) -> List[Any]:
        return [target for name, target in self.calls if name == method]

    # --------------------------------------------------------------- system
    def ping(self) -> bool:
        self._record("ping")
        return self.ping_ok

    def close(self) -> None:
        self.closed += 1

    # ----------------------------------------------------------- containers
    def containers(self, all: bool = False) -> List[Dict[str, Any]]:
        self._record("containers", all)
        return [{"Id": identifier} for identifier in self.containers_data]

    def inspect_container(self, container: str) -> Dict[str, Any]:
        self._record("inspect_container", container)
        return self.containers_data[container]

    def start(self, container: str) -> None:
        self._record("start", container)

    def stop(self, container: str) -> None:
        self._record("stop", container)

    def restart(self, container: str) -> None:
        self._record("restart", container)

    def pause(self, container: str) -> None:
        self._record("pause", container)

    def unpause(self, container: str) -> None:
        self._record("unpause", container)

    def kill(self, container: str) -> None:
        self._record("kill", container)

    def remove_container(self, container: str) -> None:
        self._record("remove_container", container)
        self.containers_data.pop(container, None)

    def create_host_config(self, **kwargs: Any) -> Dict[str, Any]:
        self._record("create_host_config", kwargs)
        return {"HostConfigArgs": kwargs}

    def create_container(self, **kwargs: Any) -> Dict[str, Any]:
        self._record("create_container", kwargs)
        self.containers_data["new"] = {"Id": "new", "Name": f"/{kwargs.get('name')}"}
        return {"Id": "new", "Warnings": []}

    # --------------------------------------------------------------- images
    def images(self) -> List[Dict[str, Any]]:
        self._record("images")
        return [{"Id": identifier} for identifier in self.images_data]

    def inspect_image(self, image: str) -> Dict[str, Any]:
        self._record("inspect_image", image)
        return self.images_data[image]

    def remove_image(self, image: str, force: bool = False) -> None:
        self._record("remove_image", (image, force))

    # ------------------------------------------------------------- networks
    def networks(self) -> List[Dict[str, Any]]:
        self._record("networks")
        return [{"Id": identifier} for identifier in self.networks_data]

    def inspect_network(self, net_id: str) -> Dict[str, Any]:
        self._record("inspect_network", net_id)
        return self.networks_data[net_id]

    # -------------------------------------------------------------- volumes
    def volumes(self) -> Dict[str, Any]:
        self._record("volumes")
        return {
            "Volumes": [{"Name": name} for name in self.volumes_data] or None,
            "Warnings": self.volume_warnings,
        }

    def inspect_volume(self, name: str) -> Dict[str, Any]:
        self._record("inspect_volume", name)
        return self.volumes_data[name]

    def create_volume(
        self,
        name: Optional[str] = None,
        driver: Optional[str] = None,
        driver_opts: Optional[Dict[str, str]] = None,
        labels: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        self._record(
            "create_volume",
            {"name": name, "driver": driver, "driver_opts": driver_opts, "labels": labels},
        )
        record = {"Name": name, "Driver": driver or "local", "Labels": labels, "Options": driver_opts}
        self.volumes_data[str(name)] = record
        return record

    def remove_volume(self, name: str, force: bool = False) -> None:
        self._record("remove_volume", (name, force))


class DummySettings:
    """Минимальные настройки для тестов."""

    def __init__(self, **overrides: Any) -> None:
        self.values: Dict[Tuple[str, str], Any] = {
            ("docker", "connection_timeout_sec"): 1,
            ("docker", "inspect_workers"): 4,
            ("server", "cors_origins"): ["*"],
        }
        for key, value in overrides.items():
            group, _, name = key.partition("__")
            self.values[(group, name)] = value

    def get_value(self, group: str, key: str, default: Any = None) -> Any:
        return self.values.get((group, key), default)


@pytest.fixture
def engine() -> FakeAPIClient:
    return FakeAPIClient()


@pytest.fixture
def wrapper(engine: FakeAPIClient) -> DockerClientWrapper:
    return DockerClientWrapper("unix:///var/run/docker.sock", raw_client=engine)


@pytest.fixture
def provider(engine: FakeAPIClient) -> DockerDataProvider:
    return DockerDataProvider(
        DummySettings(),
        client_factory=lambda: DockerClientWrapper("unix:///var/run/docker.sock", raw_client=engine),
    )


@pytest.fixture
def make_settings():
    """Фабрика DummySettings: ключи вида group__name переопределяют значения."""

    return DummySettings
