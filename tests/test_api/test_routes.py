"""Тесты HTTP-маршрутов поверх заглушки Docker Engine."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from docker_webui_api.app import create_application
from docker_webui_api.docker_api.data_provider import DockerDataProvider
from docker_webui_api.docker_api.exceptions import DockerAPIError


@pytest.fixture
def client(provider, make_settings) -> TestClient:
    return TestClient(create_application(make_settings(), provider))


def test_root_returns_banner(client) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "This is an API for Docker webUI"


def test_health_reports_engine_state(client, engine) -> None:
    assert client.get("/health").json() == {"status": "OK", "engine": "online"}
    engine.ping_ok = False
    assert client.get("/health").json() == {"status": "OK", "engine": "offline"}


def test_health_without_engine(make_settings) -> None:
    def unreachable():
        raise DockerAPIError("Cannot connect to the Docker daemon")

    provider = DockerDataProvider(make_settings(), client_factory=unreachable)
    response = TestClient(create_application(make_settings(), provider)).get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "OK", "engine": "offline"}


def test_cors_headers(client) -> None:
    response = client.get("/health", headers={"Origin": "http://localhost:3000"})
    assert response.headers["access-control-allow-origin"] == "*"


# --------------------------------------------------------------- containers
def test_list_containers(client) -> None:
    response = client.get("/containers")
    assert response.status_code == 200
    assert [item["Name"] for item in response.json()] == ["/web", "/db"]


def test_list_containers_engine_failure(client, engine) -> None:
    engine.fail("inspect_container", "c1")
    response = client.get("/containers")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to list containers"}


def test_inspect_container(client) -> None:
    response = client.get("/containers/c2")
    assert response.status_code == 200
    assert response.json()["State"] == {"Status": "exited"}


def test_create_container(client, engine) -> None:
    payload = {
        "formData": {
            "containerName": "web",
            "imageName": "nginx:latest",
            "ports": [
                {"hostPort": "8080", "containerPort": "80"},
                {"hostPort": 8443, "containerPort": 443},
            ],
            "command": "nginx -g 'daemon off;'",
            "autoremove": True,
        }
    }
    response = client.post("/containers", json=payload)

    assert response.status_code == 201
    assert response.json() == {"Id": "new", "Name": "/web"}
    created = engine.called("create_container")[0]
    assert created["command"] == ["nginx", "-g", "daemon off;"]
    assert created["ports"] == [("80", "tcp"), ("443", "tcp")]
    assert engine.called("create_host_config") == [
        {"port_bindings": {"80/tcp": ["8080"], "443/tcp": ["8443"]}, "auto_remove": True}
    ]
    assert engine.called("start") == ["new"]


@pytest.mark.parametrize(
    "payload",
    [
        {"formData": {"containerName": "web"}},
        {"formData": {"imageName": "nginx"}},
        {"formData": {"imageName": "", "containerName": "web"}},
        {},
    ],
)
def test_create_container_requires_image_and_name(client, engine, payload) -> None:
    response = client.post("/containers", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": "Image and name are required"}
    assert engine.called("create_container") == []


def test_create_container_rejects_non_list_ports(client, engine) -> None:
    payload = {"formData": {"containerName": "web", "imageName": "nginx", "ports": "80:80"}}
    response = client.post("/containers", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request body"}
    assert engine.called("create_container") == []


def test_create_container_binds_one_port_to_several_host_ports(client, engine) -> None:
    payload = {
        "formData": {
            "containerName": "web",
            "imageName": "nginx",
            "ports": [
                {"hostPort": 8080, "containerPort": 80},
                {"hostPort": 8081, "containerPort": 80},
            ],
        }
    }
    assert client.post("/containers", json=payload).status_code == 201
    assert engine.called("create_host_config") == [
        {"port_bindings": {"80/tcp": ["8080", "8081"]}, "auto_remove": False}
    ]
    assert engine.called("create_container")[0]["ports"] == [("80", "tcp")]


def test_create_container_accepts_null_optional_fields(client, engine) -> None:
    payload = {
        "formData": {
            "containerName": "web",
            "imageName": "nginx",
            "ports": None,
            "command": None,
            "autoremove": None,
        }
    }
    response = client.post("/containers", json=payload)
    assert response.status_code == 201
    assert engine.called("create_host_config") == [{"port_bindings": None, "auto_remove": False}]
    assert engine.called("create_container")[0]["command"] is None


def test_create_container_rejects_unbalanced_command(client, engine) -> None:
    payload = {"formData": {"containerName": "web", "imageName": "nginx", "command": "echo 'oops"}}
    response = client.post("/containers", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid command"}
    assert engine.called("create_container") == []


def test_unexpected_error_is_rendered_as_json(make_settings) -> None:
    class BrokenProvider:
        def fetch_images(self):
            raise RuntimeError("boom")

    app = create_application(make_settings(), BrokenProvider())
    response = TestClient(app, raise_server_exceptions=False).get("/images")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_create_container_engine_failure(client, engine) -> None:
    engine.fail("create_container")
    payload = {"formData": {"containerName": "web", "imageName": "missing:tag"}}
    response = client.post("/containers", json=payload)
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create container"}


@pytest.mark.parametrize(
    ("action", "method", "message"),
    [
        ("restart", "restart", "Container restarted successfully"),
        ("stop", "stop", "Container stopped successfully"),
        ("start", "start", "Container started successfully"),
        ("pause", "pause", "Container paused successfully"),
        ("unpause", "unpause", "Container unpaused successfully"),
        ("kill", "kill", "Container killed successfully"),
    ],
)
def test_container_actions(client, engine, action, method, message) -> None:
    response = client.post(f"/containers/{action}", json={"containerId": "c1"})
    assert response.status_code == 200
    assert response.json() == {"message": message}
    assert engine.called(method) == ["c1"]


def test_container_action_requires_id(client) -> None:
    for body in ({}, {"containerId": ""}):
        response = client.post("/containers/stop", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Container ID is required"}
    response = client.post("/containers/start")
    assert response.status_code == 400
    assert response.json() == {"error": "Container ID is required"}


def test_container_action_engine_failure(client, engine) -> None:
    engine.fail("unpause", "c1")
    response = client.post("/containers/unpause", json={"containerId": "c1"})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to unpause container"}


def test_delete_container_by_body(client, engine) -> None:
    response = client.request("DELETE", "/containers", json={"containerId": "c1"})
    assert response.status_code == 200
    assert response.json() == {"message": "Container deleted successfully"}
    assert engine.called("stop") == ["c1"]
    assert engine.called("remove_container") == ["c1"]


def test_delete_container_by_path(client, engine) -> None:
    engine.fail("stop", "c2")
    response = client.delete("/containers/c2")
    assert response.status_code == 200
    assert engine.called("remove_container") == ["c2"]


def test_delete_container_errors(client, engine) -> None:
    response = client.request("DELETE", "/containers", json={})
    assert response.status_code == 400
    assert response.json() == {"error": "Container ID is required"}

    engine.fail("remove_container")
    response = client.delete("/containers/c1")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to delete container"}


# ------------------------------------------------------------------- images
def test_list_and_inspect_images(client) -> None:
    assert client.get("/images").json() == [{"Id": "sha256:aaa", "RepoTags": ["nginx:latest"]}]
    assert client.get("/images/sha256:aaa").json()["Id"] == "sha256:aaa"


def test_list_images_engine_failure(client, engine) -> None:
    engine.fail("images")
    response = client.get("/images")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to list images"}


def test_delete_image(client, engine) -> None:
    response = client.request("DELETE", "/images", json={"imageId": "sha256:aaa"})
    assert response.status_code == 200
    assert response.json() == {"message": "Image deleted successfully"}
    assert engine.called("remove_image") == [("sha256:aaa", False)]


def test_delete_image_errors(client, engine) -> None:
    response = client.request("DELETE", "/images", json={})
    assert response.status_code == 400
    assert response.json() == {"error": "Image ID is required"}

    engine.fail("remove_image")
    response = client.request("DELETE", "/images", json={"imageId": "in-use"})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to delete image"}


# ----------------------------------------------------------------- networks
def test_list_and_inspect_networks(client) -> None:
    assert [item["Name"] for item in client.get("/networks").json()] == ["bridge", "host"]
    assert client.get("/networks/n1").json()["Driver"] == "bridge"


def test_inspect_network_engine_failure(client, engine) -> None:
    engine.fail("inspect_network", "n9")
    response = client.get("/networks/n9")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to inspect network"}


# ------------------------------------------------------------------ volumes
def test_list_and_inspect_volumes(client) -> None:
    assert [item["Name"] for item in client.get("/volumes").json()] == ["data"]
    assert client.get("/volumes/data").json()["Driver"] == "local"


def test_create_volume(client, engine) -> None:
    payload = {
        "Name": "cache",
        "Driver": "local",
        "DriverOpts": {"type": "tmpfs", "device": "tmpfs"},
        "Labels": {"team": "web"},
    }
    response = client.post("/volumes", json=payload)
    assert response.status_code == 201
    assert response.json()["Name"] == "cache"
    assert engine.called("create_volume") == [
        {
            "name": "cache",
            "driver": "local",
            "driver_opts": {"type": "tmpfs", "device": "tmpfs"},
            "labels": {"team": "web"},
        }
    ]


def test_create_volume_requires_name(client, engine) -> None:
    response = client.post("/volumes", json={"Driver": "local"})
    assert response.status_code == 400
    assert response.json() == {"error": "Volume name is required"}
    assert engine.called("create_volume") == []


def test_create_volume_engine_failure(client, engine) -> None:
    engine.fail("create_volume")
    response = client.post("/volumes", json={"Name": "cache"})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create volume"}


def test_delete_volume(client, engine) -> None:
    response = client.request("DELETE", "/volumes", json={"volumeId": "data"})
    assert response.status_code == 200
    assert response.json() == {"message": "Volume deleted successfully"}

    response = client.request("DELETE", "/volumes", json={})
    assert response.status_code == 400
    assert response.json() == {"error": "Volume ID is required"}

    engine.fail("remove_volume")
    response = client.request("DELETE", "/volumes", json={"volumeId": "data"})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to delete volume"}
