"""Дефолтная схема config.json."""

from __future__ import annotations

from typing import Any, Dict

# DEFAULT_CONFIG служит шаблоном для начального config.json
DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "server": {
        "host": "0.0.0.0",
        "port": 3300,
        "cors_origins": ["*"],
    },
    "docker": {
        "base_url": "unix:///var/run/docker.sock",
        "timeout_sec": 60,
        "connection_timeout_sec": 5,
        "inspect_workers": 8,
    },
    "logging": {
        "enabled": True,
        "level": "INFO",
        "max_file_size_mb": 10,
        "max_archived_files": 5,
    },
}
