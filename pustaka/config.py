"""Application settings read from app.env and the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

_CONFIG_FILE = "app.env"
_KEYS = {"DSN": "dsn", "HTTP_SERVER_ADDRESS": "http_server_address"}


@dataclass(frozen=True)
class Config:
    """Database URL and the address the HTTP server listens on."""

    dsn: str = ""
    http_server_address: str = ""


def load_config(path: str | os.PathLike) -> Config:
    """Read app.env in the given directory.

    A non-empty environment variable of the same name overrides a key that
    the file defines. Raises FileNotFoundError when the file is missing.
    """
    file = Path(path) / _CONFIG_FILE
    if not file.is_file():
        raise FileNotFoundError(f"config file not found: {file}")

    settings = {key.upper(): value or "" for key, value in dotenv_values(file).items()}
    values = {
        field: os.environ.get(key) or settings[key]
        for key, field in _KEYS.items()
        if key in settings
    }
    return Config(**values)