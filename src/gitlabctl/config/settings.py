"""Application configuration and defaults."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path


class ConfigError(Exception):
    """Raised when the configuration file is missing or invalid."""


def default_config_path() -> Path:
    """Return the config file location.

    Checks GITLABCTL_CONFIG first, then falls back to ~/.config/gitlab.toml.
    """
    override = os.environ.get("GITLABCTL_CONFIG", "")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "gitlab.toml"


@dataclass
class Settings:
    server: str
    access_token: str
    max_workers: int = 8
    timeout: float = 30.0
    ssl_verify: bool = True

    @classmethod
    def from_dict(cls, d: dict) -> Settings:
        for key in ("server", "access_token"):
            value = d.get(key)
            if not isinstance(value, str) or not value:
                raise ConfigError(f"Missing or invalid '{key}' in config")

        max_workers = d.get("max_workers", 8)
        if not isinstance(max_workers, int) or isinstance(max_workers, bool) or max_workers < 1:
            raise ConfigError("'max_workers' must be a positive integer")
        timeout = d.get("timeout", 30.0)
        if not isinstance(timeout, (int, float)) or isinstance(timeout, bool) or timeout <= 0:
            raise ConfigError("'timeout' must be a positive number")
        ssl_verify = d.get("ssl_verify", True)
        if not isinstance(ssl_verify, bool):
            raise ConfigError("'ssl_verify' must be true or false")

        return cls(
            server=d["server"].rstrip("/"),
            access_token=d["access_token"],
            max_workers=max_workers,
            timeout=float(timeout),
            ssl_verify=ssl_verify,
        )


def load_settings(path: Path | None = None) -> Settings:
    config_path = path or default_config_path()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {config_path}") from None
    except OSError as e:
        raise ConfigError(f"Could not read config file {config_path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Could not parse config file {config_path}: {e}") from e
    return Settings.from_dict(data)
