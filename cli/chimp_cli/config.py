from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from chimp_client.config_types import DEFAULT_MAX_ATTEMPTS

APP_NAME = "chimp"
CONFIG_FILENAME = "config.toml"
ENV_API_KEY = "CHIMP_API_KEY"


@dataclass
class AppConfig:
    api_key: str = ""
    timeout_s: float | None = None
    max_attempts: int = DEFAULT_MAX_ATTEMPTS


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    data: dict[str, Any] = {
        "api_key": cfg.api_key,
        "timeout_s": cfg.timeout_s,
        "max_attempts": cfg.max_attempts,
    }
    # TOML has no null
    return {k: v for k, v in data.items() if v is not None}


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    cfg.api_key = str(data.get("api_key") or "").strip()

    timeout = data.get("timeout_s")
    if isinstance(timeout, (int, float)) and not isinstance(timeout, bool) and timeout > 0:
        cfg.timeout_s = float(timeout)

    attempts = data.get("max_attempts")
    if attempts is not None:
        try:
            cfg.max_attempts = max(1, int(attempts))
        except (TypeError, ValueError):
            cfg.max_attempts = DEFAULT_MAX_ATTEMPTS
    return cfg


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def resolve_api_key(cfg: AppConfig) -> str:
    env_value = os.getenv(ENV_API_KEY, "").strip()
    if env_value:
        return env_value
    return (cfg.api_key or "").strip()


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
