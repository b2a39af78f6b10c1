from __future__ import annotations

from chimp_client import ChimpClient
from chimp_client.config_types import ClientConfig

from .config import AppConfig, resolve_api_key


def make_client(
    cfg: AppConfig,
    *,
    api_key_override: str | None = None,
    max_attempts: int | None = None,
    debug: bool = False,
) -> ChimpClient:
    api_key = (api_key_override or "").strip() or resolve_api_key(cfg)
    return ChimpClient(
        ClientConfig(
            api_key=api_key,
            timeout_s=cfg.timeout_s,
            max_attempts=max_attempts or cfg.max_attempts,
            debug=debug,
        )
    )
