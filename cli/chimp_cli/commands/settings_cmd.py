from __future__ import annotations

import typer

from .. import console
from ..config import ENV_API_KEY, load_config, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/chimp/config.toml).")


def _mask(key: str) -> str:
    if not key:
        return "(empty)"
    return f"...{key[-6:]}" if len(key) > 6 else "(set)"


@app.command("show")
def show_settings():
    cfg = load_config()
    console.console.print(
        f"api_key={_mask(cfg.api_key)} timeout_s={cfg.timeout_s or '-'} max_attempts={cfg.max_attempts}"
    )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help="Setting key (api_key, timeout_s, max_attempts)."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k == "api_key":
        console.console.print(_mask(cfg.api_key))
        return
    if k == "timeout_s":
        console.console.print(cfg.timeout_s if cfg.timeout_s is not None else "-")
        return
    if k == "max_attempts":
        console.console.print(cfg.max_attempts)
        return
    console.err(f"Unknown setting: {key}")
    raise typer.Exit(code=2)


@app.command("set")
def set_setting(
        api_key: str | None = typer.Option(None, "--api-key", help=f"Set API key (overridden by ${ENV_API_KEY})."),
        timeout: float | None = typer.Option(None, "--timeout", help="Per-request timeout in seconds, 0 to disable."),
        max_attempts: int | None = typer.Option(None, "--max-attempts", min=1, help="Attempts per request."),
):
    cfg = load_config()
    if api_key is not None:
        cfg.api_key = api_key.strip()
    if timeout is not None:
        cfg.timeout_s = timeout if timeout > 0 else None
    if max_attempts is not None:
        cfg.max_attempts = max_attempts
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
