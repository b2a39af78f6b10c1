from __future__ import annotations

import json
from typing import Any

import typer
from chimp_client import ApiError, AuthError, ChimpClientError

from .. import console
from ..config import ENV_API_KEY, load_config
from ..http import make_client


def _passthrough(data: Any) -> Any:
    return data


def _parse_params(values: list[str] | None) -> dict[str, str]:
    params: dict[str, str] = {}
    for item in values or []:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            console.err(f"Invalid query parameter '{item}', expected key=value.")
            raise typer.Exit(code=2)
        params[key.strip()] = value
    return params


def _parse_body(data: str | None) -> Any:
    if data is None:
        return None
    try:
        return json.loads(data)
    except ValueError as e:
        console.err(f"--data is not valid JSON: {e}")
        raise typer.Exit(code=2)


def _client(ctx: typer.Context, api_key: str | None, max_attempts: int | None):
    cfg = load_config()
    client = make_client(
        cfg,
        api_key_override=api_key,
        max_attempts=max_attempts,
        debug=bool((ctx.obj or {}).get("debug")),
    )
    if not client.config.api_key:
        client.close()
        console.err(f"API key is not configured. Run `chimp settings set --api-key ...` or set ${ENV_API_KEY}.")
        raise typer.Exit(code=2)
    return client


def _fail(action: str, e: ChimpClientError) -> None:
    if isinstance(e, AuthError):
        console.err(f"Unauthorized: {e.detail or e.title}")
    elif isinstance(e, ApiError):
        console.err(f"{action} failed: {e}")
        for fe in e.errors:
            console.info(f"{fe.field}: {fe.message}")
    else:
        console.err(f"{action} failed: {e}")
    raise typer.Exit(code=1)


def ping(
        ctx: typer.Context,
        api_key: str | None = typer.Option(None, "--api-key", help="Override API key."),
        max_attempts: int | None = typer.Option(None, "--max-attempts", min=1, help="Override attempts."),
):
    """Check that the API answers with the configured key."""
    client = _client(ctx, api_key, max_attempts)
    try:
        client.ping()
    except ChimpClientError as e:
        _fail("Ping", e)
    finally:
        client.close()
    console.ok(f"API reachable: {client.endpoint}")


def request(
        ctx: typer.Context,
        method: str = typer.Argument(..., help="HTTP method, e.g. GET."),
        path: str = typer.Argument(..., help="Resource path under the API root, e.g. /lists."),
        param: list[str] | None = typer.Option(None, "--param", "-p", help="Query parameter key=value (repeatable)."),
        data: str | None = typer.Option(None, "--data", "-d", help="JSON request body."),
        api_key: str | None = typer.Option(None, "--api-key", help="Override API key."),
        max_attempts: int | None = typer.Option(None, "--max-attempts", min=1, help="Override attempts."),
):
    """Send a raw request and print the JSON response."""
    if not path.startswith("/"):
        path = "/" + path
    params = _parse_params(param)
    body = _parse_body(data)

    client = _client(ctx, api_key, max_attempts)
    try:
        result = client.request(method.upper(), path, params or None, body, _passthrough)
    except ChimpClientError as e:
        _fail("Request", e)
    finally:
        client.close()

    if result is None:
        console.ok(f"{method.upper()} {path}: no content")
        return
    console.print_json(result)
