from __future__ import annotations

import httpx
import pytest

from chimp_client import ChimpClient, ClientConfig

API_KEY = "abc123-us6"


def no_wait(attempt: int) -> float:
    return 0.0


@pytest.fixture
def make_client():
    clients: list[ChimpClient] = []

    def _make(handler, **kwargs) -> ChimpClient:
        kwargs.setdefault("backoff", no_wait)
        client = ChimpClient(ClientConfig(API_KEY, transport=httpx.MockTransport(handler), **kwargs))
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()
