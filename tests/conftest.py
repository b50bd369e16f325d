from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from scrapers.base import HttpConfig

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it was asked to send."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def http_config() -> HttpConfig:
    return HttpConfig()


@pytest.fixture
def make_client(http_config):
    """Build an AsyncClient whose requests are answered by ``handler``."""

    def _make(handler: Handler) -> tuple[httpx.AsyncClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        return http_config.build_client(transport=transport), transport

    return _make
