"""
Shared fixtures: an in-memory catalog and mock HTTP endpoints
"""

from typing import Callable, List

import httpx
import pytest

from urlsift.agents.probe_client import ProbeClient
from urlsift.analyzers.risk_catalog import RiskCatalog


def echo_handler(request: httpx.Request) -> httpx.Response:
    """Echo every query parameter value into an HTML body"""
    values = " ".join(value for _, value in request.url.params.multi_items())
    return httpx.Response(
        200,
        headers={"Content-Type": "text/html; charset=utf-8"},
        text=f"<html><body>{values}</body></html>",
    )


def static_handler(request: httpx.Request) -> httpx.Response:
    """Never reflect anything"""
    return httpx.Response(
        200,
        headers={"Content-Type": "text/html"},
        text="<html><body>nothing to see</body></html>",
    )


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served"""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)


@pytest.fixture
def catalog():
    return RiskCatalog.from_entries([
        {"param": "id", "risks": ["SQLi", "IDOR"]},
        {"param": "q", "risks": ["XSS"]},
        {"param": "url", "risks": ["SSRF", "Open Redirect"]},
    ])


@pytest.fixture
def make_client():
    """Build ProbeClients on top of a handler and close them afterwards"""
    clients = []

    def factory(handler, timeout=5):
        transport = RecordingTransport(handler)
        client = ProbeClient(timeout=timeout, transport=transport)
        clients.append(client)
        return client, transport

    yield factory

    for client in clients:
        client.close()
