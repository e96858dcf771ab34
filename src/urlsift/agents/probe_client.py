"""
HTTP probe client

A single keep-alive httpx.Client shared by every request the pipeline
issues. Certificate verification is disabled: targets are frequently
internal hosts with self-signed or mismatched certificates, and the
probe only reads responses, it never trusts them.
"""
import logging
import time
from http.cookiejar import CookieJar, DefaultCookiePolicy
from dataclasses import dataclass, field
from typing import Dict, Optional

import httpx

from ..exceptions import ProbeNetworkError


@dataclass
class ProbeResponse:
    """A fully drained HTTP response"""
    url: str
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def content_type(self) -> str:
        """Media type with any ;-parameters stripped"""
        return self.headers.get('content-type', '').split(';')[0]

    @property
    def content_length(self) -> int:
        """Declared Content-Length, or the drained body size when absent"""
        declared = self.headers.get('content-length')
        if declared is not None:
            try:
                return int(declared)
            except ValueError:
                pass
        return len(self.body)


class ProbeClient:
    """Issues GET requests with a uniform timeout and always drains the body"""

    def __init__(self, timeout: int = 10, proxy: Optional[str] = None,
                 transport: Optional[httpx.BaseTransport] = None):
        """
        Initialize ProbeClient

        Args:
            timeout: Seconds allowed for connecting and for the whole exchange
            proxy: Optional upstream HTTP(S) proxy URL
            transport: Optional transport override (tests use httpx.MockTransport)
        """
        self.logger = logging.getLogger(self.__class__.__name__)
        self.timeout = timeout

        client_kwargs = {
            'timeout': httpx.Timeout(timeout),
            'verify': False,
            'follow_redirects': True,
            # proxying is decided by configuration only, never by environment variables
            'trust_env': False,
            # a jar that accepts no domain: Set-Cookie is never stored, so never replayed
            'cookies': CookieJar(policy=DefaultCookiePolicy(allowed_domains=[])),
        }
        if transport is not None:
            client_kwargs['transport'] = transport

        if proxy:
            try:
                proxy_scheme = httpx.URL(proxy).scheme
            except httpx.InvalidURL as e:
                self.logger.warning(f"Ignoring invalid proxy URL {proxy!r}: {e}")
            else:
                if proxy_scheme in ('http', 'https'):
                    client_kwargs['proxy'] = proxy
                else:
                    self.logger.warning(f"Ignoring proxy with unsupported scheme: {proxy!r}")

        self.client = httpx.Client(**client_kwargs)
        # only the per-request User-Agent goes out
        for name in ('Accept', 'Accept-Encoding', 'Connection', 'User-Agent'):
            del self.client.headers[name]

    def fetch(self, url: str, user_agent: str) -> ProbeResponse:
        """
        GET a URL and return its status, headers and complete body.

        The body is always read to the end and the response closed before
        returning, so the pooled connection can be reused by the next call.

        Raises:
            ProbeNetworkError: connection, TLS, timeout or protocol failure
        """
        deadline = time.monotonic() + self.timeout
        self.logger.debug(f"GET {url}")

        try:
            with self.client.stream('GET', url, headers={'User-Agent': user_agent}) as response:
                chunks = []
                for chunk in response.iter_bytes():
                    chunks.append(chunk)
                    if time.monotonic() > deadline:
                        raise ProbeNetworkError(
                            f"Request to {url} exceeded {self.timeout}s", url=url)
                body = b"".join(chunks)
                status_code = response.status_code
                headers = {name.lower(): value for name, value in response.headers.items()}
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ProbeNetworkError(f"Request to {url} failed: {e}", url=url) from e

        self.logger.debug(f"{status_code} {url} ({len(body)} bytes)")
        return ProbeResponse(url=url, status_code=status_code, headers=headers, body=body)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> 'ProbeClient':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
