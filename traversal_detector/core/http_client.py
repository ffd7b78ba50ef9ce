"""
Traversal Detector - HTTP Transport

Thin aiohttp wrapper used to send candidate requests. One session is shared
by all concurrent verification calls.
"""
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

import aiohttp
from yarl import URL

from traversal_detector.schemas.network import NetworkService

logger = logging.getLogger(__name__)


class TransportError(Exception):
    """Exception raised when a request cannot be completed."""
    pass


@dataclass(frozen=True)
class HttpRequest:
    """Immutable HTTP request. Headers are (name, value) pairs."""
    method: str
    url: str
    headers: Tuple[Tuple[str, str], ...] = ()

    @classmethod
    def get(cls, url: str) -> "HttpRequest":
        return cls(method="GET", url=url)

    def __str__(self) -> str:
        return f"{self.method} {self.url}"


@dataclass
class HttpResponse:
    """Response of a sent request. ``body`` is None when no content came back."""
    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None


class HttpClient:
    """Sends HttpRequests over a shared aiohttp session.

    Use as an async context manager, or pass in a session whose lifetime the
    caller manages. ``send`` never opens a session on its own.
    """

    def __init__(self, timeout: float = 30.0, session: Optional[aiohttp.ClientSession] = None):
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self):
        if self.session is None:
            self.session = aiohttp.ClientSession(timeout=self.timeout)
            self._owns_session = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        if self.session and self._owns_session:
            await self.session.close()
            self.session = None

    async def send(self, request: HttpRequest, network_service: NetworkService) -> HttpResponse:
        """Send ``request`` to ``network_service``.

        The URL is passed pre-encoded so percent-encoded payloads are not
        normalised on the way out.

        Raises:
            TransportError: on connection errors, timeouts and I/O errors.
            RuntimeError: if no session is open.
        """
        if self.session is None:
            raise RuntimeError("HttpClient session is not open, use 'async with HttpClient()'")

        logger.debug(f"Sending {request} to {network_service.network_endpoint}")
        try:
            async with self.session.request(
                method=request.method,
                url=URL(request.url, encoded=True),
                headers=dict(request.headers),
                timeout=self.timeout,
                ssl=False,
                allow_redirects=False,
            ) as response:
                raw = await response.read()
                body = raw.decode("utf-8", errors="replace") if raw else None
                return HttpResponse(
                    status=response.status,
                    headers=dict(response.headers),
                    body=body,
                )
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request timed out after {self.timeout.total}s: {request}") from e
        except (aiohttp.ClientError, OSError) as e:
            raise TransportError(f"Request failed: {request}: {e}") from e
