"""
Traversal Detector - Test Fixtures

Shared pytest fixtures: network service and crawl result factories, a
recording stub transport and a fixed clock.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional, Tuple

import pytest

# Ensure the project root is on sys.path so `traversal_detector.*` imports resolve
PROJECT_ROOT = str(Path(__file__).resolve().parent.parent)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from traversal_detector.core.http_client import HttpRequest, HttpResponse
from traversal_detector.schemas.network import (
    CrawlResult,
    CrawlTarget,
    NetworkEndpoint,
    NetworkService,
    TargetInfo,
    WebServiceContext,
)

PASSWD_BODY = (
    "root:x:0:0:root:/root:/bin/bash\n"
    "daemon:x:1:1:daemon:/usr/sbin:/usr/sbin/nologin\n"
)
NOT_FOUND_BODY = "<html><body>File not found</body></html>"
FIXED_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def make_crawl_result(url: str, method: str = "GET", response_code: int = 200) -> CrawlResult:
    return CrawlResult(
        crawl_target=CrawlTarget(http_method=method, url=url),
        response_code=response_code,
    )


def make_service(
    crawl_results=(),
    hostname: str = "example.com",
    port: int = 80,
    service_name: str = "http",
    application_root: str = "/",
) -> NetworkService:
    return NetworkService(
        network_endpoint=NetworkEndpoint(hostname=hostname, port=port),
        service_name=service_name,
        web_service_context=WebServiceContext(
            application_root=application_root,
            crawl_results=tuple(crawl_results),
        ),
    )


class StubHttpClient:
    """Records every send and answers through ``responder``.

    ``responder`` receives the request and returns an HttpResponse or raises
    (e.g. TransportError).
    """

    def __init__(self, responder: Optional[Callable[[HttpRequest], HttpResponse]] = None):
        self.responder = responder or (lambda request: HttpResponse(status=404, body=NOT_FOUND_BODY))
        self.calls: List[Tuple[HttpRequest, NetworkService]] = []

    async def send(self, request: HttpRequest, network_service: NetworkService) -> HttpResponse:
        self.calls.append((request, network_service))
        return self.responder(request)

    @property
    def sent_urls(self) -> List[str]:
        return [request.url for request, _ in self.calls]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def target_info():
    return TargetInfo(network_endpoints=(NetworkEndpoint(hostname="example.com"),))


@pytest.fixture
def web_service():
    """A plain HTTP service with one crawled file download endpoint."""
    return make_service([make_crawl_result("http://example.com/files/view.php?name=report.pdf")])


@pytest.fixture
def stub_client():
    return StubHttpClient()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_TIME
