"""
Traversal Detector - Network Schemas

Read-only scan input handed over by the scanning engine: the target, the
network services matched on it, and what the crawler saw on each of them.
"""
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class NetworkEndpoint(BaseModel):
    """Address of a reachable service"""
    model_config = ConfigDict(frozen=True)

    ip_address: Optional[str] = Field(None, description="IPv4 or IPv6 address")
    hostname: Optional[str] = Field(None, description="Hostname, preferred over the IP")
    port: Optional[int] = Field(None, ge=0, le=65535, description="TCP port")


class CrawlTarget(BaseModel):
    """An HTTP method and URL seen by the crawler"""
    model_config = ConfigDict(frozen=True)

    http_method: str = Field(..., description="HTTP method, e.g. GET")
    url: str = Field(..., description="Absolute URL")


class CrawlResult(BaseModel):
    """A crawled target together with the response code observed at crawl time"""
    model_config = ConfigDict(frozen=True)

    crawl_target: CrawlTarget
    response_code: int = 0


class WebServiceContext(BaseModel):
    """Web specific context of a network service"""
    model_config = ConfigDict(frozen=True)

    application_root: str = "/"
    crawl_results: Tuple[CrawlResult, ...] = ()


class NetworkService(BaseModel):
    """A service identified on the target"""
    model_config = ConfigDict(frozen=True)

    network_endpoint: NetworkEndpoint
    service_name: str = ""
    transport_protocol: str = "TCP"
    supported_ssl_versions: Tuple[str, ...] = ()
    web_service_context: Optional[WebServiceContext] = None

    @property
    def crawl_results(self) -> Tuple[CrawlResult, ...]:
        if self.web_service_context is None:
            return ()
        return self.web_service_context.crawl_results


class TargetInfo(BaseModel):
    """The scanned target"""
    model_config = ConfigDict(frozen=True)

    network_endpoints: Tuple[NetworkEndpoint, ...] = ()
