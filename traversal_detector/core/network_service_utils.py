"""
Traversal Detector - Network Service Helpers

Classifies matched services and derives the root URL of the web
application they serve.
"""
from traversal_detector.schemas.network import NetworkService

WEB_SERVICE_NAMES = frozenset({
    "http",
    "https",
    "http-alt",
    "http-proxy",
    "radan-http",
    "ssl/http",
    "ssl/https",
    "ssl/http-alt",
})

TLS_SERVICE_NAMES = frozenset({"https", "ssl/http", "ssl/https", "ssl/http-alt"})

DEFAULT_PORTS = {"http": 80, "https": 443}


def is_web_service(network_service: NetworkService) -> bool:
    """True for HTTP-family services."""
    name = network_service.service_name.lower()
    return name in WEB_SERVICE_NAMES or name.startswith("http")


def is_plain_http(network_service: NetworkService) -> bool:
    """True for web services reached without TLS."""
    if not is_web_service(network_service):
        return False
    if network_service.service_name.lower() in TLS_SERVICE_NAMES:
        return False
    return not network_service.supported_ssl_versions


def _host(network_service: NetworkService) -> str:
    endpoint = network_service.network_endpoint
    if endpoint.hostname:
        return endpoint.hostname
    if endpoint.ip_address and ":" in endpoint.ip_address:
        return f"[{endpoint.ip_address}]"
    return endpoint.ip_address or ""


def _application_root(network_service: NetworkService) -> str:
    root = "/"
    if network_service.web_service_context is not None:
        root = network_service.web_service_context.application_root or "/"
    if not root.startswith("/"):
        root = "/" + root
    if not root.endswith("/"):
        root += "/"
    return root


def build_web_application_root_url(network_service: NetworkService) -> str:
    """Build ``scheme://host[:port]/root/`` for a web service.

    Default ports are omitted and the application root always starts and
    ends with a slash.
    """
    scheme = "http" if is_plain_http(network_service) else "https"
    authority = _host(network_service)
    port = network_service.network_endpoint.port
    if port and port != DEFAULT_PORTS[scheme]:
        authority = f"{authority}:{port}"
    return f"{scheme}://{authority}{_application_root(network_service)}"
