"""
Traversal Detector - Potential Exploits

A candidate request waiting to be verified, and the budgeted selection of
which candidates get sent.
"""
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from traversal_detector.core.http_client import HttpRequest
from traversal_detector.core.network_service_utils import build_web_application_root_url
from traversal_detector.core.vuln_engine.injection_context import InjectionPoint
from traversal_detector.schemas.network import NetworkService


@dataclass(frozen=True)
class PotentialExploit:
    """A synthesized request aimed at one service.

    Equality and hashing only look at the request and the service, so the
    same final request produced through different injection points counts
    once. ``priority`` is the rank of the injection point (0 is tested first).
    """
    request: HttpRequest
    network_service: NetworkService
    priority: int = field(default=0, compare=False)
    injection_point: InjectionPoint = field(default=InjectionPoint.PATH_SUFFIX, compare=False)
    payload: str = field(default="", compare=False)

    def sort_key(self) -> Tuple[int, str, str]:
        return (
            self.priority,
            self.request.url,
            build_web_application_root_url(self.network_service),
        )

    def __str__(self) -> str:
        return (
            f"{self.request.method} {self.request.url} "
            f"(injection point: {self.injection_point.value}, payload: {self.payload})"
        )


def select_exploits(exploits: Iterable[PotentialExploit], max_exploits: int) -> List[PotentialExploit]:
    """Deduplicate, order and cap candidates.

    Candidates are sorted by priority, then URL, then service root URL. When
    two candidates share a request and service the better ranked one is
    kept. At most ``max_exploits`` candidates are returned.
    """
    if max_exploits <= 0:
        return []

    selected: List[PotentialExploit] = []
    seen = set()
    for exploit in sorted(exploits, key=PotentialExploit.sort_key):
        if exploit in seen:
            continue
        seen.add(exploit)
        selected.append(exploit)
        if len(selected) >= max_exploits:
            break
    return selected
