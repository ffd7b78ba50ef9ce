"""
Traversal Detector - Injection Points

Locations inside a crawled request where a traversal payload can be
substituted, and the rank lookup that turns the configured order of
those locations into a testing priority.
"""

from enum import Enum
from typing import Dict, Iterable, List


class InjectionPoint(str, Enum):
    """Where a payload is placed in the candidate request."""
    QUERY_PARAMETER = "QUERY_PARAMETER"
    PATH_SEGMENT = "PATH_SEGMENT"
    PATH_SUFFIX = "PATH_SUFFIX"
    ROOT = "ROOT"


DEFAULT_INJECTION_POINTS: List[InjectionPoint] = [
    InjectionPoint.QUERY_PARAMETER,
    InjectionPoint.PATH_SEGMENT,
    InjectionPoint.PATH_SUFFIX,
    InjectionPoint.ROOT,
]


class PriorityOrder:
    """Total order over injection points derived from their configured sequence.

    Rank 0 is tested first. Points that are not configured have no rank.
    """

    def __init__(self, injection_points: Iterable[InjectionPoint]):
        self._points = tuple(injection_points)
        self._ranks: Dict[InjectionPoint, int] = {}
        for rank, point in enumerate(self._points):
            if point in self._ranks:
                raise ValueError(f"Injection point configured twice: {point.value}")
            self._ranks[point] = rank

    def rank(self, point: InjectionPoint) -> int:
        try:
            return self._ranks[point]
        except KeyError:
            raise ValueError(f"Injection point not configured: {point.value}") from None

    def __len__(self) -> int:
        return len(self._points)
