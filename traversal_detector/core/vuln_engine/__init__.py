from traversal_detector.core.vuln_engine.injection_context import InjectionPoint, PriorityOrder
from traversal_detector.core.vuln_engine.potential_exploit import PotentialExploit, select_exploits
from traversal_detector.core.vuln_engine.payload_generator import PAYLOADS, ExploitGenerator
from traversal_detector.core.vuln_engine.engine import ExploitVerifier

__all__ = [
    "InjectionPoint",
    "PriorityOrder",
    "PotentialExploit",
    "select_exploits",
    "PAYLOADS",
    "ExploitGenerator",
    "ExploitVerifier",
]
