"""
Traversal Detector - Report Service

Turns confirmed exploits into one DetectionReport per network service.
"""
from datetime import datetime
from typing import Dict, Iterable, List, Sequence

from traversal_detector.core.network_service_utils import build_web_application_root_url
from traversal_detector.core.vuln_engine.potential_exploit import PotentialExploit
from traversal_detector.schemas.network import NetworkService, TargetInfo
from traversal_detector.schemas.report import (
    AdditionalDetail,
    DetectionReport,
    DetectionStatus,
    Severity,
    Vulnerability,
    VulnerabilityId,
)

VULNERABILITY_ID = VulnerabilityId(publisher="GOOGLE", value="GENERIC_PT")
SEVERITY = Severity.MEDIUM
TITLE_TEMPLATE = "Generic Path Traversal vulnerability at {root_url}"
DESCRIPTION = "Generic Path Traversal vulnerability allowing to leak arbitrary files."
RECOMMENDATION = (
    "Do not accept user-controlled file paths or restrict file paths to a set of"
    " pre-defined paths. If the application is meant to let users define file"
    " names, apply `basename` or equivalent before handling the provided file"
    " name."
)


def group_by_service(
    exploits: Iterable[PotentialExploit],
) -> Dict[NetworkService, List[PotentialExploit]]:
    """Partition exploits by owning service, dropping duplicates."""
    grouped: Dict[NetworkService, List[PotentialExploit]] = {}
    for exploit in exploits:
        service_exploits = grouped.setdefault(exploit.network_service, [])
        if exploit not in service_exploits:
            service_exploits.append(exploit)
    return grouped


def build_additional_details(exploits: Sequence[PotentialExploit]) -> List[AdditionalDetail]:
    details = [AdditionalDetail(text=f"Found {len(exploits)} distinct vulnerable configurations.")]
    details.extend(AdditionalDetail(text=str(exploit)) for exploit in exploits)
    return details


def build_detection_report(
    target_info: TargetInfo,
    network_service: NetworkService,
    exploits: Sequence[PotentialExploit],
    detected_at: datetime,
) -> DetectionReport:
    """Build the finding for one service from its confirmed exploits.

    Evidence follows priority then URL order.
    """
    ordered = sorted(exploits, key=PotentialExploit.sort_key)
    return DetectionReport(
        target_info=target_info,
        network_service=network_service,
        detection_timestamp=detected_at,
        detection_status=DetectionStatus.VULNERABILITY_VERIFIED,
        vulnerability=Vulnerability(
            main_id=VULNERABILITY_ID,
            severity=SEVERITY,
            title=TITLE_TEMPLATE.format(
                root_url=build_web_application_root_url(network_service)
            ),
            description=DESCRIPTION,
            recommendation=RECOMMENDATION,
            additional_details=build_additional_details(ordered),
        ),
    )
