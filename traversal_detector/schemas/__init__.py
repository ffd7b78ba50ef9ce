from traversal_detector.schemas.network import (
    CrawlResult,
    CrawlTarget,
    NetworkEndpoint,
    NetworkService,
    TargetInfo,
    WebServiceContext,
)
from traversal_detector.schemas.report import (
    AdditionalDetail,
    DetectionReport,
    DetectionReportList,
    DetectionStatus,
    Severity,
    Vulnerability,
    VulnerabilityId,
)

__all__ = [
    "CrawlResult",
    "CrawlTarget",
    "NetworkEndpoint",
    "NetworkService",
    "TargetInfo",
    "WebServiceContext",
    "AdditionalDetail",
    "DetectionReport",
    "DetectionReportList",
    "DetectionStatus",
    "Severity",
    "Vulnerability",
    "VulnerabilityId",
]
