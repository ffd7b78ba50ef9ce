from traversal_detector.services.detector_service import (
    GenericPathTraversalDetector,
    build_http_request_from_crawl_target,
    should_fuzz_crawl_result,
)
from traversal_detector.services.report_service import build_detection_report, group_by_service

__all__ = [
    "GenericPathTraversalDetector",
    "build_http_request_from_crawl_target",
    "should_fuzz_crawl_result",
    "build_detection_report",
    "group_by_service",
]
