"""
Traversal Detector - Detector Service

Generic path traversal detection over crawled web endpoints:

1. keep crawled GET endpoints that were not redirects
2. inject every payload at every configured injection point
3. deduplicate, order by priority then URL, cap to the testing budget
4. send the surviving candidates and check for /etc/passwd content
5. report confirmed exploits, one finding per service
"""
import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence

from traversal_detector.config import Settings, load_settings
from traversal_detector.core.http_client import HttpClient, HttpRequest
from traversal_detector.core.network_service_utils import is_web_service
from traversal_detector.core.vuln_engine.engine import ExploitVerifier
from traversal_detector.core.vuln_engine.injection_context import PriorityOrder
from traversal_detector.core.vuln_engine.payload_generator import PAYLOADS, ExploitGenerator
from traversal_detector.core.vuln_engine.potential_exploit import PotentialExploit, select_exploits
from traversal_detector.core.vuln_engine.testers import BaseTester
from traversal_detector.schemas.network import CrawlResult, CrawlTarget, NetworkService, TargetInfo
from traversal_detector.schemas.report import DetectionReportList
from traversal_detector.services.report_service import build_detection_report, group_by_service

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def should_fuzz_crawl_result(crawl_result: CrawlResult) -> bool:
    """GET endpoints whose crawl response was not a redirect.

    Error responses are fuzzed as well, servers sometimes leak file
    contents in them.
    """
    response_code = crawl_result.response_code
    return (
        (response_code < 300 or response_code >= 400)
        and crawl_result.crawl_target.http_method == "GET"
    )


def build_http_request_from_crawl_target(crawl_target: CrawlTarget) -> HttpRequest:
    return HttpRequest(method=crawl_target.http_method, url=crawl_target.url)


class GenericPathTraversalDetector:
    """Detects generic path traversal vulnerabilities on web services."""

    PLUGIN_NAME = "GenericPathTraversalDetector"
    PLUGIN_VERSION = "1.2"
    PLUGIN_DESCRIPTION = "This plugin detects generic Path Traversal vulnerabilities."

    def __init__(
        self,
        http_client: HttpClient,
        settings: Optional[Settings] = None,
        clock: Optional[Callable[[], datetime]] = None,
        tester: Optional[BaseTester] = None,
    ):
        self.settings = settings if settings is not None else load_settings()
        self.http_client = http_client
        self.clock = clock or _utc_now
        self.priority_order = PriorityOrder(self.settings.INJECTION_POINTS)
        self.verifier = ExploitVerifier(
            http_client,
            tester=tester,
            max_concurrency=self.settings.MAX_CONCURRENT_REQUESTS,
        )

    async def detect(
        self,
        target_info: TargetInfo,
        matched_services: Sequence[NetworkService],
    ) -> DetectionReportList:
        """Run the detection pipeline and return one report per vulnerable service."""
        logger.info(f"{self.PLUGIN_NAME} starts detecting.")

        candidates: List[PotentialExploit] = []
        for service in matched_services:
            if not is_web_service(service):
                logger.debug(f"Skipping non-web service '{service.service_name}'")
                continue
            candidates.extend(self.generate_potential_exploits(service))

        selected = select_exploits(candidates, self.settings.MAX_EXPLOITS_TO_TEST)
        logger.info(
            f"Testing {len(selected)} of {len(candidates)} potential exploits "
            f"(budget {self.settings.MAX_EXPLOITS_TO_TEST})"
        )

        confirmed = await self.verifier.verify(selected)

        reports = [
            build_detection_report(target_info, service, exploits, self.clock())
            for service, exploits in group_by_service(confirmed).items()
        ]
        logger.info(f"{self.PLUGIN_NAME} finished with {len(reports)} finding(s).")
        return DetectionReportList(detection_reports=reports)

    def select_crawl_targets(self, network_service: NetworkService) -> List[CrawlTarget]:
        """Eligible crawl targets of a service, sorted by URL and capped."""
        targets = []
        for crawl_result in network_service.crawl_results:
            if should_fuzz_crawl_result(crawl_result):
                targets.append(crawl_result.crawl_target)
            else:
                logger.debug(
                    f"Not fuzzing {crawl_result.crawl_target.http_method} "
                    f"{crawl_result.crawl_target.url} ({crawl_result.response_code})"
                )
        targets.sort(key=lambda target: target.url)
        return targets[:self.settings.MAX_CRAWLED_URLS_TO_FUZZ]

    def generate_potential_exploits(self, network_service: NetworkService) -> List[PotentialExploit]:
        """All candidates for one service, before cross-service deduplication."""
        exploits: List[PotentialExploit] = []
        for crawl_target in self.select_crawl_targets(network_service):
            generator = ExploitGenerator(
                build_http_request_from_crawl_target(crawl_target),
                network_service,
                self.settings.INJECTION_POINTS,
                priority_order=self.priority_order,
            )
            exploits.extend(generator.inject_payloads(PAYLOADS))
        logger.debug(f"Generated {len(exploits)} potential exploits for {network_service.service_name}")
        return exploits
