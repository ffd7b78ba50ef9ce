"""
Traversal Detector - Exploit Verification Engine

Sends selected candidates and decides, through a response oracle, which of
them actually leak the targeted file. Transport failures only drop the
affected candidate.
"""
import asyncio
import logging
from typing import List, Optional, Sequence

from traversal_detector.core.http_client import HttpClient, TransportError
from traversal_detector.core.vuln_engine.potential_exploit import PotentialExploit
from traversal_detector.core.vuln_engine.testers import BaseTester, PathTraversalTester

logger = logging.getLogger(__name__)


class ExploitVerifier:
    """
    Verifies PotentialExploits against live services.

    Calls run concurrently, bounded by ``max_concurrency``; the HTTP client
    is shared read-only between them.
    """

    def __init__(
        self,
        http_client: HttpClient,
        tester: Optional[BaseTester] = None,
        max_concurrency: int = 10,
    ):
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self.http_client = http_client
        self.tester = tester or PathTraversalTester()
        self.max_concurrency = max_concurrency

    async def is_exploitable(self, exploit: PotentialExploit) -> bool:
        """Send one candidate and apply the oracle to the response body."""
        try:
            response = await self.http_client.send(exploit.request, exploit.network_service)
        except TransportError as e:
            logger.warning(f"Unable to query '{exploit.request}': {e}")
            return False

        if response.body is None:
            return False

        is_vulnerable, _, evidence = self.tester.analyze_response(
            payload=exploit.payload,
            response_status=response.status,
            response_headers=response.headers,
            response_body=response.body,
            context={"injection_point": exploit.injection_point.value},
        )
        if is_vulnerable:
            logger.info(f"{evidence}: {exploit}")
        return is_vulnerable

    async def verify(self, exploits: Sequence[PotentialExploit]) -> List[PotentialExploit]:
        """Verify all candidates, returning the confirmed ones in input order."""
        if not exploits:
            return []

        sem = asyncio.Semaphore(self.max_concurrency)

        async def _verify(exploit: PotentialExploit) -> bool:
            async with sem:
                return await self.is_exploitable(exploit)

        results = await asyncio.gather(*[_verify(exploit) for exploit in exploits])
        return [exploit for exploit, confirmed in zip(exploits, results) if confirmed]
