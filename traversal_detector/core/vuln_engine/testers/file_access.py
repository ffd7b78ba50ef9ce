"""
Traversal Detector - File Access Vulnerability Testers
"""
import re
from typing import Dict, Optional, Tuple

from traversal_detector.core.vuln_engine.testers.base_tester import BaseTester

ETC_PASSWD_PATTERN = re.compile(r"root:x:0:0:")


class PathTraversalTester(BaseTester):
    """Tester for Path Traversal, confirmed by leaked /etc/passwd content"""

    def __init__(self):
        super().__init__()
        self.name = "path_traversal"

    def analyze_response(
        self,
        payload: str,
        response_status: int,
        response_headers: Dict,
        response_body: str,
        context: Dict
    ) -> Tuple[bool, float, Optional[str]]:
        """Check for /etc/passwd content"""
        if response_body and ETC_PASSWD_PATTERN.search(response_body):
            return True, 0.95, "Path traversal confirmed: /etc/passwd content detected"
        return False, 0.0, None
