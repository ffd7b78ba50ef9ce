"""
Traversal Detector - Base Vulnerability Tester

Base class for response oracles.
"""
from typing import Dict, Optional, Tuple


class BaseTester:
    """Base class for vulnerability testers"""

    def __init__(self):
        self.name = "base"

    def analyze_response(
        self,
        payload: str,
        response_status: int,
        response_headers: Dict,
        response_body: str,
        context: Dict
    ) -> Tuple[bool, float, Optional[str]]:
        """
        Analyze response to determine if vulnerable.

        Returns:
            Tuple of (is_vulnerable, confidence, evidence)
        """
        return False, 0.0, None
