from traversal_detector.core.vuln_engine.testers.base_tester import BaseTester
from traversal_detector.core.vuln_engine.testers.file_access import PathTraversalTester

__all__ = ["BaseTester", "PathTraversalTester"]
