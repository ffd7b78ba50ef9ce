"""Generic path traversal detector."""
from traversal_detector.config import ConfigurationError, Settings, load_settings
from traversal_detector.core.http_client import HttpClient, HttpRequest, HttpResponse, TransportError
from traversal_detector.services.detector_service import GenericPathTraversalDetector

__all__ = [
    "ConfigurationError",
    "Settings",
    "load_settings",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "TransportError",
    "GenericPathTraversalDetector",
]
