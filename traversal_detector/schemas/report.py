"""
Traversal Detector - Report Schemas
"""
from datetime import datetime
from enum import Enum
from typing import List
from pydantic import BaseModel, Field

from traversal_detector.schemas.network import NetworkService, TargetInfo


class Severity(str, Enum):
    UNSPECIFIED = "UNSPECIFIED"
    MINIMAL = "MINIMAL"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class DetectionStatus(str, Enum):
    UNSPECIFIED = "UNSPECIFIED"
    SAFE = "SAFE"
    VULNERABILITY_PRESENT = "VULNERABILITY_PRESENT"
    VULNERABILITY_VERIFIED = "VULNERABILITY_VERIFIED"


class VulnerabilityId(BaseModel):
    """Identifier of a vulnerability within a publisher's namespace"""
    publisher: str
    value: str


class AdditionalDetail(BaseModel):
    """Free-text evidence attached to a vulnerability"""
    text: str


class Vulnerability(BaseModel):
    """Vulnerability description for a finding"""
    main_id: VulnerabilityId
    severity: Severity = Severity.UNSPECIFIED
    title: str
    description: str = ""
    recommendation: str = ""
    additional_details: List[AdditionalDetail] = Field(default_factory=list)


class DetectionReport(BaseModel):
    """A confirmed finding for one network service"""
    target_info: TargetInfo
    network_service: NetworkService
    detection_timestamp: datetime
    detection_status: DetectionStatus
    vulnerability: Vulnerability


class DetectionReportList(BaseModel):
    """All findings produced by one detector run"""
    detection_reports: List[DetectionReport] = Field(default_factory=list)
