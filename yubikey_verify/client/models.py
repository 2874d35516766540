"""
Verification Models
===================
Service status codes and the per-call verification result.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class ServiceStatus(str, Enum):
    """Status codes returned by the validation service."""
    OK = "OK"
    BAD_OTP = "BAD_OTP"
    REPLAYED_OTP = "REPLAYED_OTP"
    BAD_SIGNATURE = "BAD_SIGNATURE"
    MISSING_PARAMETER = "MISSING_PARAMETER"
    NO_SUCH_CLIENT = "NO_SUCH_CLIENT"
    OPERATION_NOT_ALLOWED = "OPERATION_NOT_ALLOWED"
    BACKEND_ERROR = "BACKEND_ERROR"
    NOT_ENOUGH_ANSWERS = "NOT_ENOUGH_ANSWERS"
    REPLAYED_REQUEST = "REPLAYED_REQUEST"


@dataclass
class VerificationResult:
    """Outcome of a verification call."""
    success: bool
    reason: Optional[str] = None
    endpoint: Optional[str] = None
    response: Dict[str, str] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.success
