"""
YubiKey Validation Client
=========================
Client for the validation service's ``verify`` endpoint.

Usage:
    from yubikey_verify.client import VerificationClient

    async with VerificationClient(client_id, secret_b64) as client:
        result = await client.verify(otp)
        if not result:
            print(result.reason)
"""

from .config import DEFAULT_ENDPOINTS, VerifierConfig
from .models import ServiceStatus, VerificationResult
from .response import extract_status, is_ok, parse_response
from .client import VerificationClient, decode_secret

__all__ = [
    # Config
    "DEFAULT_ENDPOINTS",
    "VerifierConfig",
    # Models
    "ServiceStatus",
    "VerificationResult",
    # Response
    "parse_response",
    "extract_status",
    "is_ok",
    # Client
    "VerificationClient",
    "decode_secret",
]
