"""
YubiKey Verify
==============
OTP validation client for the YubiKey validation service.
"""

__version__ = "0.1.0"

# Exceptions
from yubikey_verify.exceptions import (
    YubicoError,
    OtpParseError,
    ConfigError,
    TransportError,
    TransportTimeoutError,
    ProtocolError,
)

# OTP
from yubikey_verify.otp import (
    OtpParser,
    ParsedOtp,
    parse_otp,
)

# Signing
from yubikey_verify.signing import (
    serialize_params,
    compute_signature,
    sign_params,
    generate_nonce,
)

# HTTP
from yubikey_verify.http import (
    HttpFetcher,
    HttpxFetcher,
)

# Client
from yubikey_verify.client import (
    DEFAULT_ENDPOINTS,
    VerifierConfig,
    ServiceStatus,
    VerificationResult,
    VerificationClient,
    parse_response,
)

__all__ = [
    # Exceptions
    "YubicoError",
    "OtpParseError",
    "ConfigError",
    "TransportError",
    "TransportTimeoutError",
    "ProtocolError",
    # OTP
    "OtpParser",
    "ParsedOtp",
    "parse_otp",
    # Signing
    "serialize_params",
    "compute_signature",
    "sign_params",
    "generate_nonce",
    # HTTP
    "HttpFetcher",
    "HttpxFetcher",
    # Client
    "DEFAULT_ENDPOINTS",
    "VerifierConfig",
    "ServiceStatus",
    "VerificationResult",
    "VerificationClient",
    "parse_response",
]
