"""
Verification Exceptions
=======================
Error taxonomy for OTP parsing, configuration, transport and protocol failures.

A rejected OTP is not an error: it comes back as an unsuccessful
``VerificationResult``. These exceptions cover everything that prevents a
trust decision from being made at all.
"""

from typing import Optional


class YubicoError(Exception):
    """Base exception for all verification client errors."""
    def __init__(self, message: str, endpoint: Optional[str] = None):
        self.message = message
        self.endpoint = endpoint
        if endpoint:
            super().__init__(f"[{endpoint}] {message}")
        else:
            super().__init__(message)


class OtpParseError(YubicoError, ValueError):
    """Raised when an OTP string matches neither supported keyboard layout."""
    pass


class ConfigError(YubicoError):
    """Raised for unusable client configuration (bad secret, no endpoints)."""
    pass


class TransportError(YubicoError):
    """Raised when the validation service could not be reached."""
    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        self.status_code = status_code
        super().__init__(message, endpoint=endpoint)


class TransportTimeoutError(TransportError):
    """Raised specifically on timeouts."""
    pass


class ProtocolError(YubicoError):
    """Raised when a response body does not carry a status field."""
    def __init__(self, message: str, endpoint: Optional[str] = None, body: str = ""):
        self.body = body
        super().__init__(message, endpoint=endpoint)
