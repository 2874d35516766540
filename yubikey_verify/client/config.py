"""
Verifier Configuration
======================
Configuration for the validation service connection.
"""

import os
from dataclasses import dataclass, field
from typing import List

DEFAULT_ENDPOINTS = [
    "https://api.yubico.com/wsapi/2.0/verify",
    "https://api2.yubico.com/wsapi/2.0/verify",
    "https://api3.yubico.com/wsapi/2.0/verify",
    "https://api4.yubico.com/wsapi/2.0/verify",
    "https://api5.yubico.com/wsapi/2.0/verify",
]


def _endpoints_from_env() -> List[str]:
    raw = os.environ.get("YUBICO_API_URLS", "")
    urls = [url.strip() for url in raw.split(",") if url.strip()]
    return urls or list(DEFAULT_ENDPOINTS)


@dataclass
class VerifierConfig:
    """Configuration for the validation service connection."""
    client_id: str = os.environ.get("YUBICO_CLIENT_ID", "")
    secret_key: str = os.environ.get("YUBICO_SECRET_KEY", "")
    endpoints: List[str] = field(default_factory=_endpoints_from_env)
    sync_level: str = os.environ.get("YUBICO_SYNC_LEVEL", "0")
    server_timeout: int = int(os.environ.get("YUBICO_SERVER_TIMEOUT", "30"))
    request_timestamp: bool = True
    delimiter: str = os.environ.get("YUBICO_OTP_DELIMITER", "[:]")
    http_timeout: float = float(os.environ.get("YUBICO_HTTP_TIMEOUT", "10.0"))
    http_retries: int = int(os.environ.get("YUBICO_HTTP_RETRIES", "1"))
