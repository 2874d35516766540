"""
Request Signing
===============
Canonical parameter serialization and HMAC-SHA1 request signatures.
"""

import base64
import hmac
import secrets
from typing import Any, Mapping

SIGNATURE_ALGORITHM = "sha1"
SIGNATURE_PARAM = "h"
NONCE_BYTES = 16


def serialize_params(params: Mapping[str, Any]) -> str:
    """
    Serialize parameters as ``key=value`` pairs in ascending key order.

    Args:
        params: Request parameters (values are passed through ``str``)

    Returns:
        Query string without a leading ``&``
    """
    return "&".join(
        f"{key}={params[key]}"
        for key in sorted(params, key=lambda k: k.encode())
    )


def compute_signature(secret: bytes, message: str) -> str:
    """
    Compute the base64 HMAC-SHA1 signature of a serialized query.

    Args:
        secret: Raw shared secret
        message: Serialized, sorted parameters

    Returns:
        Base64 digest with ``+`` percent-encoded for use in a URL
    """
    digest = hmac.new(secret, message.encode(), SIGNATURE_ALGORITHM).digest()
    return base64.b64encode(digest).decode().replace("+", "%2B")


def sign_params(params: Mapping[str, Any], secret: bytes) -> str:
    """
    Serialize parameters and append the signature when a secret is set.

    Args:
        params: Request parameters, without ``h``
        secret: Raw shared secret, may be empty

    Returns:
        Query string ready to append to an endpoint URL
    """
    query = serialize_params(params)
    if secret:
        query += f"&{SIGNATURE_PARAM}={compute_signature(secret, query)}"
    return query


def generate_nonce() -> str:
    """Generate a unique nonce for a verification request."""
    return secrets.token_hex(NONCE_BYTES)
