"""
Response Parsing
================
Parsing of the validation service's line oriented ``key=value`` body.
"""

from typing import Dict, Mapping, Optional

from ..exceptions import ProtocolError

STATUS_KEY = "status"


def parse_response(body: str) -> Dict[str, str]:
    """
    Parse a response body into a mapping.

    Lines may end in LF or CRLF. Empty lines and lines without ``=`` are
    skipped; each remaining line is split on its first ``=``.

    Args:
        body: Response body text

    Returns:
        Dictionary of response fields
    """
    data: Dict[str, str] = {}
    for line in body.split("\n"):
        line = line.rstrip("\r")
        if not line or "=" not in line:
            continue
        key, value = line.split("=", 1)
        data[key] = value
    return data


def extract_status(
    data: Mapping[str, str],
    endpoint: Optional[str] = None,
    body: str = "",
) -> str:
    """
    Return the raw ``status`` field of a parsed response.

    Raises:
        ProtocolError: If the response has no status
    """
    if STATUS_KEY not in data:
        raise ProtocolError(
            "Response has no status field", endpoint=endpoint, body=body
        )
    return data[STATUS_KEY]


def is_ok(status: str) -> bool:
    """Whether a status string reports a valid OTP."""
    return status.strip().lower() == "ok"
