"""
OTP Parser
==========
Regex based decomposition of an OTP string, with keyboard layout remapping.
"""

import re
from functools import lru_cache
from typing import Optional, Pattern, Sequence
import structlog

from ..exceptions import OtpParseError
from .models import (
    ALPHABETS,
    CIPHERTEXT_LENGTH,
    PREFIX_MAX_LENGTH,
    Alphabet,
    ParsedOtp,
)

logger = structlog.get_logger(__name__)

DEFAULT_DELIMITER = "[:]"


@lru_cache(maxsize=32)
def _compile(symbols: str, delimiter: str) -> Pattern[str]:
    charset = "[" + re.escape(symbols) + "]"
    return re.compile(
        rf"^((.*){delimiter})?"
        rf"(({charset}{{0,{PREFIX_MAX_LENGTH}}})"
        rf"({charset}{{{CIPHERTEXT_LENGTH}}}))$",
        re.IGNORECASE | re.ASCII,
    )


def parse_otp(
    raw: str,
    delimiter: str = DEFAULT_DELIMITER,
    alphabets: Sequence[Alphabet] = ALPHABETS,
) -> ParsedOtp:
    """
    Split an OTP into password, prefix, ciphertext and normalized OTP.

    Each alphabet is tried in turn. The first one whose pattern matches wins
    and its ``prefix+ciphertext`` group is transliterated to standard modhex.

    Args:
        raw: String as typed by the token, optionally preceded by a
            static password and the delimiter
        delimiter: Regex character class separating password and OTP
        alphabets: Layouts to try, in order

    Returns:
        ParsedOtp

    Raises:
        OtpParseError: If no alphabet matches
    """
    for alphabet in alphabets:
        match = _compile(alphabet.symbols, delimiter).match(raw)
        if match is None:
            continue

        parsed = ParsedOtp(
            password=match.group(2) or "",
            prefix=match.group(4).lower(),
            ciphertext=match.group(5).lower(),
            otp=alphabet.to_modhex(match.group(3)),
            layout=alphabet.name,
        )
        logger.debug(
            "OTP parsed",
            layout=alphabet.name,
            public_id=parsed.public_id,
            has_password=bool(parsed.password),
        )
        return parsed

    raise OtpParseError("Could not parse YubiKey OTP")


class OtpParser:
    """Parser bound to a password delimiter."""

    def __init__(self, delimiter: Optional[str] = None):
        self.delimiter = delimiter or DEFAULT_DELIMITER

    def parse(self, raw: str) -> ParsedOtp:
        return parse_otp(raw, delimiter=self.delimiter)
