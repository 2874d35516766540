"""
YubiKey OTP Parsing
===================
Decomposition of raw OTP strings into password, prefix and ciphertext.
"""

from ..exceptions import OtpParseError
from .models import Alphabet, ParsedOtp, QWERTY, DVORAK, ALPHABETS
from .parser import OtpParser, parse_otp, DEFAULT_DELIMITER

__all__ = [
    # Models
    "Alphabet",
    "ParsedOtp",
    "QWERTY",
    "DVORAK",
    "ALPHABETS",
    # Parser
    "OtpParser",
    "parse_otp",
    "DEFAULT_DELIMITER",
    "OtpParseError",
]
