"""
OTP Models
==========
Alphabet definitions and the parsed OTP structure.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple


# YubiKeys type modhex: 16 keys that sit in the same place on most layouts
MODHEX = "cbdefghijklnrtuv"

PREFIX_MAX_LENGTH = 16
CIPHERTEXT_LENGTH = 32


@dataclass(frozen=True)
class Alphabet:
    """A keyboard layout's rendering of the modhex alphabet."""
    name: str
    symbols: str
    translation: Dict[int, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if len(self.symbols) != len(MODHEX):
            raise ValueError(f"Alphabet {self.name} must have {len(MODHEX)} symbols")
        object.__setattr__(self, "translation", str.maketrans(self.symbols, MODHEX))

    def to_modhex(self, text: str) -> str:
        """Transliterate text typed on this layout into standard modhex."""
        return text.lower().translate(self.translation)


QWERTY = Alphabet(name="qwerty", symbols=MODHEX)

# The same physical keys read back through a Dvorak layout
DVORAK = Alphabet(name="dvorak", symbols="jxe.uidchtnbpygk")

# Tried in order
ALPHABETS: Tuple[Alphabet, ...] = (QWERTY, DVORAK)


@dataclass(frozen=True)
class ParsedOtp:
    """An OTP string split into its structural parts."""
    password: str
    prefix: str
    ciphertext: str
    otp: str
    layout: str = QWERTY.name

    @property
    def public_id(self) -> str:
        """Token identity in standard modhex."""
        return self.otp[:len(self.prefix)]
