"""
Lookup tables for the RFC 4648 and Crockford base32 alphabets

The encode alphabets map a 5-bit value (0-31) to its output symbol. The
decode tables map every possible input byte (0-255) to either a 5-bit value
or INVALID. All tables are built once at import time and are immutable.
"""

from enum import Enum
from typing import Dict, Union


# Sentinel stored in the decode tables for bytes outside the alphabet
INVALID = 0xFF

# Padding character used by the RFC 4648 alphabet
PAD = ord('=')

# Readability separator accepted (and ignored) by the Crockford alphabet
SEPARATOR = ord('-')

# RFC 4648 section 6 encoding table
STANDARD_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

# Crockford's encoding table: digits, then letters without I, L, O and U
CROCKFORD_ALPHABET = b"0123456789ABCDEFGHJKMNPQRSTVWXYZ"


class Alphabet(Enum):
    """Selects which base32 alphabet and validation rules apply"""
    STANDARD = "standard"
    CROCKFORD = "crockford"

    @classmethod
    def parse(cls, value: Union["Alphabet", str]) -> "Alphabet":
        """
        Resolve an alphabet selector from a member or its name

        "rfc" is accepted as another name for the standard alphabet.

        Raises:
            ValueError: If the name does not match a known alphabet
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.lower()
            if name == "rfc":
                return cls.STANDARD
            for member in cls:
                if member.value == name:
                    return member
        raise ValueError(f"invalid option '{value}' (expected one of: standard, rfc, crockford)")


def _build_decode_table(alphabet: bytes, aliases: Dict[int, int]) -> bytes:
    """
    Build a 256-entry decode table for an encode alphabet

    Letters decode case-insensitively. Entries in aliases map an extra
    character to a value (INVALID to explicitly reject it).
    """
    table = bytearray([INVALID] * 256)
    for value, symbol in enumerate(alphabet):
        table[symbol] = value
        # Lower case letters decode the same as their upper case form
        if ord('A') <= symbol <= ord('Z'):
            table[symbol | 0x20] = value
    for char, value in aliases.items():
        table[char] = value
        table[ord(chr(char).lower())] = value
    return bytes(table)


STANDARD_DECODE_TABLE = _build_decode_table(STANDARD_ALPHABET, {})

CROCKFORD_DECODE_TABLE = _build_decode_table(CROCKFORD_ALPHABET, {
    ord('I'): 1,
    ord('L'): 1,
    ord('O'): 0,
    # Reserved so it can't be confused with V
    ord('U'): INVALID,
})


def encode_alphabet(alphabet: Alphabet) -> bytes:
    """Return the 32-symbol encoding table for an alphabet"""
    if alphabet is Alphabet.CROCKFORD:
        return CROCKFORD_ALPHABET
    return STANDARD_ALPHABET


def decode_table(alphabet: Alphabet) -> bytes:
    """Return the 256-entry decoding table for an alphabet"""
    if alphabet is Alphabet.CROCKFORD:
        return CROCKFORD_DECODE_TABLE
    return STANDARD_DECODE_TABLE
