"""
Test cases for the base32 lookup tables
"""

import os
import sys
import string
import pytest

# Add the source directory to path to import the pybase32 package
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from pybase32 import (
    Alphabet, STANDARD_ALPHABET, CROCKFORD_ALPHABET,
    STANDARD_DECODE_TABLE, CROCKFORD_DECODE_TABLE, INVALID
)
from pybase32.tables import decode_table, encode_alphabet


def test_encode_alphabets():
    assert STANDARD_ALPHABET == (string.ascii_uppercase + "234567").encode()
    assert CROCKFORD_ALPHABET == b"0123456789ABCDEFGHJKMNPQRSTVWXYZ"
    for alphabet in (STANDARD_ALPHABET, CROCKFORD_ALPHABET):
        assert len(alphabet) == 32
        assert len(set(alphabet)) == 32
    for letter in b"ILOU":
        assert letter not in CROCKFORD_ALPHABET


def test_decode_tables_are_immutable():
    for table in (STANDARD_DECODE_TABLE, CROCKFORD_DECODE_TABLE):
        assert isinstance(table, bytes)
        assert len(table) == 256


def test_standard_decode_table():
    valid = {}
    for value, char in enumerate(string.ascii_uppercase):
        valid[ord(char)] = value
        valid[ord(char.lower())] = value
    for value, char in enumerate("234567", start=26):
        valid[ord(char)] = value

    for byte in range(256):
        assert STANDARD_DECODE_TABLE[byte] == valid.get(byte, INVALID), f"byte 0x{byte:02X}"


def test_crockford_decode_table():
    valid = {}
    for value, char in enumerate(CROCKFORD_ALPHABET):
        valid[char] = value
        valid[ord(chr(char).lower())] = value
    for char, value in [("I", 1), ("L", 1), ("O", 0)]:
        valid[ord(char)] = value
        valid[ord(char.lower())] = value

    for byte in range(256):
        assert CROCKFORD_DECODE_TABLE[byte] == valid.get(byte, INVALID), f"byte 0x{byte:02X}"

    assert CROCKFORD_DECODE_TABLE[ord("U")] == INVALID
    assert CROCKFORD_DECODE_TABLE[ord("u")] == INVALID
    # "-" is skipped by the decoder, not mapped by the table
    assert CROCKFORD_DECODE_TABLE[ord("-")] == INVALID


def test_tables_are_inverse():
    for alphabet in Alphabet:
        symbols = encode_alphabet(alphabet)
        table = decode_table(alphabet)
        for value, symbol in enumerate(symbols):
            assert table[symbol] == value


def test_alphabet_parse():
    assert Alphabet.parse("standard") is Alphabet.STANDARD
    assert Alphabet.parse("rfc") is Alphabet.STANDARD
    assert Alphabet.parse("RFC") is Alphabet.STANDARD
    assert Alphabet.parse("Crockford") is Alphabet.CROCKFORD
    assert Alphabet.parse(Alphabet.CROCKFORD) is Alphabet.CROCKFORD

    for bad in ["base64", "hex", None, 1]:
        with pytest.raises(ValueError, match="invalid option"):
            Alphabet.parse(bad)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
