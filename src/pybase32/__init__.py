"""
Python Base32 Codec

Converts arbitrary bytes to and from base32 text using either the RFC 4648
standard alphabet (A-Z, 2-7, "=" padded) or Douglas Crockford's alphabet
(digits and letters without I, L, O and U, unpadded, case-insensitive, with
"-" separators ignored on decode).

    >>> encode(b"foobar")
    'MZXW6YTBOI======'
    >>> decode("CSQP-YRK1-E8", "crockford")
    b'foobar'
"""

from .codec import (
    encode,
    decode
)

from .errors import Base32Error

from .tables import (
    Alphabet,
    STANDARD_ALPHABET,
    CROCKFORD_ALPHABET,
    STANDARD_DECODE_TABLE,
    CROCKFORD_DECODE_TABLE,
    INVALID
)

from .encoder import encode_data, encoded_length
from .decoder import decode_data, max_decoded_length

__version__ = "0.1.0"

__all__ = [
    # Codec functions
    "encode",
    "decode",
    "encode_data",
    "decode_data",
    "encoded_length",
    "max_decoded_length",

    # Alphabets and tables
    "Alphabet",
    "STANDARD_ALPHABET",
    "CROCKFORD_ALPHABET",
    "STANDARD_DECODE_TABLE",
    "CROCKFORD_DECODE_TABLE",
    "INVALID",

    # Errors
    "Base32Error",
]
