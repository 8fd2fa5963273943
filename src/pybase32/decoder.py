"""
Base32 decoding for the RFC 4648 and Crockford alphabets

Symbols are shifted into an integer accumulator five bits at a time. Every
40 bits (eight symbols) the accumulator is flushed as five big-endian bytes;
whatever whole bytes remain at the end are drained one at a time and any
trailing bits shorter than a byte are dropped.
"""

from typing import Tuple

from .errors import illegal_character, invalid_length, invalid_padding
from .tables import Alphabet, INVALID, PAD, SEPARATOR, decode_table

# Trailing "=" counts that can terminate a padded 8-symbol block. Removing
# 6, 4, 3 or 1 symbols leaves 1, 2, 3 or 4 encoded bytes respectively; a run
# of 2 or 5 can't be produced by any input.
VALID_PAD_COUNTS = (0, 1, 3, 4, 6)
MAX_PAD_COUNT = 6


def max_decoded_length(length: int) -> int:
    """Upper bound on the number of bytes decoded from `length` symbols"""
    return (length * 5 + 7) // 8


def strip_padding(data: bytes) -> Tuple[bytes, int]:
    """
    Remove the trailing "=" run of RFC 4648 input

    Returns (symbols, pad_count). The pad count still has to be checked
    against VALID_PAD_COUNTS by the caller.

    Raises:
        Base32Error: If the length isn't a multiple of 8 or the run is too long
    """
    if len(data) % 8 != 0:
        raise invalid_length()

    end = len(data)
    while end > 0 and data[end - 1] == PAD:
        end -= 1
        if len(data) - end > MAX_PAD_COUNT:
            raise invalid_padding()

    return data[:end], len(data) - end


def decode_data(data: bytes, alphabet: Alphabet) -> bytes:
    """
    Decode base32 text with the given alphabet

    Args:
        data: Encoded symbols as ASCII bytes
        alphabet: Alphabet whose table and validation rules apply

    Returns:
        Decoded bytes

    Raises:
        Base32Error: If the text is malformed for the alphabet
    """
    if not data:
        return b""

    crockford = alphabet is Alphabet.CROCKFORD
    npad = 0
    if not crockford:
        data, npad = strip_padding(data)

    table = decode_table(alphabet)
    result = bytearray()
    acc = 0
    nbits = 0

    for i, c in enumerate(data):
        if crockford and c == SEPARATOR:
            continue

        value = table[c]
        if value == INVALID:
            raise illegal_character(c, i + 1)

        acc = (acc << 5) | value
        nbits += 5

        if nbits >= 40:
            nbits -= 40
            result += (acc >> nbits).to_bytes(5, 'big')
            acc &= (1 << nbits) - 1

    # An illegal symbol is reported ahead of a bad pad count
    if npad not in VALID_PAD_COUNTS:
        raise invalid_padding()

    while nbits >= 8:
        nbits -= 8
        result.append((acc >> nbits) & 0xFF)

    # Any bits left over (fewer than 8) came from the final symbol's zero
    # fill and are dropped without checking them.
    return bytes(result)
