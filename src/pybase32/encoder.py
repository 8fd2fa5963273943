"""
Base32 encoding for the RFC 4648 and Crockford alphabets
"""

from .tables import Alphabet, PAD, encode_alphabet


def encoded_length(length: int, alphabet: Alphabet) -> int:
    """
    Number of symbols produced when encoding `length` bytes

    Includes the "=" padding for the standard alphabet.
    """
    # * 8 multiplies by the number of bits per byte,
    # / 5 divides by the number of bits per symbol,
    # + 4 rounds up to the nearest symbol.
    symbols = (length * 8 + 4) // 5
    if alphabet is Alphabet.STANDARD:
        symbols = (symbols + 7) // 8 * 8
    return symbols


def encode_data(data: bytes, alphabet: Alphabet) -> bytes:
    """
    Encode bytes with the given alphabet

    Args:
        data: Input bytes
        alphabet: Alphabet to emit symbols from

    Returns:
        Encoded symbols as ASCII bytes
    """
    if not data:
        return b""

    table = encode_alphabet(alphabet)
    result = bytearray()
    length = len(data)
    head = 0

    # Process 5 bytes (40 bits) at a time into 8 symbols
    while length - head >= 5:
        acc = int.from_bytes(data[head:head + 5], 'big')
        for shift in range(35, -5, -5):
            result.append(table[(acc >> shift) & 0x1F])
        head += 5

    # Handle the remaining 1-4 bytes
    if head < length:
        acc = 0
        nbits = 0
        for c in data[head:]:
            acc = (acc << 8) | c
            nbits += 8

        while nbits >= 5:
            nbits -= 5
            result.append(table[(acc >> nbits) & 0x1F])

        # Fill the last symbol's low bits with zeros
        if nbits > 0:
            result.append(table[(acc << (5 - nbits)) & 0x1F])

    if alphabet is Alphabet.STANDARD and len(result) % 8 != 0:
        result.extend([PAD] * (8 - len(result) % 8))

    return bytes(result)
