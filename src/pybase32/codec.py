"""
Public encode/decode entry points

These coerce the caller's arguments and resolve the alphabet name before
handing off to the encoder and decoder.
"""

from typing import Union

from .decoder import decode_data
from .encoder import encode_data
from .tables import Alphabet

BytesLike = Union[bytes, bytearray, memoryview]


def _check_bytes(value, name: str) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"{name}: bytes-like object expected, got {type(value).__name__}")


def encode(data: BytesLike, alphabet: Union[Alphabet, str] = Alphabet.STANDARD) -> str:
    """
    Encode bytes into a base32 string

    Args:
        data: Bytes to encode
        alphabet: "standard" (RFC 4648, padded) or "crockford"

    Returns:
        Base32 encoded string
    """
    selected = Alphabet.parse(alphabet)
    return encode_data(_check_bytes(data, "encode"), selected).decode('ascii')


def decode(text: Union[BytesLike, str], alphabet: Union[Alphabet, str] = Alphabet.STANDARD) -> bytes:
    """
    Decode a base32 string into bytes

    Args:
        text: Base32 text, as ASCII bytes or str
        alphabet: "standard" (RFC 4648, padded) or "crockford"

    Returns:
        Decoded bytes

    Raises:
        Base32Error: If the text is not valid for the alphabet
        ValueError: If a str argument contains non-ASCII characters
    """
    selected = Alphabet.parse(alphabet)
    if isinstance(text, str):
        try:
            data = text.encode('ascii')
        except UnicodeEncodeError:
            raise ValueError("decode: string argument should contain only ASCII characters")
    else:
        data = _check_bytes(text, "decode")
    return decode_data(data, selected)
