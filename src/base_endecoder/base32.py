"""
Base32 encoding and decoding using RFC4648 "extended hex" format

This is the alphabet NSEC3 uses for hashed owner names. Output is never
padded, and decoding is strict about string length and unused trailing bits
so that every byte string has exactly one valid encoding.
"""

from .basex import BytesLike, CHARSETS, decode_basex, encode_basex
from .numeral import x_to_base10


# RFC4648 "extended hex" encoding table
RFC4648_ALPHABET = CHARSETS["base32hex"]


def encode(data: BytesLike) -> str:
    """
    Encode bytes into a base32 string using RFC4648 extended hex format

    Args:
        data: Bytes to encode

    Returns:
        Base32 encoded string of (len(data) * 8 + 4) // 5 characters
    """
    return encode_basex(data, RFC4648_ALPHABET)


def decode(data: str) -> bytes:
    """
    Decode a base32 string into bytes using RFC4648 extended hex format

    Args:
        data: Base32 string to decode

    Returns:
        Decoded bytes

    Raises:
        ValueError: If the string is invalid base32
    """
    # If the string has more characters than are required to encode the number of bytes
    # decodable, treat the string as invalid.
    remainder = len(data) % 8
    if remainder in (1, 3, 6):
        raise ValueError("Invalid base32 string length")

    decoded = decode_basex(data, RFC4648_ALPHABET)

    # Bits past the last whole byte all sit in the final character and must be zero
    unused_bits = len(data) * 5 % 8
    if unused_bits and x_to_base10(data[-1], RFC4648_ALPHABET) & ((1 << unused_bits) - 1):
        raise ValueError("Invalid padding in base32 string")

    return decoded
