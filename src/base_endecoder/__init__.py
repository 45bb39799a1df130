"""
Python Base Endecoder Library

Converts numbers to and from any base defined by a charset, and binary data
to and from any base whose charset length is a power of two. Includes
base32, base32hex, base64 and base64url.

    >>> x_from_base10(255, "0123456789ABCDEF")
    'FF'
    >>> encode_base32(b"foo")
    'MZXW6==='
"""

from .numeral import (
    x_to_base10,
    x_from_base10,
    charset_to_map,
    validate_charset,
    InvalidCharsetError,
    InvalidSymbolError
)

from .bits import (
    BitPacker,
    repack
)

from .basex import (
    encode_basex,
    decode_basex,
    bits_per_symbol,
    encode_base32,
    decode_base32,
    encode_base64,
    decode_base64,
    encode_base64url,
    decode_base64url,
    encode_base64_fast,
    decode_base64_fast,
    NonPowerOfTwoCharsetError,
    Strategy,
    CHARSETS,
    PADDING_CHAR
)

from .base32 import (
    encode as encode_base32hex,
    decode as decode_base32hex
)

__version__ = "0.1.0"

__all__ = [
    # Numeral conversion
    "x_to_base10",
    "x_from_base10",
    "charset_to_map",
    "validate_charset",
    "InvalidCharsetError",
    "InvalidSymbolError",

    # Bit packing
    "BitPacker",
    "repack",

    # Binary data codec
    "encode_basex",
    "decode_basex",
    "bits_per_symbol",
    "NonPowerOfTwoCharsetError",
    "Strategy",
    "CHARSETS",
    "PADDING_CHAR",

    # Named encodings
    "encode_base32",
    "decode_base32",
    "encode_base32hex",
    "decode_base32hex",
    "encode_base64",
    "decode_base64",
    "encode_base64url",
    "decode_base64url",
    "encode_base64_fast",
    "decode_base64_fast",
]
