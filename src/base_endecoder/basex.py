"""
Encoding and decoding of binary data in any power of two base

The data is treated as one long bit stream which is cut into symbols of
log2(len(charset)) bits each. A final partial symbol is padded with zero bits
when encoding, and leftover bits which do not make up a whole byte are
dropped when decoding. Named wrappers are provided for base32, base64 and
base64url as defined in RFC 4648.
"""

from enum import Enum
from typing import Iterable, Optional, Union
import base64
import logging

from .bits import BitPacker
from .numeral import InvalidCharsetError, InvalidSymbolError, validate_charset, x_from_base10, x_to_base10

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]

CHARSETS = {
    "base32": "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567",
    "base32hex": "0123456789ABCDEFGHIJKLMNOPQRSTUV",
    "base64": "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/",
    "base64url": "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_",
}

PADDING_CHAR = "="

# Symbols per padded group: 40 bits for base32, 24 bits for base64
BASE32_GROUP_SIZE = 8
BASE64_GROUP_SIZE = 4

# Symbols wider than a byte could leave a whole spurious byte when decoding
MAX_DATA_CHARSET_LENGTH = 256


class NonPowerOfTwoCharsetError(InvalidCharsetError):
    """The charset length is not a power of two, so symbols do not map to whole bits"""

    def __init__(self, length: int):
        self.length = length
        # Nearest usable lengths, never past the longest charset binary data accepts
        self.floor = min(1 << (length.bit_length() - 1), MAX_DATA_CHARSET_LENGTH)
        self.ceiling = min(self.floor << 1, MAX_DATA_CHARSET_LENGTH)
        if self.ceiling > length:
            hint = f"Decrease the charset length to {self.floor} or increase it to {self.ceiling}."
        else:
            hint = f"Decrease the charset length to {self.floor}."
        super().__init__(
            f"The base (charset length {length}) has to be a power of two to convert "
            f"binary data. {hint}"
        )


class Strategy(Enum):
    """Implementation used by the base64 wrappers"""
    PORTABLE = "portable"
    NATIVE = "native"


def bits_per_symbol(charset: str) -> int:
    """
    Number of bits one symbol of ``charset`` carries

    Raises:
        InvalidCharsetError: If the charset is invalid or has more than 256 symbols
        NonPowerOfTwoCharsetError: If the charset length is not a power of two
    """
    validate_charset(charset)
    length = len(charset)
    if length & (length - 1):
        raise NonPowerOfTwoCharsetError(length)
    if length > MAX_DATA_CHARSET_LENGTH:
        raise InvalidCharsetError(
            f"Charset length {length} is too long for binary data, the maximum is {MAX_DATA_CHARSET_LENGTH}"
        )
    return length.bit_length() - 1


def _to_bytes(data: BytesLike) -> bytes:
    if isinstance(data, (str, int)):
        raise TypeError(f"Expected binary data, got {type(data).__name__}")
    if isinstance(data, bytes):
        return data
    return bytes(data)


def _check_padding(padding_char: Optional[str], charset: str) -> None:
    if padding_char is None:
        return
    if not isinstance(padding_char, str) or len(padding_char) != 1:
        raise ValueError(f"Padding must be a single character, got {padding_char!r}")
    if padding_char in charset:
        raise InvalidCharsetError(f"Padding character {padding_char!r} is part of the charset")


def _check_group_size(group_size: Optional[int]) -> None:
    if group_size is None:
        return
    if isinstance(group_size, bool) or not isinstance(group_size, int) or group_size < 1:
        raise ValueError(f"Group size must be a positive integer, got {group_size!r}")


def encode_basex(data: BytesLike, charset: str, padding_char: Optional[str] = None,
                 group_size: Optional[int] = None) -> str:
    """
    Encode binary data as a string in the base defined by ``charset``

    Args:
        data: The data to encode, any bytes-like object or iterable of byte values
        charset: The symbols of the base, its length must be a power of two
        padding_char: Optional character appended until the length is a
            multiple of ``group_size``
        group_size: Output length multiple to pad to, only used together
            with ``padding_char``

    Returns:
        The encoded string. Empty data gives an empty string.

    Raises:
        InvalidCharsetError: If the charset or padding character is invalid
        NonPowerOfTwoCharsetError: If the charset length is not a power of two
        ValueError: If the group size is not a positive integer
        TypeError: If the data is not binary data
    """
    width = bits_per_symbol(charset)
    _check_padding(padding_char, charset)
    _check_group_size(group_size)

    packer = BitPacker(width)
    symbols = []
    for byte in _to_bytes(data):
        for value in packer.consume(byte, 8):
            symbols.append(x_from_base10(value, charset))
    remainder = packer.flush_remainder()
    if remainder is not None:
        symbols.append(x_from_base10(remainder, charset))

    if padding_char and group_size:
        symbols.append(padding_char * ((group_size - len(symbols) % group_size) % group_size))
    return "".join(symbols)


def decode_basex(text: str, charset: str, padding_char: Optional[str] = None) -> bytes:
    """
    Decode a string in the base defined by ``charset`` back to binary data

    Decoding stops at the first ``padding_char``; anything after it is
    ignored. Trailing bits which do not complete a byte are dropped.

    Raises:
        InvalidCharsetError: If the charset or padding character is invalid
        NonPowerOfTwoCharsetError: If the charset length is not a power of two
        InvalidSymbolError: If the text contains a symbol not in the charset
    """
    width = bits_per_symbol(charset)
    _check_padding(padding_char, charset)

    packer = BitPacker(8)
    result = bytearray()
    for position, symbol in enumerate(text):
        if symbol == padding_char:
            break
        try:
            value = x_to_base10(symbol, charset)
        except InvalidSymbolError:
            raise InvalidSymbolError(symbol, position, charset) from None
        result.extend(packer.consume(value, width))
    return bytes(result)


def encode_base32(data: BytesLike, padding: bool = True) -> str:
    """Encode data to RFC 4648 base32"""
    if padding:
        return encode_basex(data, CHARSETS["base32"], PADDING_CHAR, BASE32_GROUP_SIZE)
    return encode_basex(data, CHARSETS["base32"])


def decode_base32(text: str) -> bytes:
    """Decode RFC 4648 base32, padded or not"""
    return decode_basex(text, CHARSETS["base32"], PADDING_CHAR)


def encode_base64(data: BytesLike, padding: bool = True,
                  strategy: Strategy = Strategy.PORTABLE) -> str:
    """
    Encode data to base64

    ``Strategy.NATIVE`` uses the standard library codec instead of
    ``encode_basex``; both give the same output.
    """
    if strategy is Strategy.NATIVE:
        logger.debug("Encoding base64 with the native codec")
        return encode_base64_fast(data, padding)
    if padding:
        return encode_basex(data, CHARSETS["base64"], PADDING_CHAR, BASE64_GROUP_SIZE)
    return encode_basex(data, CHARSETS["base64"])


def decode_base64(text: str, strategy: Strategy = Strategy.PORTABLE) -> bytes:
    """Decode base64, padded or not"""
    if strategy is Strategy.NATIVE:
        logger.debug("Decoding base64 with the native codec")
        return decode_base64_fast(text)
    return decode_basex(text, CHARSETS["base64"], PADDING_CHAR)


def encode_base64url(data: BytesLike, padding: bool = True) -> str:
    """Encode data to the URL and filename safe base64 variant"""
    if padding:
        return encode_basex(data, CHARSETS["base64url"], PADDING_CHAR, BASE64_GROUP_SIZE)
    return encode_basex(data, CHARSETS["base64url"])


def decode_base64url(text: str) -> bytes:
    """Decode the URL and filename safe base64 variant, padded or not"""
    return decode_basex(text, CHARSETS["base64url"], PADDING_CHAR)


def encode_base64_fast(data: BytesLike, padding: bool = True) -> str:
    """Encode data to base64 with the standard library ``base64`` module"""
    encoded = base64.b64encode(_to_bytes(data)).decode("ascii")
    if not padding:
        encoded = encoded.rstrip(PADDING_CHAR)
    return encoded


def decode_base64_fast(text: str) -> bytes:
    """
    Decode base64 with the standard library ``base64`` module

    Missing padding is added back first. Invalid input raises
    ``binascii.Error`` rather than ``InvalidSymbolError``.
    """
    text = text.rstrip(PADDING_CHAR)
    return base64.b64decode(text + PADDING_CHAR * (-len(text) % 4), validate=True)
