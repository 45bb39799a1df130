"""
Conversion of non-negative integers to and from numeral strings in any base

The base is defined by a charset: an ordered string of unique symbols where
the index of a symbol is its digit value. Python integers are arbitrary
precision, so there is no upper bound on the value or on the numeral length
other than memory and time.
"""

from functools import lru_cache
from types import MappingProxyType
from typing import Mapping
import logging

logger = logging.getLogger(__name__)


class InvalidCharsetError(ValueError):
    """The charset can not be used as a digit alphabet"""
    pass


class InvalidSymbolError(ValueError):
    """A numeral contains a symbol which is not part of the charset"""

    def __init__(self, symbol: str, position: int, charset: str):
        self.symbol = symbol
        self.position = position
        super().__init__(
            f"Symbol {symbol!r} at position {position} is not in charset {charset!r}"
        )


def validate_charset(charset: str) -> None:
    """
    Check that a charset can be used as a digit alphabet

    Raises:
        InvalidCharsetError: If the charset is not a string, has fewer than
            two symbols or contains the same symbol twice
    """
    if not isinstance(charset, str) or len(charset) < 2:
        raise InvalidCharsetError(f"Invalid charset for base conversion: {charset!r}")
    charset_to_map(charset)


@lru_cache(maxsize=64)
def charset_to_map(charset: str) -> Mapping[str, int]:
    """
    Build the symbol -> digit value mapping of a charset

    The mapping is read-only and cached per distinct charset, so repeated
    lookups through the same charset cost O(1) per symbol.

    Raises:
        InvalidCharsetError: If a symbol occurs more than once
    """
    mapping = {}
    for i, symbol in enumerate(charset):
        if symbol in mapping:
            raise InvalidCharsetError(
                f"Symbol {symbol!r} occurs more than once in charset {charset!r}"
            )
        mapping[symbol] = i
    logger.debug("Built symbol map for base %d charset", len(charset))
    return MappingProxyType(mapping)


def x_to_base10(numeral: str, charset: str) -> int:
    """
    Convert a numeral in the base defined by ``charset`` to an integer

    Args:
        numeral: Digits using the symbols of the charset, most significant first
        charset: The digit alphabet, e.g. "01" for binary or
            "0123456789ABCDEF" for hex

    Returns:
        The value of the numeral. An empty numeral is 0.

    Raises:
        InvalidCharsetError: If the charset is invalid
        InvalidSymbolError: If the numeral contains a symbol not in the charset
    """
    validate_charset(charset)
    symbols = charset_to_map(charset)
    base = len(charset)

    value = 0
    for position, symbol in enumerate(numeral):
        digit = symbols.get(symbol)
        if digit is None:
            raise InvalidSymbolError(symbol, position, charset)
        value = value * base + digit
    return value


def x_from_base10(value: int, charset: str) -> str:
    """
    Convert a non-negative integer to a numeral in the base defined by ``charset``

    Zero is written as the first symbol of the charset, so the result always
    has at least one symbol.

    Raises:
        InvalidCharsetError: If the charset is invalid
        ValueError: If the value is negative
        TypeError: If the value is not an integer
    """
    validate_charset(charset)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Can not convert negative value {value}")

    base = len(charset)
    digits = []
    while True:
        value, remainder = divmod(value, base)
        digits.append(charset[remainder])
        if value == 0:
            break
    return "".join(reversed(digits))
