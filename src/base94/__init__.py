"""
Binary-to-text codec for any base between 2 and 94.

    >>> from base94 import encode, decode
    >>> decode(encode(b"Hello, World!", 94), 94)
    b'Hello, World!'
"""
from .alphabet import (
    CHARACTERS,
    DEFAULT_BASE,
    MAX_BASE,
    MIN_BASE,
    digit_for,
    symbol_for,
    symbols_for,
    validate_base,
)
from .codec import decode, decode_string, encode, encode_string, registry
from .errors import Base94Error, InvalidBase, InvalidCharacter

__version__ = "0.3.0"

__all__ = [
    "CHARACTERS",
    "DEFAULT_BASE",
    "MAX_BASE",
    "MIN_BASE",
    "Base94Error",
    "InvalidBase",
    "InvalidCharacter",
    "decode",
    "decode_string",
    "digit_for",
    "encode",
    "encode_string",
    "registry",
    "symbol_for",
    "symbols_for",
    "validate_base",
]
