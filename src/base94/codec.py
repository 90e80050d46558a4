from typing import Callable, Dict, Tuple, Union

from .alphabet import DEFAULT_BASE, MAX_BASE, MIN_BASE, digit_for, symbol_for, validate_base
from .bigint import (
    count_leading,
    from_base256,
    from_digits_base_n,
    to_base256,
    to_digits_base_n,
)

BytesLike = Union[bytes, bytearray, memoryview]

ZERO_SYMBOL = symbol_for(0)


def encode(data: BytesLike, base: int = DEFAULT_BASE) -> str:
    """
    Encode bytes as a string of base-``base`` symbols, most significant first.

    Every leading 0x00 byte becomes one zero symbol so that decode() recovers
    the exact input length.
    """
    validate_base(base)
    data = bytes(data)
    pad = count_leading(data, 0)
    digits = to_digits_base_n(from_base256(data[pad:]), base)
    return ZERO_SYMBOL * pad + "".join(symbol_for(d) for d in digits)


def decode(text: str, base: int = DEFAULT_BASE) -> bytes:
    """
    Decode a string produced by encode() with the same base.

    Raises InvalidBase for an unusable base and InvalidCharacter for the first
    symbol that is not a digit of ``base``. Nothing is returned on failure.
    """
    validate_base(base)
    digits = [digit_for(ch, base, position=i) for i, ch in enumerate(text)]
    pad = count_leading(digits, 0)
    value = from_digits_base_n(digits[pad:], base)
    return b"\x00" * pad + to_base256(value)


def encode_string(text: str, base: int = DEFAULT_BASE, encoding: str = "utf-8") -> str:
    """Encode a text string (via ``encoding``) to symbols."""
    return encode(text.encode(encoding), base)


def decode_string(encoded: str, base: int = DEFAULT_BASE, encoding: str = "utf-8") -> str:
    """Decode symbols back to a text string."""
    return decode(encoded, base).decode(encoding)


BaseCodec = Tuple[Callable[[bytes], str], Callable[[str], bytes]]


def _codec_for(base: int) -> BaseCodec:
    return (lambda b: encode(b, base), lambda s: decode(s, base))


def registry() -> Dict[str, BaseCodec]:
    """Map ``"base2"`` .. ``"base94"`` to (encoder, decoder) pairs."""
    return {f"base{n}": _codec_for(n) for n in range(MIN_BASE, MAX_BASE + 1)}
