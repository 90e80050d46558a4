"""
Arbitrary-precision helpers shared by the encoder and decoder.

Python integers are unbounded, so they serve directly as the accumulator.
Digit sequences are always most-significant first.
"""
from typing import Iterable, List, Sequence


def from_base256(data: bytes) -> int:
    """Interpret ``data`` as a big-endian unsigned integer."""
    return int.from_bytes(data, "big")


def to_base256(value: int, min_length: int = 0) -> bytes:
    """
    Express ``value`` in big-endian bytes.

    The result has the minimal length needed (zero bytes for zero) unless
    ``min_length`` asks for more, in which case it is left-padded with 0x00.
    """
    if value < 0:
        raise ValueError("value must be non-negative")
    length = max(min_length, (value.bit_length() + 7) // 8)
    return value.to_bytes(length, "big")


def from_digits_base_n(digits: Iterable[int], n: int) -> int:
    """Fold base-``n`` digits into an integer: value = value * n + digit."""
    num = 0
    for digit in digits:
        if digit < 0 or digit >= n:
            raise ValueError(f"Digit {digit} out of range for base {n}")
        num = num * n + digit
    return num


def to_digits_base_n(value: int, n: int) -> List[int]:
    """
    Express ``value`` as base-``n`` digits.

    Zero produces an empty list; callers decide how zero is spelled.
    """
    if value < 0:
        raise ValueError("value must be non-negative")
    out: List[int] = []
    while value > 0:
        value, rem = divmod(value, n)
        out.append(rem)
    out.reverse()
    return out


def count_leading(items: Sequence, zero) -> int:
    """Count how many elements at the start of ``items`` equal ``zero``."""
    pad = 0
    for item in items:
        if item == zero:
            pad += 1
        else:
            break
    return pad
