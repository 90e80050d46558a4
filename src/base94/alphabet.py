import string
from typing import Dict

from .errors import InvalidBase, InvalidCharacter

# 0-9, A-Z, a-z first so small bases read like ordinary numerals.
CHARACTERS = (
    string.digits
    + string.ascii_uppercase
    + string.ascii_lowercase
    + "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"
)

MIN_BASE = 2
MAX_BASE = len(CHARACTERS)
DEFAULT_BASE = MAX_BASE

_DIGITS: Dict[str, int] = {ch: i for i, ch in enumerate(CHARACTERS)}


def validate_base(base: int) -> int:
    """Return ``base`` unchanged, or raise InvalidBase when it is unusable."""
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(base, MIN_BASE, MAX_BASE)
    if base < MIN_BASE or base > MAX_BASE:
        raise InvalidBase(base, MIN_BASE, MAX_BASE)
    return base


def symbol_for(digit: int) -> str:
    """Map a digit value (0..93) to its symbol."""
    if not 0 <= digit < MAX_BASE:
        raise ValueError(f"Digit {digit} out of range 0..{MAX_BASE - 1}")
    return CHARACTERS[digit]


def symbols_for(base: int) -> str:
    """Return the symbols that are valid digits for ``base``."""
    return CHARACTERS[: validate_base(base)]


def digit_for(character: str, base: int = DEFAULT_BASE, position: int = 0) -> int:
    """
    Map a symbol back to its digit value.

    Symbols that exist in the table but sit at or beyond ``base`` are rejected
    the same way as characters that are not in the table at all. ``position``
    is only used to describe the failure.
    """
    digit = _DIGITS.get(character)
    if digit is None or digit >= base:
        raise InvalidCharacter(character, position, base)
    return digit
