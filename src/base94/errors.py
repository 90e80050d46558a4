class Base94Error(ValueError):
    """Base class for all encode/decode failures."""


class InvalidBase(Base94Error):
    """Raised when a base falls outside the supported range."""

    def __init__(self, base: object, low: int = 2, high: int = 94) -> None:
        self.base = base
        super().__init__(f"Base must be between {low} and {high} (inclusive), got {base!r}")


class InvalidCharacter(Base94Error):
    """Raised when decoding meets a symbol that is not a digit of the active base."""

    def __init__(self, character: str, position: int, base: int) -> None:
        self.character = character
        self.position = position
        self.base = base
        super().__init__(
            f"Invalid character {character!r} at position {position} for base {base}"
        )
