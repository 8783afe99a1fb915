"""Error types raised by the grid square codec."""


class GridsquareError(ValueError):
    """Base class for all grid square encode/decode failures."""


class InvalidPrecision(GridsquareError):
    """Precision is odd, not an integer, or outside the supported range."""


class InvalidReference(GridsquareError):
    """Grid reference is too short, odd-length, or not a string."""


class InvalidDigit(GridsquareError):
    """Character is outside the alphabet for its position's radix."""

    def __init__(self, char: str, position: int | None = None, alphabet: str | None = None):
        self.char = char
        self.position = position
        self.alphabet = alphabet
        msg = f"Invalid grid character {char!r}"
        if position is not None:
            msg += f" at position {position}"
        if alphabet:
            msg += f" (expected one of {alphabet})"
        super().__init__(msg)


class InvalidCoordinate(GridsquareError):
    """Longitude or latitude is NaN, infinite, or not a number."""
