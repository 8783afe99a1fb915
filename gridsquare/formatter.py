"""Rendering and parsing of grid reference strings."""

from .codec import DigitSequence, FIELD_RADIX, SQUARE_RADIX, SUBSQUARE_RADIX, radix_for_level
from .errors import InvalidDigit, InvalidReference

BASE18_ALPHABET = "ABCDEFGHIJKLMNOPQR"
BASE24_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWX"
BASE10_ALPHABET = "0123456789"

# Shortest reference accepted: field + square + subsquare
MIN_REFERENCE_LENGTH = 6


def to_base18(n: int) -> str:
    """Map a field index 0-17 to 'A'-'R'."""
    if not 0 <= n < FIELD_RADIX:
        raise InvalidDigit(str(n), alphabet="0-17")
    return chr(ord('A') + n)


def from_base18(char: str, position: int | None = None) -> int:
    """Map 'A'-'R' (either case) to a field index 0-17."""
    # Unicode case mapping folds some non-ASCII letters onto A-Z
    if len(char) != 1 or not char.isascii():
        raise InvalidDigit(char, position, "A-R")
    c = char.upper()
    if not 'A' <= c <= 'R':
        raise InvalidDigit(char, position, "A-R")
    return ord(c) - ord('A')


def to_base24(n: int) -> str:
    """Map a subsquare index 0-23 to 'A'-'X'."""
    if not 0 <= n < SUBSQUARE_RADIX:
        raise InvalidDigit(str(n), alphabet="0-23")
    return chr(ord('A') + n)


def from_base24(char: str, position: int | None = None) -> int:
    """Map 'A'-'X' (either case) to a subsquare index 0-23."""
    if len(char) != 1 or not char.isascii():
        raise InvalidDigit(char, position, "A-X")
    c = char.upper()
    if not 'A' <= c <= 'X':
        raise InvalidDigit(char, position, "A-X")
    return ord(c) - ord('A')


def to_base10(n: int) -> str:
    if not 0 <= n < SQUARE_RADIX:
        raise InvalidDigit(str(n), alphabet="0-9")
    return chr(ord('0') + n)


def from_base10(char: str, position: int | None = None) -> int:
    # str.isdigit() would also accept non-ASCII digits
    if len(char) != 1 or not '0' <= char <= '9':
        raise InvalidDigit(char, position, "0-9")
    return ord(char) - ord('0')


_RENDERERS = {
    FIELD_RADIX: to_base18,
    SQUARE_RADIX: to_base10,
    SUBSQUARE_RADIX: to_base24,
}

_PARSERS = {
    FIELD_RADIX: from_base18,
    SQUARE_RADIX: from_base10,
    SUBSQUARE_RADIX: from_base24,
}


def format_reference(digits: DigitSequence) -> str:
    """Render a digit sequence as a grid reference.

    The 6-character form keeps the subsquare in lowercase (e.g. "DN40bi");
    longer forms are fully uppercase (e.g. "DN40BI57XH").
    """
    chars = []
    for level, (lon_digit, lat_digit) in enumerate(digits):
        render = _RENDERERS[radix_for_level(level)]
        chars.append(render(lon_digit))
        chars.append(render(lat_digit))
    reference = ''.join(chars)

    if len(reference) == MIN_REFERENCE_LENGTH:
        return reference[:4].upper() + reference[4:].lower()
    return reference.upper()


def parse_reference(reference: str) -> DigitSequence:
    """Parse a grid reference into a digit sequence.

    Case is ignored. Leading/trailing whitespace is stripped.

    Raises:
        InvalidReference: Not a string, shorter than 6 characters, or odd length
        InvalidDigit: A character does not belong to its position's alphabet
    """
    if not isinstance(reference, str):
        raise InvalidReference(f"Grid reference must be a string, got {type(reference).__name__}")

    ref = reference.strip()
    if len(ref) < MIN_REFERENCE_LENGTH:
        raise InvalidReference(
            f"Grid reference {reference!r} is too short (minimum {MIN_REFERENCE_LENGTH} characters)"
        )
    if len(ref) % 2:
        raise InvalidReference(f"Grid reference {reference!r} has an odd number of characters")

    digits = []
    for level in range(len(ref) // 2):
        parse = _PARSERS[radix_for_level(level)]
        pos = level * 2
        digits.append((parse(ref[pos], pos), parse(ref[pos + 1], pos + 1)))
    return digits
