"""Public encode/decode operations for Maidenhead grid references."""

import operator
from dataclasses import dataclass

from .codec import LAT_RANGE, LON_RANGE, decode_digits, encode_digits
from .errors import InvalidPrecision
from .formatter import MIN_REFERENCE_LENGTH, format_reference, parse_reference
from .normalize import normalize_coordinates

MIN_PRECISION = 6
MAX_PRECISION = 20


@dataclass(frozen=True)
class EncodeResult:
    grid_reference: str
    subsquare: str


@dataclass(frozen=True)
class DecodeResult:
    latitude: float
    longitude: float
    width: float
    height: float


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class GridSquare:
    grid_reference: str
    center: Coordinate
    width: float
    height: float


def validate_precision(precision: int) -> int:
    """Check a precision value and return it as a plain int.

    Integer-like values (anything implementing __index__) are accepted;
    bool and float are not.

    Raises:
        InvalidPrecision: If not an even integer in [6, 20]
    """
    if isinstance(precision, bool):
        raise InvalidPrecision(f"Precision must be an integer, got {precision!r}")
    try:
        precision = operator.index(precision)
    except TypeError:
        raise InvalidPrecision(f"Precision must be an integer, got {precision!r}") from None
    if not MIN_PRECISION <= precision <= MAX_PRECISION:
        raise InvalidPrecision(
            f"Precision {precision} outside supported range {MIN_PRECISION}-{MAX_PRECISION}"
        )
    if precision % 2:
        raise InvalidPrecision(f"Precision must be even, got {precision}")
    return precision


def encode(longitude: float, latitude: float, precision: int = MIN_PRECISION) -> EncodeResult:
    """Encode a coordinate as a grid reference.

    Args:
        longitude: Longitude in degrees (wrapped into -180..180)
        latitude: Latitude in degrees (clamped into -90..90)
        precision: Reference length in characters, even, 6-20

    Returns:
        EncodeResult with the formatted reference and the lowercase
        6-character subsquare

    Examples:
        >>> encode(-111.866785, 40.363840)
        EncodeResult(grid_reference='DN40bi', subsquare='dn40bi')
        >>> encode(-111.866785, 40.363840, 10).grid_reference
        'DN40BI57XH'
    """
    precision = validate_precision(precision)
    norm_lon, norm_lat = normalize_coordinates(longitude, latitude)
    digits = encode_digits(norm_lon, norm_lat, precision // 2)
    subsquare = format_reference(digits[:MIN_REFERENCE_LENGTH // 2]).lower()
    return EncodeResult(grid_reference=format_reference(digits), subsquare=subsquare)


def decode(grid_reference: str) -> DecodeResult:
    """Decode a grid reference to the center and size of its cell.

    Width and height are the angular size of the smallest cell the reference
    resolves, in degrees.

    Examples:
        >>> r = decode("DN40bi")
        >>> round(r.latitude, 4), round(r.longitude, 4)
        (40.3542, -111.875)
    """
    digits = parse_reference(grid_reference)
    offset_lon, offset_lat, width, height = decode_digits(digits)
    return DecodeResult(
        latitude=offset_lat - LAT_RANGE / 2 + height / 2,
        longitude=offset_lon - LON_RANGE / 2 + width / 2,
        width=width,
        height=height,
    )


def new_grid_square(grid_reference: str) -> GridSquare:
    decoded = decode(grid_reference)
    return GridSquare(
        grid_reference=grid_reference,
        center=Coordinate(latitude=decoded.latitude, longitude=decoded.longitude),
        width=decoded.width,
        height=decoded.height,
    )
