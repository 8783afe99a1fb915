"""Mixed-radix digit layer of the Maidenhead locator system.

Each precision level splits the previous cell into ``radix x radix`` pieces:

    level 0  field      base 18  20°    x 10°
    level 1  square     base 10  2°     x 1°
    level 2  subsquare  base 24  5'     x 2.5'
    level 3  extended   base 10  30"    x 15"
    level 4  extended   base 24  1.25"  x 0.625"
    ...      alternating base 10 / base 24 from here on

A digit sequence is a list of (longitude_digit, latitude_digit) pairs, one
per level. Longitude spans are always twice the latitude span.
"""

import math
from typing import Iterator

FIELD_RADIX = 18
SQUARE_RADIX = 10
SUBSQUARE_RADIX = 24

# Full longitude / latitude range, shifted into non-negative space.
LON_RANGE = 360.0
LAT_RANGE = 180.0

DigitSequence = list[tuple[int, int]]


def radix_for_level(level: int) -> int:
    """Return the radix used at a precision level.

    Args:
        level: Zero-based pair index (0 = field)

    Returns:
        18 for the field, then 10 for odd levels and 24 for even levels
    """
    if level < 0:
        raise ValueError(f"Level must be non-negative, got {level}")
    if level == 0:
        return FIELD_RADIX
    return SQUARE_RADIX if level % 2 else SUBSQUARE_RADIX


def divisor_chain(pair_count: int) -> Iterator[tuple[int, int, float, float]]:
    """Yield (level, radix, lon_divisor, lat_divisor) for each level.

    Divisors are the angular span of one digit step at that level, in degrees.
    """
    lon_div, lat_div = LON_RANGE, LAT_RANGE
    for level in range(pair_count):
        radix = radix_for_level(level)
        lon_div /= radix
        lat_div /= radix
        yield level, radix, lon_div, lat_div


def _digit(remainder: float, divisor: float, radix: int) -> int:
    return min(max(math.floor(remainder / divisor), 0), radix - 1)


def encode_digits(norm_lon: float, norm_lat: float, pair_count: int) -> DigitSequence:
    """Extract ``pair_count`` digit pairs from a normalized coordinate.

    Args:
        norm_lon: Longitude in -180 <= lon < 180
        norm_lat: Latitude in -90 <= lat < 90
        pair_count: Number of levels to produce (>= 1)

    Returns:
        List of (longitude_digit, latitude_digit) tuples
    """
    if pair_count < 1:
        raise ValueError(f"pair_count must be at least 1, got {pair_count}")

    lon_rem = norm_lon + LON_RANGE / 2
    lat_rem = norm_lat + LAT_RANGE / 2
    digits = []
    for _level, radix, lon_div, lat_div in divisor_chain(pair_count):
        # Clamp guards the floating-point edge at the top of each range
        lon_digit = _digit(lon_rem, lon_div, radix)
        lat_digit = _digit(lat_rem, lat_div, radix)
        lon_rem -= lon_digit * lon_div
        lat_rem -= lat_digit * lat_div
        digits.append((lon_digit, lat_digit))
    return digits


def decode_digits(digits: DigitSequence, from_level: int = 0) -> tuple[float, float, float, float]:
    """Accumulate digit pairs back into angular offsets.

    Args:
        digits: Digit pairs, ``digits[0]`` belonging to ``from_level``
        from_level: Level of the first pair in ``digits``

    Returns:
        Tuple of (offset_lon, offset_lat, final_lon_divisor, final_lat_divisor).
        Offsets are measured from the corner of the ``from_level`` cell; for
        ``from_level=0`` that is (-180, -90).
    """
    if not digits:
        raise ValueError("Cannot decode an empty digit sequence")

    offset_lon = offset_lat = 0.0
    lon_div = lat_div = 0.0
    for level, radix, lon_div, lat_div in divisor_chain(from_level + len(digits)):
        if level < from_level:
            continue
        lon_digit, lat_digit = digits[level - from_level]
        if not (0 <= lon_digit < radix and 0 <= lat_digit < radix):
            raise ValueError(f"Digit pair {(lon_digit, lat_digit)} out of range for base {radix}")
        offset_lon += lon_digit * lon_div
        offset_lat += lat_digit * lat_div
    return offset_lon, offset_lat, lon_div, lat_div
