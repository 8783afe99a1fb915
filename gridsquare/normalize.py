"""Coordinate normalization ahead of grid encoding."""

import math

from .errors import InvalidCoordinate

# Largest value encoded for the upper longitude/latitude boundary, keeping
# the field index below 18.
LON_MAX = 179.999999
LAT_MAX = 89.999999


def _check_finite(name: str, value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidCoordinate(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(value):
        raise InvalidCoordinate(f"{name} must be finite, got {value}")
    return value


def normalize_longitude(lon: float) -> float:
    """Wrap longitude into -180 <= lon < 180.

    Any multiple of 360 collapses, in either direction. A positive input that
    wraps onto -180 (e.g. 180, 540) is pinned to the eastern edge instead.
    """
    raw = _check_finite("longitude", lon)
    norm = ((raw + 180) % 360 + 360) % 360 - 180
    if norm == 180.0 or (norm == -180.0 and raw > 0):
        return LON_MAX
    return norm


def normalize_latitude(lat: float) -> float:
    """Clamp latitude into -90 <= lat < 90. Latitude never wraps."""
    lat = _check_finite("latitude", lat)
    if lat < -90:
        return -90.0
    if lat >= 90:
        return LAT_MAX
    return lat


def normalize_coordinates(lon: float, lat: float) -> tuple[float, float]:
    """Normalize a raw (longitude, latitude) pair.

    Args:
        lon: Longitude in degrees, any finite value
        lat: Latitude in degrees, any finite value

    Returns:
        Tuple of (longitude, latitude) in canonical ranges

    Raises:
        InvalidCoordinate: If either value is NaN, infinite or not numeric
    """
    return normalize_longitude(lon), normalize_latitude(lat)
