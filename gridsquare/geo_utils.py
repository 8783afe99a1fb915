"""Distance and bearing between Maidenhead grid squares on a spherical Earth."""

import math
from dataclasses import dataclass

from .grid import DecodeResult, decode
from .formatter import MIN_REFERENCE_LENGTH

EARTH_RADIUS_KM = 6371.0
KM_TO_MI = 0.621371
# Degrees; subsquare centers closer than this count as equal
ADJACENCY_TOLERANCE = 1e-3

COMPASS_POINTS = ["N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
                  "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW"]


@dataclass(frozen=True)
class DistanceResult:
    distance_km: float
    distance_mi: float
    bearing_degrees: float

    @property
    def direction(self) -> str:
        """Compass direction of the bearing."""
        return bearing_to_direction(self.bearing_degrees)


def calc_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate initial great-circle bearing from point 1 to point 2.

    Args:
        lat1, lon1: Starting point latitude and longitude
        lat2, lon2: Ending point latitude and longitude

    Returns:
        Bearing in degrees (0-360)
    """
    lat1, lon1, lat2, lon2 = map(math.radians, [lat1, lon1, lat2, lon2])
    dlon = lon2 - lon1
    x = math.sin(dlon) * math.cos(lat2)
    y = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
    bearing = math.atan2(x, y)
    return (math.degrees(bearing) + 360) % 360


def calc_distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate great-circle (Haversine) distance between two points in kilometers."""
    lat1, lon1, lat2, lon2 = map(math.radians, [lat1, lon1, lat2, lon2])
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = math.sin(dlat/2)**2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon/2)**2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1-a))
    return EARTH_RADIUS_KM * c


def bearing_to_direction(bearing: float) -> str:
    """Convert bearing to compass direction.

    Args:
        bearing: Bearing in degrees (0-360)

    Returns:
        Compass direction (N, NNE, NE, etc.)
    """
    idx = round(bearing / 22.5) % 16
    return COMPASS_POINTS[idx]


def _rounded_bearing(c1: DecodeResult, c2: DecodeResult) -> float:
    # round() can push 359.96 up to 360.0
    return round(calc_bearing(c1.latitude, c1.longitude, c2.latitude, c2.longitude), 1) % 360


def _near(value: float, target: float) -> bool:
    return abs(value - target) < ADJACENCY_TOLERANCE


def _width_km(width_deg: float, latitude: float) -> float:
    return EARTH_RADIUS_KM * math.radians(width_deg) * math.cos(math.radians(latitude))


def _height_km(height_deg: float) -> float:
    return EARTH_RADIUS_KM * math.radians(height_deg)


def _subsquare(grid_reference: str) -> DecodeResult:
    return decode(grid_reference.strip()[:MIN_REFERENCE_LENGTH])


def distance_between(ref1: str, ref2: str) -> DistanceResult:
    """Distance and initial bearing from grid square ``ref1`` to ``ref2``.

    Neighbouring subsquares (east-west, north-south or diagonal) use closed-form
    cell-size distances; any other pair uses the Haversine distance between
    the cell centers. Adjacency is judged at subsquare level regardless of the
    references' precision.

    Args:
        ref1: Starting grid reference (6+ characters)
        ref2: Ending grid reference (6+ characters)

    Returns:
        DistanceResult with kilometers, miles (2 decimals) and bearing
        (1 decimal, 0-360)
    """
    c1 = decode(ref1)
    c2 = decode(ref2)
    sub1 = _subsquare(ref1)
    sub2 = _subsquare(ref2)
    w_deg, h_deg = sub1.width, sub1.height

    lon_delta = abs(sub1.longitude - sub2.longitude)
    lat_delta = abs(sub1.latitude - sub2.latitude)

    # Mean latitude keeps a->b and b->a identical at any precision
    mid_lat = (c1.latitude + c2.latitude) / 2

    if _near(lat_delta, 0) and _near(lon_delta, w_deg):
        distance_km = _width_km(w_deg, mid_lat)
        bearing = 90.0 if c2.longitude > c1.longitude else 270.0
    elif _near(lon_delta, 0) and _near(lat_delta, h_deg):
        distance_km = _height_km(h_deg)
        bearing = 0.0 if c2.latitude > c1.latitude else 180.0
    elif _near(lon_delta, w_deg) and _near(lat_delta, h_deg):
        distance_km = math.hypot(_width_km(w_deg, mid_lat), _height_km(h_deg))
        bearing = _rounded_bearing(c1, c2)
    else:
        distance_km = calc_distance_km(c1.latitude, c1.longitude, c2.latitude, c2.longitude)
        bearing = _rounded_bearing(c1, c2)

    return DistanceResult(
        distance_km=distance_km,
        distance_mi=round(distance_km * KM_TO_MI, 2),
        bearing_degrees=bearing,
    )
