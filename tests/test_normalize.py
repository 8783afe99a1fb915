#!/usr/bin/env -S uv run
# /// script
# requires-python = ">=3.10"
# dependencies = ["pytest"]
# ///
"""Test coordinate normalization."""

import math
import sys
from pathlib import Path

import pytest

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from gridsquare.errors import InvalidCoordinate
from gridsquare.normalize import (
    LAT_MAX, LON_MAX, normalize_coordinates, normalize_latitude, normalize_longitude,
)


def test_longitude_wraps():
    """Longitude reduces modulo 360 into [-180, 180)."""
    test_cases = [
        (0.0, 0.0),
        (-180.0, -180.0),
        (179.5, 179.5),
        (200.0, -160.0),
        (-200.0, 160.0),
        (725.5, 5.5),      # two wraps east
        (-1075.0, 5.0),    # three wraps west
    ]
    for lon, expected in test_cases:
        result = normalize_longitude(lon)
        print(f"  {lon} → {result} (expected: {expected})")
        assert result == expected


def test_longitude_eastern_edge():
    """Positive inputs landing on the antimeridian stay on the eastern edge."""
    assert normalize_longitude(180.0) == LON_MAX
    assert normalize_longitude(540.0) == LON_MAX
    assert normalize_longitude(-540.0) == -180.0


def test_latitude_clamps():
    """Latitude saturates at the poles instead of wrapping."""
    assert normalize_latitude(45.5) == 45.5
    assert normalize_latitude(-90.0) == -90.0
    assert normalize_latitude(-1000.0) == -90.0
    assert normalize_latitude(90.0) == LAT_MAX
    assert normalize_latitude(1000.0) == LAT_MAX
    assert normalize_latitude(89.9) == 89.9


def test_normalize_coordinates_pair():
    assert normalize_coordinates(200.0, 100.0) == (-160.0, LAT_MAX)


@pytest.mark.parametrize("lon, lat", [
    (math.nan, 0.0),
    (0.0, math.nan),
    (math.inf, 0.0),
    (0.0, -math.inf),
    ("east", 0.0),
    (None, 0.0),
])
def test_non_finite_rejected(lon, lat):
    with pytest.raises(InvalidCoordinate):
        normalize_coordinates(lon, lat)


if __name__ == "__main__":
    test_longitude_wraps()
    test_longitude_eastern_edge()
    test_latitude_clamps()
    print("✅ ALL NORMALIZE TESTS PASSED!")
