#!/usr/bin/env -S uv run
# /// script
# requires-python = ">=3.10"
# dependencies = ["pytest"]
# ///
"""Test the mixed-radix digit layer."""

import sys
from pathlib import Path

import pytest

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from gridsquare.codec import decode_digits, divisor_chain, encode_digits, radix_for_level

# DN40BI57XH, the Utah reference point at 10 characters
UTAH_DIGITS = [(3, 13), (4, 0), (1, 8), (5, 7), (23, 7)]


class TestRadixTable:
    """Radix sequence 18, 10, 24, 10, 24, ..."""

    def test_first_levels(self):
        assert [radix_for_level(i) for i in range(8)] == [18, 10, 24, 10, 24, 10, 24, 10]

    def test_negative_level(self):
        with pytest.raises(ValueError):
            radix_for_level(-1)

    def test_divisor_chain_spans(self):
        chain = list(divisor_chain(4))
        assert [level for level, _, _, _ in chain] == [0, 1, 2, 3]
        _, radix, lon_div, lat_div = chain[0]
        assert (radix, lon_div, lat_div) == (18, 20.0, 10.0)
        _, radix, lon_div, lat_div = chain[1]
        assert (radix, lon_div, lat_div) == (10, 2.0, 1.0)
        _, radix, lon_div, lat_div = chain[2]
        assert radix == 24
        assert lon_div == pytest.approx(5 / 60)
        assert lat_div == pytest.approx(2.5 / 60)
        _, radix, lon_div, lat_div = chain[3]
        assert radix == 10
        assert lon_div == pytest.approx(30 / 3600)
        assert lat_div == pytest.approx(15 / 3600)

    def test_longitude_span_twice_latitude(self):
        for _, _, lon_div, lat_div in divisor_chain(12):
            assert lon_div == pytest.approx(2 * lat_div)


class TestEncodeDigits:

    def test_known_point(self):
        assert encode_digits(-111.866785, 40.363840, 5) == UTAH_DIGITS

    def test_lower_corner(self):
        assert encode_digits(-180.0, -90.0, 4) == [(0, 0)] * 4

    def test_upper_corner(self):
        digits = encode_digits(179.999999, 89.999999, 3)
        assert digits == [(17, 17), (9, 9), (23, 23)]

    def test_digits_within_radix(self):
        digits = encode_digits(179.999999, 89.999999, 12)
        for level, (lon_digit, lat_digit) in enumerate(digits):
            radix = radix_for_level(level)
            assert 0 <= lon_digit < radix
            assert 0 <= lat_digit < radix

    def test_beyond_twenty_characters(self):
        """The loop extends past the 10 pairs used by the public API."""
        digits = encode_digits(-111.866785, 40.363840, 14)
        assert len(digits) == 14
        assert digits[:5] == UTAH_DIGITS

    def test_pair_count_must_be_positive(self):
        with pytest.raises(ValueError):
            encode_digits(0.0, 0.0, 0)


class TestDecodeDigits:

    def test_subsquare_offsets(self):
        offset_lon, offset_lat, lon_div, lat_div = decode_digits(UTAH_DIGITS[:3])
        assert offset_lon == pytest.approx(68 + 1 / 12)
        assert offset_lat == pytest.approx(130 + 8 / 24)
        assert lon_div == pytest.approx(1 / 12)
        assert lat_div == pytest.approx(1 / 24)

    def test_from_level(self):
        """A tail of the sequence decodes relative to its own starting cell."""
        offset_lon, offset_lat, lon_div, lat_div = decode_digits([(1, 8)], from_level=2)
        assert offset_lon == pytest.approx(1 / 12)
        assert offset_lat == pytest.approx(8 / 24)
        assert lon_div == pytest.approx(1 / 12)
        assert lat_div == pytest.approx(1 / 24)

    def test_reconstructs_encoded_point(self):
        lon, lat = -111.866785, 40.363840
        offset_lon, offset_lat, lon_div, lat_div = decode_digits(encode_digits(lon, lat, 8))
        assert 0 <= (lon + 180) - offset_lon < lon_div
        assert 0 <= (lat + 90) - offset_lat < lat_div

    def test_empty_sequence(self):
        with pytest.raises(ValueError):
            decode_digits([])

    def test_digit_out_of_range(self):
        with pytest.raises(ValueError):
            decode_digits([(18, 0), (0, 0), (0, 0)])
        with pytest.raises(ValueError):
            decode_digits([(0, 0), (0, 10), (0, 0)])
