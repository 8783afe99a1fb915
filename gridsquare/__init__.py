"""Maidenhead Locator System grid square encoding, decoding and distances."""

from .errors import GridsquareError, InvalidPrecision, InvalidReference, InvalidDigit, InvalidCoordinate
from .normalize import normalize_coordinates
from .codec import radix_for_level, encode_digits, decode_digits
from .formatter import format_reference, parse_reference
from .grid import (
    MIN_PRECISION, MAX_PRECISION,
    EncodeResult, DecodeResult, Coordinate, GridSquare,
    encode, decode, new_grid_square,
)
from .geo_utils import DistanceResult, distance_between, calc_bearing, calc_distance_km, bearing_to_direction
from .config import load_config, save_config, validate_config

__version__ = "0.2.0"

__all__ = [
    # Errors
    'GridsquareError',
    'InvalidPrecision',
    'InvalidReference',
    'InvalidDigit',
    'InvalidCoordinate',
    # Codec layers
    'normalize_coordinates',
    'radix_for_level',
    'encode_digits',
    'decode_digits',
    'format_reference',
    'parse_reference',
    # Grid operations
    'MIN_PRECISION',
    'MAX_PRECISION',
    'EncodeResult',
    'DecodeResult',
    'Coordinate',
    'GridSquare',
    'encode',
    'decode',
    'new_grid_square',
    # Distance
    'DistanceResult',
    'distance_between',
    'calc_bearing',
    'calc_distance_km',
    'bearing_to_direction',
    # Config
    'load_config',
    'save_config',
    'validate_config',
]
