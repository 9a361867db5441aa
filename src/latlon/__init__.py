"""latlon: geohash encoding for latitude/longitude."""

import logging

from .config import GeohashConfig, get_config, setup
from .exceptions import (
    EmptyGeohashError,
    GeohashError,
    InvalidCharacterError,
    InvalidCoordinateError,
    InvalidDirectionError,
    InvalidPrecisionError,
)
from .geohash import adjacent, bounds, cell_size, decode, encode, expand, neighbours
from .types import BoundingBox, Coordinate, Direction, Geohash, precision_for_km

__all__ = [
    "BoundingBox",
    "Coordinate",
    "Direction",
    "EmptyGeohashError",
    "Geohash",
    "GeohashConfig",
    "GeohashError",
    "InvalidCharacterError",
    "InvalidCoordinateError",
    "InvalidDirectionError",
    "InvalidPrecisionError",
    "adjacent",
    "bounds",
    "cell_size",
    "decode",
    "encode",
    "expand",
    "get_config",
    "neighbours",
    "precision_for_km",
    "setup",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
