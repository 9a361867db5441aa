"""
Geohash encode, decode, bounds and neighbours.

A geohash names a cell of the grid obtained by repeatedly halving the
longitude and latitude ranges, five bits per character.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Tuple

from . import base32
from .config import GeohashConfig, get_config
from .exceptions import EmptyGeohashError, InvalidPrecisionError
from .interleave import cell_size as _cell_size
from .interleave import deinterleave, interleave
from .types import BoundingBox, Coordinate, Direction, Geohash

logger = logging.getLogger(__name__)

# Indexed by len(geohash) % 2 (based on github.com/davetroy/geohash-js).
_NEIGHBOUR: Dict[Direction, Tuple[str, str]] = {
    Direction.N: ("p0r21436x8zb9dcf5h7kjnmqesgutwvy", "bc01fg45238967deuvhjyznpkmstqrwx"),
    Direction.S: ("14365h7k9dcfesgujnmqp0r2twvyx8zb", "238967debc01fg45kmstqrwxuvhjyznp"),
    Direction.E: ("bc01fg45238967deuvhjyznpkmstqrwx", "p0r21436x8zb9dcf5h7kjnmqesgutwvy"),
    Direction.W: ("238967debc01fg45kmstqrwxuvhjyznp", "14365h7k9dcfesgujnmqp0r2twvyx8zb"),
}

_BORDER: Dict[Direction, Tuple[str, str]] = {
    Direction.N: ("prxz", "bcfguvyz"),
    Direction.S: ("028b", "0145hjnp"),
    Direction.E: ("bcfguvyz", "prxz"),
    Direction.W: ("0145hjnp", "028b"),
}


def _normalize(geohash: str) -> Geohash:
    if not geohash:
        raise EmptyGeohashError("geohash must not be empty")
    geohash = geohash.lower()
    for position, char in enumerate(geohash):
        base32.decode_symbol(char, position)
    return geohash


def _check_precision(precision: int, config: GeohashConfig) -> None:
    if (
        isinstance(precision, bool)
        or not isinstance(precision, int)
        or not 1 <= precision <= config.max_precision
    ):
        raise InvalidPrecisionError(
            f"precision must be an integer between 1 and {config.max_precision}, "
            f"got {precision!r}"
        )


def _encode(lat: float, lon: float, precision: int) -> Geohash:
    return base32.from_bits(interleave(lat, lon, precision * 5))


def encode(
    lat: float,
    lon: float,
    precision: Optional[int] = None,
    config: Optional[GeohashConfig] = None,
) -> Geohash:
    """Encode a latitude/longitude into a geohash.

    Without ``precision`` the shortest geohash whose decoded centre equals
    ``(lat, lon)`` exactly is returned, falling back to the maximum precision.

    Example::

        encode(52.205, 0.119, 7)  # "u120fxw"
    """
    config = config or get_config()
    if config.validate_coordinates:
        Coordinate(lat=lat, lon=lon)

    if precision is not None:
        _check_precision(precision, config)
        return _encode(lat, lon, precision)

    for candidate in range(1, config.max_precision + 1):
        geohash = _encode(lat, lon, candidate)
        point = decode(geohash)
        if point.lat == lat and point.lon == lon:
            logger.debug("inferred precision %d for %s,%s", candidate, lat, lon)
            return geohash

    logger.debug(
        "no exact precision for %s,%s, using %d", lat, lon, config.max_precision
    )
    return _encode(lat, lon, config.max_precision)


def bounds(geohash: str) -> BoundingBox:
    """South-west and north-east corners of the cell."""
    geohash = _normalize(geohash)
    bits = (
        bit for char in geohash for bit in base32.to_bits(base32.decode_symbol(char))
    )
    lat_min, lat_max, lon_min, lon_max = deinterleave(bits)
    return BoundingBox(
        sw=Coordinate(lat=lat_min, lon=lon_min),
        ne=Coordinate(lat=lat_max, lon=lon_max),
    )


def _round(value: float, span: float) -> float:
    # ⌊2 - log10(Δ°)⌋ places: close to the centre without spurious precision
    if span <= 0:
        # halving ran out of double precision, the value is already exact
        return value
    return round(value, math.floor(2 - math.log10(span)))


def decode(geohash: str) -> Coordinate:
    """Centre of the cell, rounded to the cell's resolution.

    Example::

        decode("u120fxw")  # Coordinate(lat=52.205, lon=0.1188)
    """
    box = bounds(geohash)
    center = box.center
    return Coordinate(
        lat=_round(center.lat, box.lat_span),
        lon=_round(center.lon, box.lon_span),
    )


def _adjacent(geohash: Geohash, direction: Direction) -> Geohash:
    parent, last = geohash[:-1], geohash[-1]
    parity = len(geohash) % 2

    # cells on the parent's border don't share its prefix
    if parent and last in _BORDER[direction][parity]:
        logger.debug("%s crosses its parent border going %s", geohash, direction.value)
        parent = _adjacent(parent, direction)

    return parent + base32.encode_symbol(_NEIGHBOUR[direction][parity].index(last))


def adjacent(geohash: str, direction: Direction | str) -> Geohash:
    """Cell next to ``geohash`` in ``direction``.

    Diagonals step north/south first, then east/west.
    """
    geohash = _normalize(geohash)
    for step in Direction.parse(direction).components:
        geohash = _adjacent(geohash, step)
    return geohash


def neighbours(geohash: str) -> Dict[Direction, Geohash]:
    geohash = _normalize(geohash)
    north = _adjacent(geohash, Direction.N)
    south = _adjacent(geohash, Direction.S)
    return {
        Direction.N: north,
        Direction.NE: _adjacent(north, Direction.E),
        Direction.E: _adjacent(geohash, Direction.E),
        Direction.SE: _adjacent(south, Direction.E),
        Direction.S: south,
        Direction.SW: _adjacent(south, Direction.W),
        Direction.W: _adjacent(geohash, Direction.W),
        Direction.NW: _adjacent(north, Direction.W),
    }


def expand(geohash: str) -> List[Geohash]:
    """The cell followed by its eight neighbours."""
    geohash = _normalize(geohash)
    return [geohash, *neighbours(geohash).values()]


def cell_size(
    precision: int, config: Optional[GeohashConfig] = None
) -> Tuple[float, float]:
    _check_precision(precision, config or get_config())
    return _cell_size(precision)
