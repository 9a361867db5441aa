"""Binary subdivision of the lat/lon ranges into interleaved bits.

Longitude takes the even bit positions and latitude the odd ones, so the
first bit always halves the longitude range.
"""

from typing import Iterable, Iterator, Tuple

LAT_RANGE = (-90.0, 90.0)
LON_RANGE = (-180.0, 180.0)

Bounds = Tuple[float, float, float, float]


def interleave(lat: float, lon: float, bit_count: int) -> Iterator[int]:
    lat_min, lat_max = LAT_RANGE
    lon_min, lon_max = LON_RANGE
    even = True

    for _ in range(bit_count):
        if even:
            mid = (lon_min + lon_max) / 2
            if lon > mid:
                yield 1
                lon_min = mid
            else:
                yield 0
                lon_max = mid
        else:
            mid = (lat_min + lat_max) / 2
            if lat > mid:
                yield 1
                lat_min = mid
            else:
                yield 0
                lat_max = mid
        even = not even


def deinterleave(bits: Iterable[int]) -> Bounds:
    """Narrow the global ranges by ``bits``.

    Returns ``(lat_min, lat_max, lon_min, lon_max)`` of the resulting cell.
    """
    lat_min, lat_max = LAT_RANGE
    lon_min, lon_max = LON_RANGE
    even = True

    for bit in bits:
        if even:
            mid = (lon_min + lon_max) / 2
            if bit:
                lon_min = mid
            else:
                lon_max = mid
        else:
            mid = (lat_min + lat_max) / 2
            if bit:
                lat_min = mid
            else:
                lat_max = mid
        even = not even

    return lat_min, lat_max, lon_min, lon_max


def cell_size(precision: int) -> Tuple[float, float]:
    """Angular ``(lat, lon)`` size of a cell with ``precision`` characters."""
    bit_count = precision * 5
    lat_bits = bit_count // 2
    lon_bits = bit_count - lat_bits
    lat_span = LAT_RANGE[1] - LAT_RANGE[0]
    lon_span = LON_RANGE[1] - LON_RANGE[0]
    return lat_span / (1 << lat_bits), lon_span / (1 << lon_bits)
