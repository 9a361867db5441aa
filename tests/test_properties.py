from hypothesis import assume, given
from hypothesis import strategies as st

from latlon import Coordinate, Direction, adjacent, bounds, decode, encode
from latlon.base32 import BASE32

latitudes = st.floats(min_value=-90, max_value=90)
longitudes = st.floats(min_value=-180, max_value=180)
precisions = st.integers(min_value=1, max_value=12)
geohashes = st.text(alphabet=BASE32, min_size=1, max_size=12)
cardinals = st.sampled_from([Direction.N, Direction.E, Direction.S, Direction.W])


@given(latitudes, longitudes, precisions)
def test_encoded_cell_contains_point(lat: float, lon: float, precision: int) -> None:
    geohash = encode(lat, lon, precision)
    box = bounds(geohash)
    assert box.contains(Coordinate(lat, lon))
    assert box.contains(decode(geohash))


@given(geohashes)
def test_bounds_corners_are_ordered(geohash: str) -> None:
    box = bounds(geohash)
    assert box.sw.lat <= box.ne.lat
    assert box.sw.lon <= box.ne.lon


@given(geohashes)
def test_decoded_point_reencodes_to_prefix(geohash: str) -> None:
    point = decode(geohash)
    inferred = encode(point.lat, point.lon)
    assert len(inferred) <= len(geohash)
    assert decode(inferred) == point


@given(geohashes, cardinals)
def test_adjacent_is_reversible_away_from_poles(
    geohash: str, direction: Direction
) -> None:
    box = bounds(geohash)
    assume(not (direction is Direction.N and box.ne.lat == 90))
    assume(not (direction is Direction.S and box.sw.lat == -90))
    assert adjacent(adjacent(geohash, direction), direction.opposite) == geohash
