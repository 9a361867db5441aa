from latlon.interleave import cell_size, deinterleave, interleave


def test_longitude_is_bisected_first() -> None:
    assert list(interleave(0.0, 0.0, 5)) == [0, 0, 1, 1, 1]
    assert list(interleave(0.0, 90.0, 1)) == [1]
    assert list(interleave(45.0, -90.0, 2)) == [0, 1]


def test_no_bits_leaves_whole_globe() -> None:
    assert deinterleave([]) == (-90.0, 90.0, -180.0, 180.0)


def test_bits_narrow_alternating_axes() -> None:
    assert deinterleave([1]) == (-90.0, 90.0, 0.0, 180.0)
    assert deinterleave([0, 1]) == (0.0, 90.0, -180.0, 0.0)
    assert deinterleave([0, 0, 1, 1, 1]) == (-45.0, 0.0, -45.0, 0.0)


def test_deinterleave_contains_interleaved_point() -> None:
    lat, lon = 57.648, 10.41
    lat_min, lat_max, lon_min, lon_max = deinterleave(interleave(lat, lon, 30))
    assert lat_min <= lat <= lat_max
    assert lon_min <= lon <= lon_max


def test_cell_size() -> None:
    assert cell_size(1) == (45.0, 45.0)
    assert cell_size(6) == (0.0054931640625, 0.010986328125)
