from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, List, Optional, Tuple

from pydantic import Field, ValidationError, model_validator
from pydantic.dataclasses import dataclass

from .exceptions import InvalidCoordinateError, InvalidDirectionError

if TYPE_CHECKING:
    from .config import GeohashConfig

Geohash = str

# Approximate edge length of a cell per precision.
_GEOHASH_CELL_KM: List[Tuple[int, float]] = [
    (1, 5000.0),
    (2, 1250.0),
    (3, 156.0),
    (4, 39.1),
    (5, 4.89),
    (6, 1.22),
    (7, 0.153),
    (8, 0.0382),
    (9, 0.00477),
]


@dataclass(frozen=True)
class Coordinate:
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)

    @model_validator(mode="wrap")
    @classmethod
    def _raise_invalid_coordinate(cls, values: Any, handler: Any) -> "Coordinate":
        try:
            return handler(values)
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in error['loc'])}: {error['msg']}"
                for error in exc.errors()
            )
            raise InvalidCoordinateError(f"invalid coordinate: {problems}") from exc

    def __str__(self) -> str:
        return f"{self.lat},{self.lon}"

    def geohash(
        self, precision: Optional[int] = None, config: Optional[GeohashConfig] = None
    ) -> Geohash:
        from .geohash import encode

        return encode(self.lat, self.lon, precision=precision, config=config)

    @classmethod
    def from_string(cls, value: str) -> "Coordinate":
        parts = value.split(",", 1)
        if len(parts) != 2:
            raise InvalidCoordinateError("coordinate string must be 'lat,lon'")
        try:
            lat = float(parts[0].strip())
            lon = float(parts[1].strip())
        except ValueError as exc:
            raise InvalidCoordinateError(f"invalid coordinate {value!r}") from exc
        return cls(lat=lat, lon=lon)


@dataclass(frozen=True)
class BoundingBox:
    sw: Coordinate
    ne: Coordinate

    @model_validator(mode="after")
    def _check_corners(self) -> "BoundingBox":
        if self.sw.lat > self.ne.lat or self.sw.lon > self.ne.lon:
            raise ValueError("south-west corner must not lie north or east of north-east")
        return self

    @property
    def lat_span(self) -> float:
        return self.ne.lat - self.sw.lat

    @property
    def lon_span(self) -> float:
        return self.ne.lon - self.sw.lon

    @property
    def center(self) -> Coordinate:
        """Exact, unrounded middle of the box."""
        return Coordinate(
            lat=(self.sw.lat + self.ne.lat) / 2,
            lon=(self.sw.lon + self.ne.lon) / 2,
        )

    def contains(self, point: Coordinate) -> bool:
        return (
            self.sw.lat <= point.lat <= self.ne.lat
            and self.sw.lon <= point.lon <= self.ne.lon
        )


class Direction(str, Enum):
    N = "n"
    NE = "ne"
    E = "e"
    SE = "se"
    S = "s"
    SW = "sw"
    W = "w"
    NW = "nw"

    @classmethod
    def parse(cls, value: "Direction | str") -> "Direction":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidDirectionError(f"unknown direction {value!r}") from None

    @property
    def components(self) -> Tuple["Direction", ...]:
        """Cardinal steps making up this direction, north/south first."""
        return tuple(Direction(c) for c in self.value)

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.N: Direction.S,
    Direction.NE: Direction.SW,
    Direction.E: Direction.W,
    Direction.SE: Direction.NW,
    Direction.S: Direction.N,
    Direction.SW: Direction.NE,
    Direction.W: Direction.E,
    Direction.NW: Direction.SE,
}


def precision_for_km(radius_km: float) -> int:
    if radius_km <= 0:
        return 9
    for precision, size_km in reversed(_GEOHASH_CELL_KM):
        if size_km >= radius_km:
            return precision
    return 1
