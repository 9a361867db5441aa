from typing import Optional


class GeohashError(Exception):
    """Base error for every geohash operation."""


class InvalidCharacterError(GeohashError):
    """Character outside the geohash base32 alphabet."""

    def __init__(self, character: str, position: Optional[int] = None) -> None:
        self.character = character
        self.position = position
        if position is None:
            message = f"invalid geohash character {character!r}"
        else:
            message = f"invalid geohash character {character!r} at position {position}"
        super().__init__(message)


class EmptyGeohashError(GeohashError):
    """Zero-length geohash."""


class InvalidPrecisionError(GeohashError):
    """Precision outside the supported range."""


class InvalidCoordinateError(GeohashError):
    """Latitude/longitude out of range or unparsable."""


class InvalidDirectionError(GeohashError):
    """Direction is not one of the eight compass points."""
