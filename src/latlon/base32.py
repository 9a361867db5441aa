"""Geohash base32 alphabet (digits and lower-case letters without a, i, l, o)."""

from typing import Iterable, Iterator, List, Optional

from .exceptions import InvalidCharacterError

BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"
_BASE32_MAP = {c: i for i, c in enumerate(BASE32)}
_MASKS = (16, 8, 4, 2, 1)


def encode_symbol(idx: int) -> str:
    return BASE32[idx]


def decode_symbol(char: str, position: Optional[int] = None) -> int:
    try:
        return _BASE32_MAP[char]
    except KeyError:
        raise InvalidCharacterError(char, position) from None


def to_bits(idx: int) -> Iterator[int]:
    """Yield the 5 bits of a symbol index, most significant first."""
    for mask in _MASKS:
        yield 1 if idx & mask else 0


def from_bits(bits: Iterable[int]) -> str:
    """Pack a bit sequence into symbols, 5 bits per symbol.

    A trailing group shorter than 5 bits is dropped.
    """
    symbols: List[str] = []
    idx = 0
    count = 0
    for bit in bits:
        idx = idx * 2 + bit
        count += 1
        if count == 5:
            symbols.append(BASE32[idx])
            idx = 0
            count = 0
    return "".join(symbols)

