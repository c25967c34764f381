"""Nucleotide alphabet and 2-bit packing helpers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import IntEnum
from typing import Final

from nucleo.core.errors import GroupSizeError, InvalidSymbolError

GROUP_SIZE: Final = 4
_BITS: Final = 2
_MASK: Final = 0b11


class Nucleotide(IntEnum):
    """One of the four bases. The integer value is the 2-bit code."""

    ADENINE = 0
    CYTOSINE = 1
    GUANINE = 2
    THYMINE = 3

    def to_char(self) -> str:
        return _TO_CHAR[self]

    @classmethod
    def from_char(cls, char: str) -> Nucleotide:
        """Decode ``A``/``C``/``G``/``T`` (any case)."""
        try:
            return _FROM_CHAR[char.upper()]
        except (KeyError, AttributeError):
            msg = f"Invalid nucleotide character: {char!r}"
            raise InvalidSymbolError(msg) from None

    def __str__(self) -> str:
        return self.to_char()


A: Final = Nucleotide.ADENINE
C: Final = Nucleotide.CYTOSINE
G: Final = Nucleotide.GUANINE
T: Final = Nucleotide.THYMINE

_TO_CHAR: Final = {A: "A", C: "C", G: "G", T: "T"}
_FROM_CHAR: Final = {char: nucleotide for nucleotide, char in _TO_CHAR.items()}


def pack_group(nucleotides: Sequence[Nucleotide]) -> int:
    """Pack exactly four nucleotides into one byte, first nucleotide in the high bits."""
    if len(nucleotides) != GROUP_SIZE:
        msg = f"pack_group expects {GROUP_SIZE} nucleotides, got {len(nucleotides)}"
        raise GroupSizeError(msg)
    byte = 0
    for nucleotide in nucleotides:
        byte = (byte << _BITS) | (int(nucleotide) & _MASK)
    return byte


def unpack_group(byte: int) -> tuple[Nucleotide, Nucleotide, Nucleotide, Nucleotide]:
    """Inverse of :func:`pack_group`."""
    if not 0 <= byte <= 0xFF:
        msg = f"unpack_group expects a byte in [0, 255], got {byte}"
        raise GroupSizeError(msg)
    shifts = range(_BITS * (GROUP_SIZE - 1), -1, -_BITS)
    first, second, third, fourth = (Nucleotide((byte >> shift) & _MASK) for shift in shifts)
    return (first, second, third, fourth)


def parse_nucleotides(text: Iterable[str]) -> list[Nucleotide]:
    """Decode a string of nucleotide characters."""
    result: list[Nucleotide] = []
    for idx, char in enumerate(text):
        try:
            result.append(Nucleotide.from_char(char))
        except InvalidSymbolError as exc:
            msg = f"{exc} at position {idx}"
            raise InvalidSymbolError(msg) from None
    return result
