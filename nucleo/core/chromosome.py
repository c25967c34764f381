"""Compacted DNA: four nucleotides per byte plus a short remainder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

import numpy as np

from nucleo.core.dna import DNA
from nucleo.core.errors import GroupSizeError
from nucleo.core.nucleotide import GROUP_SIZE, Nucleotide

# Bit offset of each group member, first nucleotide in the high bits.
_SHIFTS: Final = np.array([6, 4, 2, 0], dtype=np.uint8)


@dataclass(frozen=True, slots=True)
class Chromosome:
    """Packed form of :class:`~nucleo.core.dna.DNA`.

    ``data`` holds one byte per full group of four nucleotides, in order.
    ``remainder`` holds the 0-3 trailing nucleotides that do not fill a group.
    """

    data: bytes = b""
    remainder: tuple[Nucleotide, ...] = ()

    def __post_init__(self) -> None:
        if len(self.remainder) >= GROUP_SIZE:
            msg = f"remainder holds at most {GROUP_SIZE - 1} nucleotides, got {len(self.remainder)}"
            raise GroupSizeError(msg)
        object.__setattr__(self, "data", bytes(self.data))
        object.__setattr__(self, "remainder", tuple(Nucleotide(n) for n in self.remainder))

    @classmethod
    def from_dna(cls, dna: DNA) -> Chromosome:
        codes = np.fromiter((int(n) for n in dna), dtype=np.uint8, count=len(dna))
        split = len(codes) - len(codes) % GROUP_SIZE
        groups = codes[:split].reshape(-1, GROUP_SIZE)
        packed = (groups << _SHIFTS).sum(axis=1, dtype=np.uint8)
        remainder = tuple(dna.nucleotides[split:])
        return cls(data=packed.tobytes(), remainder=remainder)

    def to_dna(self) -> DNA:
        raw = np.frombuffer(self.data, dtype=np.uint8)
        codes = (raw[:, np.newaxis] >> _SHIFTS) & 0b11
        nucleotides = [Nucleotide(code) for code in codes.ravel().tolist()]
        nucleotides.extend(self.remainder)
        return DNA(nucleotides)

    def __len__(self) -> int:
        return len(self.data) * GROUP_SIZE + len(self.remainder)


def compact(dna: DNA) -> Chromosome:
    """Pack ``dna`` into a :class:`Chromosome`."""
    return Chromosome.from_dna(dna)


def expand(chromosome: Chromosome) -> DNA:
    """Unpack ``chromosome`` back into a :class:`DNA`."""
    return chromosome.to_dna()
