"""Expanded DNA representation and its mutation operators."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, overload

from nucleo.core.errors import BoundsError, ParentLengthError
from nucleo.core.nucleotide import Nucleotide, parse_nucleotides
from nucleo.utils.config import CrossoverConfig
from nucleo.utils.logging import get_logger

if TYPE_CHECKING:  # pragma: no cover
    from nucleo.core.chromosome import Chromosome

_LOGGER = get_logger("dna")


@dataclass(slots=True)
class DNA:
    """Mutable sequence of nucleotides, one element per base.

    Structural operators (:meth:`point_mutation`, :meth:`insertion`,
    :meth:`deletion`, :meth:`inversion`) edit the instance in place and validate
    their arguments before touching any data. :meth:`crossover` leaves both
    parents untouched and returns a new instance.
    """

    nucleotides: list[Nucleotide] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.nucleotides = [Nucleotide(n) for n in self.nucleotides]

    @classmethod
    def from_string(cls, text: str) -> DNA:
        """Parse an ``ACGT`` string (case-insensitive)."""
        return cls(parse_nucleotides(text))

    @classmethod
    def from_chromosome(cls, chromosome: Chromosome) -> DNA:
        return cls(chromosome.to_dna().nucleotides)

    def compact(self) -> Chromosome:
        """Return the packed 4-per-byte form of this DNA."""
        from nucleo.core.chromosome import Chromosome

        return Chromosome.from_dna(self)

    def copy(self) -> DNA:
        return DNA(self.nucleotides)

    def __len__(self) -> int:
        return len(self.nucleotides)

    def __iter__(self) -> Iterator[Nucleotide]:
        return iter(self.nucleotides)

    @overload
    def __getitem__(self, index: int) -> Nucleotide: ...

    @overload
    def __getitem__(self, index: slice) -> DNA: ...

    def __getitem__(self, index: int | slice) -> Nucleotide | DNA:
        if isinstance(index, slice):
            return DNA(self.nucleotides[index])
        return self.nucleotides[index]

    def __str__(self) -> str:
        return "".join(n.to_char() for n in self.nucleotides)

    def __repr__(self) -> str:
        return f"DNA({str(self)!r})"

    # Structural mutations -------------------------------------------------

    def point_mutation(self, pos: int, nucleotide: Nucleotide) -> None:
        """Replace the nucleotide at ``pos``."""
        if not 0 <= pos < len(self):
            msg = f"point mutation at {pos} outside DNA of length {len(self)}"
            raise BoundsError(msg)
        self.nucleotides[pos] = Nucleotide(nucleotide)
        _LOGGER.debug("point mutation pos=%d -> %s", pos, nucleotide)

    def insertion(self, segment: Iterable[Nucleotide], pos: int) -> None:
        """Insert ``segment`` so that its first nucleotide lands at ``pos``.

        ``pos`` must address an existing nucleotide; inserting at ``len(self)``
        is rejected, so an empty DNA cannot grow through insertion.
        """
        if not 0 <= pos < len(self):
            msg = f"insertion at {pos} outside DNA of length {len(self)}"
            raise BoundsError(msg)
        values = [Nucleotide(n) for n in segment]
        self.nucleotides[pos:pos] = values
        _LOGGER.debug("insertion pos=%d len=%d", pos, len(values))

    def deletion(self, pos: int, length: int) -> None:
        """Remove ``length`` consecutive nucleotides starting at ``pos``."""
        _check_span(pos, length)
        if pos + length > len(self):
            msg = f"deletion of {length} at {pos} exceeds DNA of length {len(self)}"
            raise BoundsError(msg)
        del self.nucleotides[pos : pos + length]
        _LOGGER.debug("deletion pos=%d len=%d", pos, length)

    def inversion(self, pos: int, length: int) -> None:
        """Reverse ``length`` nucleotides starting at ``pos``.

        The segment must end strictly before the last nucleotide boundary:
        ``pos + length < len(self)``.
        """
        _check_span(pos, length)
        if pos + length >= len(self):
            msg = f"inversion of {length} at {pos} must end before {len(self)}"
            raise BoundsError(msg)
        self.nucleotides[pos : pos + length] = self.nucleotides[pos : pos + length][::-1]
        _LOGGER.debug("inversion pos=%d len=%d", pos, length)

    # Recombination --------------------------------------------------------

    def crossover(
        self,
        other: DNA,
        *,
        rng: random.Random | None = None,
        config: CrossoverConfig | None = None,
    ) -> DNA:
        """Build a child by copying random-length segments from either parent.

        Both parents must have the same length. Each segment comes from
        ``self`` or ``other`` with equal probability.
        """
        if len(self) != len(other):
            msg = f"crossover parents differ in length: {len(self)} != {len(other)}"
            raise ParentLengthError(msg)
        if rng is None:
            rng = random.Random()
        cfg = config or CrossoverConfig()

        child: list[Nucleotide] = []
        index = 0
        segments = segment_lengths(
            len(self), rng, min_segment=cfg.min_segment, max_segment=cfg.max_segment
        )
        for length in segments:
            parent = self if rng.random() < 0.5 else other
            child.extend(parent.nucleotides[index : index + length])
            index += length
        _LOGGER.debug("crossover len=%d segments=%s", len(child), segments)
        return DNA(child)


def segment_lengths(
    total: int,
    rng: random.Random,
    *,
    min_segment: int = 2,
    max_segment: int = 5,
) -> list[int]:
    """Partition ``total`` positions into consecutive random-length segments."""
    if min_segment < 1:
        raise ValueError("min_segment must be positive")
    lengths: list[int] = []
    remaining = total
    while remaining > 0:
        low = min(min_segment, remaining)
        high = min(max_segment, remaining)
        length = remaining if low > high else rng.randint(low, high)
        lengths.append(length)
        remaining -= length
    return lengths


def _check_span(pos: int, length: int) -> None:
    if pos < 0 or length < 0:
        msg = f"position and length must be non-negative, got pos={pos} length={length}"
        raise BoundsError(msg)
