"""Minimal example showing how a domain object is bred through its DNA."""

from __future__ import annotations

import random
from dataclasses import dataclass

from nucleo.core import DNA, compact
from nucleo.genetic import Sexual, offspring


@dataclass
class Promoter(Sexual):
    """A promoter region bred by recombining its nucleotides."""

    name: str
    tokens: str

    def to_dna(self) -> DNA:
        return DNA.from_string(self.tokens)

    @classmethod
    def from_dna(cls, dna: DNA) -> Promoter:
        return cls(name="child", tokens=str(dna))


def main() -> None:
    rng = random.Random(1234)
    mother = Promoter(name="mother", tokens="TATAAAGGCCGCTATAAA")
    father = Promoter(name="father", tokens="GGGCGGCAATTCGGGCGG")

    child = offspring(mother, father, rng=rng)
    print("Mother:", mother.tokens)
    print("Father:", father.tokens)
    print("Child: ", child.tokens)

    genome = child.to_dna()
    genome.inversion(2, 6)
    genome.point_mutation(0, genome[1])
    print("Mutated:", genome)

    chromosome = compact(genome)
    print(f"Packed {len(chromosome)} nucleotides into {len(chromosome.data)} bytes"
          f" + {len(chromosome.remainder)} remainder")


if __name__ == "__main__":
    main()
