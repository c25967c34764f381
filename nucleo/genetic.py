"""Breeding contracts for domain objects that carry a DNA genome.

A domain class opts in by subclassing one breeding variant and implementing
the two conversion hooks of :class:`Genetic`:

- ``to_dna()`` encodes the object as :class:`~nucleo.core.dna.DNA`.
- ``from_dna(dna)`` (classmethod) decodes a DNA back into an instance.

Variants
========

- :class:`Sexual`: two parents, ``breed(other)`` recombines both genomes with
  :meth:`DNA.crossover`.
- :class:`Asexual`: one parent, ``breed()`` copies the genome and applies a
  single random structural mutation.

Both ``breed`` methods return a new DNA and never modify the parents. A class
implements exactly one variant. :func:`breed` and :func:`offspring` dispatch on
the variant so callers can treat both uniformly.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from enum import Enum
from typing import TypeVar

from nucleo.core.dna import DNA
from nucleo.operators import random_mutation
from nucleo.utils.config import CrossoverConfig, MutationConfig

GeneticT = TypeVar("GeneticT", bound="Genetic")


class BreedingMode(Enum):
    """Number of parents taking part in breeding."""

    ASEXUAL = "asexual"
    SEXUAL = "sexual"


class Genetic(ABC):
    """Conversion between a domain object and its DNA."""

    @abstractmethod
    def to_dna(self) -> DNA:
        """Return the genome of this object."""

    @classmethod
    @abstractmethod
    def from_dna(cls: type[GeneticT], dna: DNA) -> GeneticT:
        """Build an instance from a genome."""


class Sexual(Genetic):
    """Two-parent breeding through crossover."""

    breeding_mode = BreedingMode.SEXUAL

    def breed(
        self,
        other: Sexual,
        *,
        rng: random.Random | None = None,
        config: CrossoverConfig | None = None,
    ) -> DNA:
        return self.to_dna().crossover(other.to_dna(), rng=rng, config=config)


class Asexual(Genetic):
    """Single-parent breeding through one random mutation."""

    breeding_mode = BreedingMode.ASEXUAL

    def breed(
        self,
        *,
        rng: random.Random | None = None,
        config: MutationConfig | None = None,
    ) -> DNA:
        child = self.to_dna().copy()
        random_mutation(child, rng=rng, config=config)
        return child


def breed(
    parent: Genetic,
    other: Genetic | None = None,
    *,
    rng: random.Random | None = None,
    config: CrossoverConfig | MutationConfig | None = None,
) -> DNA:
    """Breed ``parent`` alone or with ``other`` depending on its variant.

    ``config`` must be a :class:`CrossoverConfig` for sexual breeding and a
    :class:`MutationConfig` for asexual breeding.
    """
    mode = BreedingMode.ASEXUAL if other is None else BreedingMode.SEXUAL
    if mode is BreedingMode.SEXUAL:
        if not isinstance(parent, Sexual) or not isinstance(other, Sexual):
            msg = f"{type(parent).__name__} does not support sexual breeding"
            raise TypeError(msg)
        if config is not None and not isinstance(config, CrossoverConfig):
            msg = f"sexual breeding expects CrossoverConfig, got {type(config).__name__}"
            raise TypeError(msg)
        return parent.breed(other, rng=rng, config=config)
    if not isinstance(parent, Asexual):
        msg = f"{type(parent).__name__} does not support asexual breeding"
        raise TypeError(msg)
    if config is not None and not isinstance(config, MutationConfig):
        msg = f"asexual breeding expects MutationConfig, got {type(config).__name__}"
        raise TypeError(msg)
    return parent.breed(rng=rng, config=config)


def offspring(
    parent: GeneticT,
    other: GeneticT | None = None,
    *,
    rng: random.Random | None = None,
    config: CrossoverConfig | MutationConfig | None = None,
) -> GeneticT:
    """Breed and decode the child into the parent's own type."""
    return type(parent).from_dna(breed(parent, other, rng=rng, config=config))
