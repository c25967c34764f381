"""Shared test fixtures and configuration for nucleo tests."""

import random

import pytest

from nucleo.core import DNA


@pytest.fixture
def rng():
    """Seeded random source for deterministic operators."""
    return random.Random(1337)


@pytest.fixture
def dna_alphabet():
    """DNA alphabet (ACGT)."""
    return "ACGT"


@pytest.fixture
def agct():
    """Short mixed genome used by the inversion tests."""
    return DNA.from_string("AGCT")


@pytest.fixture
def paired_genome():
    """Eight nucleotides, each base repeated twice."""
    return DNA.from_string("AAGGCCTT")
