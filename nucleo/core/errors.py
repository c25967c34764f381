"""Exception types raised by the encoding layer."""

from __future__ import annotations


class NucleoError(Exception):
    """Base class for all nucleo errors."""


class InvalidSymbolError(NucleoError, ValueError):
    """A character does not name one of the four nucleotides."""


class BoundsError(NucleoError, IndexError):
    """A mutation operator was given a position or length outside the DNA."""


class GroupSizeError(NucleoError, ValueError):
    """Packing input violates the 4-nucleotides-per-byte layout."""


class ParentLengthError(NucleoError, ValueError):
    """Crossover parents have different lengths."""
