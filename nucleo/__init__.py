"""nucleo public interface.

Core encoding types live under ``nucleo.core``; breeding contracts under
``nucleo.genetic``.
"""

from __future__ import annotations

from .core import DNA, Chromosome, Nucleotide, ensure_dna
from .genetic import Asexual, Genetic, Sexual

__all__ = [
    "Asexual",
    "Chromosome",
    "DNA",
    "Genetic",
    "Nucleotide",
    "Sexual",
    "ensure_dna",
]

__version__ = "0.1.0"
