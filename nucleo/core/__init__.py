"""Core primitives: the nucleotide alphabet and the two genome representations."""

from .chromosome import Chromosome, compact, expand
from .dna import DNA, segment_lengths
from .errors import BoundsError, GroupSizeError, InvalidSymbolError, NucleoError, ParentLengthError
from .nucleotide import A, C, G, Nucleotide, T, pack_group, parse_nucleotides, unpack_group
from .validation import ensure_dna

__all__ = [
    "A",
    "C",
    "G",
    "T",
    "BoundsError",
    "Chromosome",
    "DNA",
    "GroupSizeError",
    "InvalidSymbolError",
    "Nucleotide",
    "NucleoError",
    "ParentLengthError",
    "compact",
    "ensure_dna",
    "expand",
    "pack_group",
    "parse_nucleotides",
    "segment_lengths",
    "unpack_group",
]
