"""Input normalisation for DNA-accepting APIs."""

from __future__ import annotations

from collections.abc import Iterable

from nucleo.core.dna import DNA
from nucleo.core.nucleotide import Nucleotide


def ensure_dna(values: Iterable[DNA | str | Iterable[Nucleotide]]) -> list[DNA]:
    """Normalize strings and nucleotide iterables into `DNA` objects.

    Existing `DNA` instances are passed through unchanged. Strings are parsed
    case-insensitively; any character outside ``ACGT`` raises
    :class:`~nucleo.core.errors.InvalidSymbolError`.
    """
    result: list[DNA] = []
    for entry in values:
        if isinstance(entry, DNA):
            candidate = entry
        elif isinstance(entry, str):
            candidate = DNA.from_string(entry)
        else:
            candidate = DNA(list(entry))
        result.append(candidate)
    return result
