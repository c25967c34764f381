"""Random structural mutation used for single-parent breeding."""

from __future__ import annotations

import random
from enum import Enum

from nucleo.core.dna import DNA
from nucleo.core.nucleotide import Nucleotide
from nucleo.utils.config import MutationConfig
from nucleo.utils.logging import get_logger

_LOGGER = get_logger("operators")


class MutationKind(Enum):
    """Structural mutation operators available on :class:`DNA`."""

    POINT = "point"
    INSERTION = "insertion"
    DELETION = "deletion"
    INVERSION = "inversion"


def _applies(kind: MutationKind, size: int, max_segment: int) -> bool:
    if kind is MutationKind.INVERSION:
        # A reversed pair must still end before the last position.
        return size >= 3 and max_segment >= 2
    return size >= 1


def random_mutation(
    dna: DNA,
    *,
    rng: random.Random | None = None,
    config: MutationConfig | None = None,
) -> MutationKind | None:
    """Apply one randomly chosen structural mutation to ``dna`` in place.

    The operator is drawn according to the weights in ``config`` among the
    operators that can act on a DNA of this length. Returns the operator that
    was applied, or ``None`` when none applies (e.g. empty DNA).
    """
    if rng is None:
        rng = random.Random()
    cfg = config or MutationConfig()

    candidates = [
        (kind, weight)
        for kind, weight in zip(MutationKind, cfg.weights())
        if weight > 0 and _applies(kind, len(dna), cfg.max_segment)
    ]
    if not candidates:
        return None
    kinds = [kind for kind, _ in candidates]
    kind = rng.choices(kinds, weights=[weight for _, weight in candidates], k=1)[0]

    size = len(dna)
    if kind is MutationKind.POINT:
        pos = rng.randrange(size)
        current = dna[pos]
        dna.point_mutation(pos, rng.choice([n for n in Nucleotide if n != current]))
    elif kind is MutationKind.INSERTION:
        length = rng.randint(1, cfg.max_segment)
        segment = [rng.choice(list(Nucleotide)) for _ in range(length)]
        dna.insertion(segment, rng.randrange(size))
    elif kind is MutationKind.DELETION:
        length = rng.randint(1, min(cfg.max_segment, size))
        dna.deletion(rng.randint(0, size - length), length)
    else:
        length = rng.randint(2, min(cfg.max_segment, size - 1))
        dna.inversion(rng.randint(0, size - 1 - length), length)

    _LOGGER.debug("random mutation kind=%s len=%d -> %d", kind.value, size, len(dna))
    return kind
