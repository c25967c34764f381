"""Configuration utilities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CrossoverConfig:
    """Segment bounds used when partitioning parents for crossover.

    Segment lengths are drawn uniformly from ``[min_segment, max_segment]``,
    both clamped to the number of positions still unassigned.
    """

    min_segment: int = 2
    max_segment: int = 5

    def __post_init__(self) -> None:
        if self.min_segment < 1:
            raise ValueError("min_segment must be positive")
        if self.max_segment < self.min_segment:
            raise ValueError("max_segment must be >= min_segment")

    def as_dict(self) -> dict[str, int]:
        return {"min_segment": self.min_segment, "max_segment": self.max_segment}


@dataclass(frozen=True, slots=True)
class MutationConfig:
    """Relative weights for picking a random structural mutation.

    ``max_segment`` caps the length of inserted, deleted, and inverted runs.
    """

    point_weight: float = 1.0
    insertion_weight: float = 1.0
    deletion_weight: float = 1.0
    inversion_weight: float = 1.0
    max_segment: int = 4

    def __post_init__(self) -> None:
        weights = self.weights()
        if any(weight < 0 for weight in weights):
            raise ValueError("mutation weights must be non-negative")
        if not any(weights):
            raise ValueError("at least one mutation weight must be positive")
        if self.max_segment < 1:
            raise ValueError("max_segment must be positive")

    def weights(self) -> tuple[float, float, float, float]:
        return (
            self.point_weight,
            self.insertion_weight,
            self.deletion_weight,
            self.inversion_weight,
        )

    def as_dict(self) -> dict[str, float | int]:
        return {
            "point_weight": self.point_weight,
            "insertion_weight": self.insertion_weight,
            "deletion_weight": self.deletion_weight,
            "inversion_weight": self.inversion_weight,
            "max_segment": self.max_segment,
        }
