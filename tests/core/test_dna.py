"""Tests for DNA mutation operators and crossover."""

import random

import pytest

from nucleo.core import A, C, G, T, DNA, BoundsError, ParentLengthError
from nucleo.core.dna import segment_lengths
from nucleo.utils import CrossoverConfig


def test_from_string_and_str_round_trip():
    dna = DNA.from_string("acgtTGCA")
    assert dna.nucleotides == [A, C, G, T, T, G, C, A]
    assert str(dna) == "ACGTTGCA"


def test_constructor_copies_input():
    source = [A, C]
    dna = DNA(source)
    source.append(G)
    assert len(dna) == 2


def test_slice_returns_dna(paired_genome):
    assert paired_genome[2:4] == DNA([G, G])
    assert paired_genome[0] is A


def test_copy_is_independent(agct):
    clone = agct.copy()
    clone.point_mutation(0, T)
    assert agct[0] is A
    assert clone != agct


class TestPointMutation:
    def test_replaces_nucleotide(self, agct):
        agct.point_mutation(3, A)
        assert str(agct) == "AGCA"

    @pytest.mark.parametrize("pos", [-1, 4])
    def test_out_of_bounds(self, agct, pos):
        with pytest.raises(BoundsError):
            agct.point_mutation(pos, C)
        assert str(agct) == "AGCT"


class TestInsertion:
    def test_segment_at_front(self, agct, paired_genome):
        agct.insertion(paired_genome, 0)
        assert len(agct) == 12
        assert agct[:8] == paired_genome
        assert str(agct) == "AAGGCCTTAGCT"

    def test_segment_in_middle(self, agct):
        agct.insertion([T, T], 2)
        assert str(agct) == "AGTTCT"

    def test_at_end_rejected(self, agct):
        with pytest.raises(BoundsError):
            agct.insertion([A], 4)
        assert str(agct) == "AGCT"

    def test_into_empty_rejected(self):
        with pytest.raises(BoundsError):
            DNA().insertion([A], 0)

    def test_negative_position_rejected(self, agct):
        with pytest.raises(BoundsError):
            agct.insertion([A], -1)

    def test_invalid_segment_leaves_dna_unchanged(self):
        dna = DNA([A, C, G])
        with pytest.raises(ValueError):
            dna.insertion([A, 9], 0)
        assert str(dna) == "ACG"


class TestDeletion:
    def test_insert_then_delete_restores(self, agct, paired_genome):
        agct.insertion(paired_genome, 0)
        agct.deletion(0, len(paired_genome))
        assert agct == DNA.from_string("AGCT")

    def test_delete_to_end(self, paired_genome):
        paired_genome.deletion(6, 2)
        assert str(paired_genome) == "AAGGCC"

    def test_zero_length_is_noop(self, agct):
        agct.deletion(4, 0)
        assert str(agct) == "AGCT"

    @pytest.mark.parametrize(("pos", "length"), [(3, 2), (5, 0), (-1, 1), (0, -1)])
    def test_out_of_bounds(self, agct, pos, length):
        with pytest.raises(BoundsError):
            agct.deletion(pos, length)
        assert str(agct) == "AGCT"


class TestInversion:
    def test_is_involution(self, agct):
        saved = agct.copy()
        agct.inversion(1, 2)
        assert agct != saved
        assert str(agct) == "ACGT"
        agct.inversion(1, 2)
        assert agct == saved

    def test_longer_segment_is_involution(self, paired_genome):
        saved = paired_genome.copy()
        paired_genome.inversion(1, 4)
        assert paired_genome != saved
        paired_genome.inversion(1, 4)
        assert paired_genome == saved

    def test_segment_reaching_end_rejected(self, agct):
        with pytest.raises(BoundsError):
            agct.inversion(2, 2)
        assert str(agct) == "AGCT"

    def test_past_end_rejected(self, agct):
        with pytest.raises(BoundsError):
            agct.inversion(3, 5)


class TestCrossover:
    def test_child_takes_each_position_from_a_parent(self, rng):
        guanine = DNA([G] * 9)
        adenine = DNA([A] * 9)
        child = guanine.crossover(adenine, rng=rng)
        assert len(child) == 9
        for idx, nucleotide in enumerate(child):
            assert nucleotide in (guanine[idx], adenine[idx])

    def test_parents_untouched(self, rng):
        first = DNA.from_string("ACGTACGTA")
        second = DNA.from_string("TGCATGCAT")
        first.crossover(second, rng=rng)
        assert str(first) == "ACGTACGTA"
        assert str(second) == "TGCATGCAT"

    def test_seeded_rng_is_deterministic(self):
        first = DNA.from_string("ACGTACGTACGTACGT")
        second = DNA.from_string("TTTTTTTTTTTTTTTT")
        a = first.crossover(second, rng=random.Random(7))
        b = first.crossover(second, rng=random.Random(7))
        assert a == b

    def test_segments_are_contiguous(self):
        # Distinct parents let us recover which parent each position came from.
        first = DNA([A] * 40)
        second = DNA([T] * 40)
        rng = random.Random(3)
        expected = segment_lengths(40, random.Random(3))
        child = first.crossover(second, rng=rng)
        index = 0
        for length in expected:
            block = child.nucleotides[index : index + length]
            assert len(set(block)) == 1
            index += length

    def test_empty_parents(self, rng):
        assert len(DNA().crossover(DNA(), rng=rng)) == 0

    def test_length_mismatch(self, rng):
        with pytest.raises(ParentLengthError):
            DNA([A, C]).crossover(DNA([A]), rng=rng)

    def test_custom_segment_bounds(self, rng):
        first = DNA([A] * 12)
        second = DNA([C] * 12)
        child = first.crossover(second, rng=rng, config=CrossoverConfig(min_segment=1, max_segment=1))
        assert len(child) == 12


class TestSegmentLengths:
    @pytest.mark.parametrize("total", [0, 1, 2, 3, 9, 100])
    def test_partition_covers_total(self, rng, total):
        lengths = segment_lengths(total, rng)
        assert sum(lengths) == total

    def test_lengths_within_bounds(self, rng):
        lengths = segment_lengths(500, rng, min_segment=2, max_segment=5)
        assert all(1 <= length <= 5 for length in lengths)
        # Only the final segment may fall below the minimum.
        assert all(length >= 2 for length in lengths[:-1])

    def test_short_remainder_taken_whole(self, rng):
        assert segment_lengths(1, rng) == [1]

    def test_rejects_non_positive_minimum(self, rng):
        with pytest.raises(ValueError):
            segment_lengths(5, rng, min_segment=0)
