"""Reservoir sampler: empty streams, determinism, and selection frequencies."""

import random
from collections import Counter

import pytest

from Rhombus_Territory.ai.reservoir import ReservoirSampler, sample_one


class SeqRng:
    """Returns scripted uniforms in order."""

    def __init__(self, values):
        self._values = list(values)

    def random(self):
        return self._values.pop(0)


def test_no_items_gives_none():
    sampler = ReservoirSampler(random.Random(0))
    assert sampler.get_result() is None
    assert sample_one([], rng=random.Random(0)) is None


def test_single_item_is_always_chosen():
    for seed in range(20):
        assert sample_one(["only"], rng=random.Random(seed)) == "only"


def test_same_seed_same_choice():
    stream = [(i, 1) for i in range(50)]
    a = ReservoirSampler(random.Random(42)).extend(stream).get_result()
    b = ReservoirSampler(random.Random(42)).extend(stream).get_result()
    assert a == b


def test_uniform_frequencies_for_unit_weights():
    rng = random.Random(2024)
    n_items = 5
    runs = 20000
    counts = Counter(sample_one(range(n_items), rng=rng) for _ in range(runs))
    assert set(counts) == set(range(n_items))
    for item in range(n_items):
        assert counts[item] / runs == pytest.approx(1 / n_items, abs=0.015)


def test_frequencies_follow_weights():
    rng = random.Random(7)
    runs = 20000
    counts = Counter()
    for _ in range(runs):
        sampler = ReservoirSampler(rng)
        sampler.insert("light", 1)
        sampler.insert("heavy", 3)
        counts[sampler.get_result()] += 1
    assert counts["heavy"] / runs == pytest.approx(0.75, abs=0.02)


@pytest.mark.parametrize("weight", [0, -1.5])
def test_non_positive_weight_rejected(weight):
    with pytest.raises(ValueError):
        ReservoirSampler(random.Random(0)).insert("x", weight)


def test_zero_uniform_is_redrawn():
    sampler = ReservoirSampler(SeqRng([0.0, 0.5, 0.5]))
    sampler.insert("a", 1)
    assert sampler.get_result() == "a"
    assert sampler.seen == 1


def test_falsy_items_are_returned():
    assert sample_one([0], rng=random.Random(3)) == 0


def test_tiny_weights_never_fail():
    for seed in range(200):
        sampler = ReservoirSampler(random.Random(seed))
        sampler.insert("a", 0.001)
        sampler.insert("b", 0.001)
        assert sampler.get_result() in ("a", "b")


def test_frequencies_follow_fractional_weights():
    rng = random.Random(11)
    runs = 20000
    counts = Counter()
    for _ in range(runs):
        sampler = ReservoirSampler(rng)
        sampler.extend([("light", 0.001), ("mid", 0.5), ("heavy", 1.499)])
        counts[sampler.get_result()] += 1
    assert counts["heavy"] / runs == pytest.approx(0.7495, abs=0.02)
    assert counts["mid"] / runs == pytest.approx(0.25, abs=0.02)
