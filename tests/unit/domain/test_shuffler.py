import random
from collections import Counter

from src.runthrough.domain.shuffler import UniformShuffler


def test_shuffle_returns_permutation(rng):
    items = list(range(50))

    result = UniformShuffler(rng).shuffle(items)

    assert sorted(result) == items


def test_shuffle_does_not_mutate_input(rng):
    items = [1, 2, 3, 4]

    UniformShuffler(rng).shuffle(items)

    assert items == [1, 2, 3, 4]


def test_shuffle_handles_empty_and_single():
    shuffler = UniformShuffler(random.Random(0))

    assert shuffler.shuffle([]) == []
    assert shuffler.shuffle(["only"]) == ["only"]


def test_shuffle_accepts_tuples(rng):
    result = UniformShuffler(rng).shuffle(("a", "b", "c"))

    assert isinstance(result, list)
    assert sorted(result) == ["a", "b", "c"]


def test_same_seed_same_order():
    items = list(range(20))

    first = UniformShuffler(random.Random(99)).shuffle(items)
    second = UniformShuffler(random.Random(99)).shuffle(items)

    assert first == second


def test_every_permutation_is_reachable():
    """All 6 orderings of 3 items show up with roughly equal frequency."""
    shuffler = UniformShuffler(random.Random(7))
    trials = 6000

    counts = Counter(tuple(shuffler.shuffle("abc")) for _ in range(trials))

    assert len(counts) == 6
    for count in counts.values():
        assert abs(count - trials / 6) < trials * 0.03


def test_default_generator_is_private():
    """Without an injected rng the shuffler does not use the module-level state."""
    shuffler = UniformShuffler()

    assert isinstance(shuffler.rng, random.Random)
    assert shuffler.rng is not random._inst
