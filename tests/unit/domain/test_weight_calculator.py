import random

import pytest

from src.runthrough.domain.models import Track
from src.runthrough.domain.shuffler import UniformShuffler
from src.runthrough.domain.weight_calculator import WeightCalculator


@pytest.fixture
def calculator(rng):
    return WeightCalculator(UniformShuffler(rng))


# --- Weight formula ---

def test_unrated_unplayed_single_track_gets_maximum_weight():
    track = Track(id=1, rating=0, playcount=0)

    # base 200 * (1000 * 1 // 1 + 1000 // 1)
    assert WeightCalculator.weight_for(track, recency_rank=1, catalog_size=1) == 400000


@pytest.mark.parametrize("playcount,lastplay", [(0, 0), (99, 3300000000)])
def test_excluded_rating_always_weighs_zero(playcount, lastplay):
    track = Track(id=1, rating=20, playcount=playcount, lastplay=lastplay)

    assert WeightCalculator.weight_for(track, recency_rank=5, catalog_size=5) == 0


def test_weight_uses_integer_floor_division():
    track = Track(id=1, rating=10, playcount=2)

    # recency 1000 * 1 // 3 = 333, playcount 1000 // 3 = 333
    assert WeightCalculator.weight_for(track, recency_rank=1, catalog_size=3) == 10 * 666


def test_unrated_outranks_highest_real_rating():
    unrated = Track(id=1, rating=0, playcount=4)
    top_rated = Track(id=2, rating=19, playcount=4)

    assert WeightCalculator.weight_for(unrated, 2, 4) > WeightCalculator.weight_for(top_rated, 2, 4)


def test_less_played_and_longer_unheard_weigh_more():
    fresh = Track(id=1, rating=10, playcount=0)
    worn = Track(id=2, rating=10, playcount=9)

    assert WeightCalculator.weight_for(fresh, 2, 4) > WeightCalculator.weight_for(worn, 2, 4)
    assert WeightCalculator.weight_for(fresh, 4, 4) > WeightCalculator.weight_for(fresh, 1, 4)


# --- Recency ranking ---

def test_ranks_form_permutation(calculator, sample_tracks):
    ranked = calculator.rank_by_recency(sample_tracks)

    assert sorted(t.recency_rank for t in ranked) == [1, 2, 3, 4, 5]


def test_most_recently_played_gets_rank_one(calculator, sample_tracks):
    ranked = {t.id: t.recency_rank for t in calculator.rank_by_recency(sample_tracks)}

    assert ranked[1] == 1  # lastplay 3300000000
    assert ranked[3] == 2
    assert ranked[4] == 3
    # Never-played tracks share the tail
    assert {ranked[2], ranked[5]} == {4, 5}


def test_never_played_ties_are_broken_randomly():
    tracks = [Track(id=i) for i in range(1, 9)]
    first_ranks = set()

    for seed in range(200):
        calc = WeightCalculator(UniformShuffler(random.Random(seed)))
        ranked = calc.rank_by_recency(tracks)
        first_ranks.add(next(t.recency_rank for t in ranked if t.id == 1))

    assert first_ranks == set(range(1, 9))


# --- Full computation ---

def test_compute_attaches_rank_and_weight(calculator, sample_tracks):
    weighted = calculator.compute(sample_tracks)

    assert len(weighted) == len(sample_tracks)
    for track in weighted:
        assert track.recency_rank is not None
        assert isinstance(track.weight, int)
        assert track.weight >= 0
        assert track.weight == WeightCalculator.weight_for(track, track.recency_rank, 5)


def test_compute_known_values(calculator, sample_tracks):
    weights = {t.id: t.weight for t in calculator.compute(sample_tracks)}

    # id 1: rank 1 of 5, 12 plays -> 16 * (200 + 76)
    assert weights[1] == 16 * 276
    # id 3: rating 20
    assert weights[3] == 0
    # id 4: rank 3 of 5, 40 plays -> 18 * (600 + 24)
    assert weights[4] == 18 * 624


def test_compute_leaves_input_untouched(calculator, sample_tracks):
    calculator.compute(sample_tracks)

    assert all(t.recency_rank is None and t.weight is None for t in sample_tracks)


def test_compute_empty_catalog(calculator):
    assert calculator.compute([]) == []
