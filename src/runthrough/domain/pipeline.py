"""
Functional entry points to the shuffling core.

Each call accepts an optional `random.Random`; pass a seeded one for
reproducible output. Without it a fresh, unseeded generator is used.
"""

import random
from collections.abc import Callable, Sequence
from typing import TypeVar

from src.runthrough.domain.models import Track
from src.runthrough.domain.shuffler import UniformShuffler
from src.runthrough.domain.weight_calculator import WeightCalculator
from src.runthrough.domain.weighted_selector import WeightedSelector

T = TypeVar("T")


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    return UniformShuffler(rng).shuffle(items)


def compute_weights(
    catalog: Sequence[Track], rng: random.Random | None = None
) -> list[Track]:
    return WeightCalculator(UniformShuffler(rng)).compute(catalog)


def weighted_select(
    weight_fn: Callable[[T], int],
    items: Sequence[T],
    rng: random.Random | None = None,
) -> list[T]:
    return WeightedSelector(UniformShuffler(rng)).select(weight_fn, items)


def track_weight(track: Track) -> int:
    if track.weight is None:
        raise ValueError(f"Track {track.id} has no computed weight")
    return track.weight


def ranked_tracks(
    catalog: Sequence[Track], rng: random.Random | None = None
) -> list[Track]:
    shuffler = UniformShuffler(rng)
    weighted = WeightCalculator(shuffler).compute(catalog)
    return WeightedSelector(shuffler).select(track_weight, weighted)


def ranked_playlist(
    catalog: Sequence[Track], rng: random.Random | None = None
) -> list[int]:
    """Weights `catalog` and returns the track ids in playback order."""
    return [track.id for track in ranked_tracks(catalog, rng)]
