import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


class UniformShuffler:
    """
    Pure Domain Logic.
    Uniform (Fisher-Yates) permutation driven by an injectable generator,
    so seeded runs are reproducible and no global random state is touched.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def shuffle(self, items: Sequence[T]) -> list[T]:
        result = list(items)
        self.rng.shuffle(result)
        return result
