from collections.abc import Callable, Sequence
from typing import TypeVar

from src.runthrough.domain.models import InvalidWeightError
from src.runthrough.domain.shuffler import UniformShuffler

T = TypeVar("T")


class WeightedSelector:
    """
    Pure Domain Logic.
    Weighted selection without replacement: at every step the next item is
    drawn from the remaining pool with probability proportional to its
    weight. Items with weight 0 can never win a draw, so they always end up
    behind every positive-weight item, in random relative order.

    The in-place scan is O(n^2).
    """

    def __init__(self, shuffler: UniformShuffler) -> None:
        self.shuffler = shuffler

    @staticmethod
    def _checked_weight(item: object, weight: object) -> int:
        # bool is an int subclass but never a meaningful weight
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise InvalidWeightError(
                f"Weight for {item!r} must be an integer, got {weight!r}"
            )
        if weight < 0:
            raise InvalidWeightError(f"Negative weight {weight} for {item!r}")
        return weight

    def select(self, weight_fn: Callable[[T], int], items: Sequence[T]) -> list[T]:
        # Pre-shuffle so the result never depends on the input order,
        # which is all that orders the zero-weight tail.
        values = self.shuffler.shuffle(items)
        weights = [self._checked_weight(v, weight_fn(v)) for v in values]

        rng = self.shuffler.rng
        last = len(values) - 1
        total = sum(weights)
        start = 0

        # The final remaining item is placed by elimination.
        while start < last:
            if total == 0:
                # Only zero weights remain; keep their shuffled order.
                break

            target = rng.randrange(total)
            i = start
            while weights[i] <= target and i < last:
                target -= weights[i]
                i += 1

            # Either weights[i] > target, or i is the last index and wins by default.
            values[start], values[i] = values[i], values[start]
            weights[start], weights[i] = weights[i], weights[start]
            total -= weights[start]
            start += 1

        return values
