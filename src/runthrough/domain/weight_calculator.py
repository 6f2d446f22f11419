from collections.abc import Sequence

from src.config import ShuffleConfig
from src.runthrough.domain.models import Track
from src.runthrough.domain.shuffler import UniformShuffler


class WeightCalculator:
    """
    Pure Domain Logic.
    Turns raw catalog records into weighted tracks.

    A track's weight grows with its rating, with how long ago it was
    last played relative to the rest of the catalog, and with how rarely
    it has been played at all. Two sentinels are part of the formula:
    rating 0 ("unrated") gets the highest base, rating 20 is never
    preferred (weight 0).
    """

    def __init__(self, shuffler: UniformShuffler) -> None:
        self.shuffler = shuffler

    def rank_by_recency(self, tracks: Sequence[Track]) -> list[Track]:
        """
        Returns copies of `tracks` with `recency_rank` set, most recently
        played first (rank 1).

        The shuffle before the sort breaks ties randomly; otherwise every
        never-played track (lastplay 0) would be ranked by catalog order.
        """
        shuffled = self.shuffler.shuffle(tracks)
        ordered = sorted(shuffled, key=lambda t: t.lastplay, reverse=True)
        return [
            track.model_copy(update={"recency_rank": position + 1})
            for position, track in enumerate(ordered)
        ]

    @staticmethod
    def weight_for(track: Track, recency_rank: int, catalog_size: int) -> int:
        if track.rating == ShuffleConfig.EXCLUDED_RATING:
            return 0

        if track.rating == ShuffleConfig.UNRATED_RATING:
            base = ShuffleConfig.UNRATED_BASE
        else:
            base = track.rating

        recency_term = ShuffleConfig.RECENCY_SCALE * recency_rank // catalog_size
        playcount_term = ShuffleConfig.PLAYCOUNT_SCALE // (track.playcount + 1)
        return base * (recency_term + playcount_term)

    def compute(self, tracks: Sequence[Track]) -> list[Track]:
        ranked = self.rank_by_recency(tracks)
        size = len(ranked)
        # ranked is in rank order, so position + 1 is the recency rank
        return [
            track.model_copy(
                update={"weight": self.weight_for(track, position + 1, size)}
            )
            for position, track in enumerate(ranked)
        ]
