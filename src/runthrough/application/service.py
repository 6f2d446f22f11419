import random

from src.config import ShuffleConfig
from src.runthrough.domain.models import InvalidWeightError, Track
from src.runthrough.domain.pipeline import track_weight
from src.runthrough.domain.ports import ICatalogRepository
from src.runthrough.domain.shuffler import UniformShuffler
from src.runthrough.domain.weight_calculator import WeightCalculator
from src.runthrough.domain.weighted_selector import WeightedSelector
from src.shared.telemetry import Telemetry, measure_time


class RunthroughService:
    def __init__(self, repo: ICatalogRepository, rng: random.Random | None = None):
        self.repo = repo
        self.shuffler = UniformShuffler(rng)
        self.calculator = WeightCalculator(self.shuffler)
        self.selector = WeightedSelector(self.shuffler)
        self.telemetry = Telemetry("RunthroughService")

    @property
    def repository(self) -> ICatalogRepository:
        return self.repo

    def reseed(self, seed: int | None) -> None:
        """Swaps in a new generator; None draws fresh OS entropy."""
        self.shuffler.rng = random.Random(seed)

    def weighted_tracks(self) -> list[Track]:
        """The catalog with recency ranks and weights, most recently played first."""
        return self.calculator.compute(self.repo.get_tracks())

    @measure_time("build_runthrough")
    def build_runthrough(self) -> list[Track]:
        weighted = self.weighted_tracks()
        try:
            ordered = self.selector.select(track_weight, weighted)
        except InvalidWeightError as e:
            self.telemetry.log_error("Weighted selection rejected", e)
            raise

        excluded = sum(1 for t in ordered if t.weight == 0)
        self.telemetry.log_info(
            "Runthrough Built", tracks=len(ordered), zero_weight=excluded
        )
        return ordered

    def save_runthrough(self, tracks: list[Track]) -> None:
        self.repo.save_playlist(
            ShuffleConfig.PLAYLIST_NAME, [track.id for track in tracks]
        )

    @measure_time("make_runthrough")
    def make_runthrough(self) -> list[Track]:
        tracks = self.build_runthrough()
        self.save_runthrough(tracks)
        return tracks
