from pydantic import BaseModel, Field

from src.config import ShuffleConfig


# --- Errors ---
class InvalidWeightError(ValueError):
    """A weight function produced a negative or non-integer weight."""


class CatalogError(Exception):
    """The track catalog could not be read or is malformed."""


# --- Entities ---
class Track(BaseModel):
    id: int
    title: str = ""
    album: str = ""
    rating: int = Field(default=0, ge=0, le=ShuffleConfig.EXCLUDED_RATING)
    playcount: int = Field(default=0, ge=0)
    lastplay: int = 0  # Mac timestamp, 0 = never played

    # Derived per run by the WeightCalculator
    recency_rank: int | None = None
    weight: int | None = None

    @property
    def is_excluded(self) -> bool:
        return self.rating == ShuffleConfig.EXCLUDED_RATING

    @property
    def never_played(self) -> bool:
        return self.lastplay == 0
