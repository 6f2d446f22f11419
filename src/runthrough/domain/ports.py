from abc import ABC, abstractmethod

from src.runthrough.domain.models import Track


class ICatalogRepository(ABC):
    @abstractmethod
    def get_tracks(self) -> list[Track]:
        """
        Returns every track in the catalog with numeric fields parsed;
        missing or empty numbers come back as 0.
        """
        pass

    @abstractmethod
    def save_playlist(self, name: str, track_ids: list[int]) -> None:
        """
        Stores `track_ids` (in order) as the playlist called `name`,
        replacing an existing playlist of that name.
        """
        pass

    @abstractmethod
    def dump(self) -> str:
        pass

    @abstractmethod
    def write(self, path: str | None = None) -> str:
        """Persists the catalog (to `path` if given) and returns where it went."""
        pass
