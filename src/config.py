import os
from typing import Final


class ShuffleConfig:
    # --- Database Location ---
    # GNUpod keeps its XML database on the mounted iPod itself
    DEFAULT_DB_PATH: Final[str] = "/mnt/ipod/iPod_Control/.gnupod/GNUtunesDB.xml"
    DB_PATH_ENV: Final[str] = "RUNTHROUGH_DB_PATH"

    # --- Playlist ---
    PLAYLIST_NAME: Final[str] = "Runthrough"

    # --- Weight Formula ---
    # Rating sentinels: 0 is "unrated" and 20 is "never play"
    UNRATED_RATING: Final[int] = 0
    EXCLUDED_RATING: Final[int] = 20
    UNRATED_BASE: Final[int] = 200
    RECENCY_SCALE: Final[int] = 1000
    PLAYCOUNT_SCALE: Final[int] = 1000

    # --- Timestamps ---
    # Seconds between the Mac HFS epoch (1904) and the Unix epoch (1970)
    MAC_EPOCH_OFFSET: Final[int] = 2082848400
    NEVER_PLAYED_LABEL: Final[str] = "--"

    # --- Listing Layout ---
    TEXT_COLUMN_WIDTH: Final[int] = 20

    # --- Observability ---
    METRICS_PORT = 8000
    SERVICE_NAME = "runthrough-shuffler"

    @staticmethod
    def db_path() -> str:
        """Returns the database path, honouring the RUNTHROUGH_DB_PATH override."""
        return os.getenv(ShuffleConfig.DB_PATH_ENV) or ShuffleConfig.DEFAULT_DB_PATH
