from datetime import datetime, timezone

from src.config import ShuffleConfig
from src.runthrough.domain.models import Track


def ts_to_str(ts: int) -> str:
    """Mac (HFS, 1904-based) timestamp to 'YYYY-MM-DD HH:MM:SS'; 0 becomes '--'."""
    if ts == 0:
        return ShuffleConfig.NEVER_PLAYED_LABEL
    unix_ts = ts - ShuffleConfig.MAC_EPOCH_OFFSET
    return datetime.fromtimestamp(unix_ts, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


def _clip(text: str) -> str:
    return text[: ShuffleConfig.TEXT_COLUMN_WIDTH]


def format_track_row(track: Track) -> str:
    # Fits 80 columns: id, title, album, last played, rating, playcount
    return (
        f"{track.id!s:<4} "
        f"{_clip(track.title):<20}   "
        f"{_clip(track.album):<20}   "
        f"{ts_to_str(track.lastplay):<19}   "
        f"{track.rating!s:<3} "
        f"{track.playcount}"
    )


def track_table(tracks: list[Track]) -> list[dict[str, object]]:
    """Rows for the Streamlit catalog table."""
    return [
        {
            "id": t.id,
            "title": t.title,
            "album": t.album,
            "last played": ts_to_str(t.lastplay),
            "rating": t.rating,
            "plays": t.playcount,
            "recency rank": t.recency_rank,
            "weight": t.weight,
        }
        for t in tracks
    ]
