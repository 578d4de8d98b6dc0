"""
Viewer state and the fetch-and-replace cycle run on every poll.

The state only ever holds the last list snapshot the API returned; song
details are read from that snapshot rather than fetched separately.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .api import CatalogClient, CatalogClientError

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load songs. Please try again later."


@dataclass
class CatalogState:
    songs: List[Dict[str, Any]] = field(default_factory=list)
    loading: bool = True
    error: Optional[str] = None
    selected_id: Optional[int] = None
    last_updated: Optional[datetime] = None

    @property
    def selected_song(self) -> Optional[Dict[str, Any]]:
        if self.selected_id is None:
            return None
        for song in self.songs:
            if song.get("id") == self.selected_id:
                return song
        return None


def refresh(state: CatalogState, client: CatalogClient) -> bool:
    """Fetch the song list and replace the snapshot held by ``state``.

    On failure the previous songs are kept and ``error`` is set. Returns
    whether the fetch succeeded.
    """
    try:
        songs = client.list_songs()
    except CatalogClientError as e:
        logger.error(f"Error fetching songs: {e}")
        state.error = LOAD_ERROR_MESSAGE
        return False
    finally:
        state.loading = False

    state.songs = songs
    state.error = None
    state.last_updated = datetime.now()
    if state.selected_id is not None and state.selected_song is None:
        # the open song was deleted since the last poll
        state.selected_id = None
    return True


def retry(state: CatalogState) -> None:
    state.error = None
    state.loading = True


def select(state: CatalogState, song_id: int) -> None:
    state.selected_id = song_id


def close_detail(state: CatalogState) -> None:
    state.selected_id = None
