"""Persistence for the song catalog.

``SongStore`` is the only reader and writer of the ``songs`` table. Each
operation opens its own session from the injected ``DatabaseManager``, so a
connection is held only for the duration of one call and is returned to the
pool on every exit path. Mutations run inside ``session.begin()`` and are
committed before the method returns.

Outcomes other than success are raised as the catalog errors from
``core.exceptions``: ``ValidationError`` for a blank title or artist,
``NotFoundError`` for an unknown or malformed id, and ``StorageError`` for
anything the database itself rejects.
"""

import logging
import re
from typing import Any, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError

from ..core.database import DatabaseManager
from ..core.exceptions import NotFoundError, StorageError, ValidationError
from ..models.models import Song, SongRead

logger = logging.getLogger(__name__)

# Largest value an INTEGER primary key column can hold
MAX_SONG_ID = 2_147_483_647

# Plain ASCII digits without a leading zero, so each id has one spelling
SONG_ID_PATTERN = re.compile(r"[1-9][0-9]*")


def is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def parse_song_id(song_id: Any) -> int:
    """Coerce an identifier token to a song id.

    Anything that is not a positive integer can never name a stored song, so
    it is reported as not found instead of reaching the database.
    """
    if isinstance(song_id, bool):
        raise NotFoundError()
    if isinstance(song_id, int):
        value = song_id
    elif isinstance(song_id, str) and SONG_ID_PATTERN.fullmatch(song_id):
        value = int(song_id)
    else:
        raise NotFoundError()
    if value < 1 or value > MAX_SONG_ID:
        raise NotFoundError()
    return value


def validate_song_fields(title: Any, artist: Any) -> None:
    if is_blank(title) or is_blank(artist):
        raise ValidationError()


class SongStore:
    def __init__(self, db: DatabaseManager):
        self.db = db

    async def list_all(self) -> List[SongRead]:
        """Return every song ordered by id."""
        try:
            async with self.db.SessionLocal() as session:
                result = await session.execute(select(Song).order_by(Song.id))
                return [SongRead.model_validate(song) for song in result.scalars().all()]
        except SQLAlchemyError as e:
            raise self._storage_error("list songs", e) from e

    async def get_by_id(self, song_id: Any) -> SongRead:
        song_id = parse_song_id(song_id)
        try:
            async with self.db.SessionLocal() as session:
                song = await session.get(Song, song_id)
        except SQLAlchemyError as e:
            raise self._storage_error("get song", e) from e
        if song is None:
            raise NotFoundError()
        return SongRead.model_validate(song)

    async def create(self, title: str, artist: str, lyrics: Optional[str] = None) -> SongRead:
        validate_song_fields(title, artist)
        try:
            async with self.db.SessionLocal() as session:
                async with session.begin():
                    song = Song(title=title, artist=artist, lyrics=lyrics)
                    session.add(song)
                    await session.flush()
                    created = SongRead.model_validate(song)
        except SQLAlchemyError as e:
            raise self._storage_error("create song", e) from e
        logger.info(f"Created song {created.id}")
        return created

    async def update(
        self,
        song_id: Any,
        title: str,
        artist: str,
        lyrics: Optional[str] = None
    ) -> SongRead:
        """Replace title, artist and lyrics of a song in one statement."""
        validate_song_fields(title, artist)
        song_id = parse_song_id(song_id)
        statement = (
            update(Song)
            .where(Song.id == song_id)
            .values(title=title, artist=artist, lyrics=lyrics)
            .returning(Song.id, Song.title, Song.artist, Song.lyrics)
        )
        try:
            async with self.db.SessionLocal() as session:
                async with session.begin():
                    row = (await session.execute(statement)).mappings().first()
        except SQLAlchemyError as e:
            raise self._storage_error("update song", e) from e
        if row is None:
            raise NotFoundError()
        logger.info(f"Updated song {song_id}")
        return SongRead(**dict(row))

    async def delete(self, song_id: Any) -> None:
        song_id = parse_song_id(song_id)
        statement = delete(Song).where(Song.id == song_id).returning(Song.id)
        try:
            async with self.db.SessionLocal() as session:
                async with session.begin():
                    deleted = (await session.execute(statement)).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._storage_error("delete song", e) from e
        if deleted is None:
            raise NotFoundError()
        logger.info(f"Deleted song {song_id}")

    @staticmethod
    def _storage_error(operation: str, error: Exception) -> StorageError:
        logger.error(f"Database error during {operation}: {str(error)}")
        return StorageError()
