"""
Song catalog endpoints.

Handlers only check the request, call the store and shape the response.
Store outcomes travel as catalog errors and are turned into status codes
by the handlers registered in ``core.errors``.
"""
from typing import List
import logging
from fastapi import APIRouter, Depends, status
from ...core.database import DatabaseManager, get_db
from ...models.models import SongIn, SongRead, MessageResponse, ErrorResponse
from ...services.song_store import SongStore, validate_song_fields

router = APIRouter()
logger = logging.getLogger(__name__)

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Song not found"}}
INVALID = {400: {"model": ErrorResponse, "description": "Title and artist are required"}}

def get_song_store(db: DatabaseManager = Depends(get_db)) -> SongStore:
    return SongStore(db)

@router.get("", response_model=List[SongRead])
async def list_songs(store: SongStore = Depends(get_song_store)):
    """
    Get every song ordered by id
    """
    return await store.list_all()

@router.get("/{song_id}", response_model=SongRead, responses=NOT_FOUND)
async def get_song(song_id: str, store: SongStore = Depends(get_song_store)):
    """
    Get a specific song by ID
    """
    return await store.get_by_id(song_id)

@router.post("", response_model=SongRead, status_code=status.HTTP_201_CREATED, responses=INVALID)
async def create_song(song: SongIn, store: SongStore = Depends(get_song_store)):
    """
    Create a new song
    """
    validate_song_fields(song.title, song.artist)
    return await store.create(song.title, song.artist, song.lyrics)

@router.put("/{song_id}", response_model=SongRead, responses={**INVALID, **NOT_FOUND})
async def update_song(song_id: str, song: SongIn, store: SongStore = Depends(get_song_store)):
    """
    Replace the title, artist and lyrics of a song
    """
    validate_song_fields(song.title, song.artist)
    return await store.update(song_id, song.title, song.artist, song.lyrics)

@router.delete("/{song_id}", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_song(song_id: str, store: SongStore = Depends(get_song_store)):
    """
    Delete a song
    """
    await store.delete(song_id)
    return {"message": "Song deleted successfully"}
