import pytest
from sqlalchemy.exc import OperationalError
from lyrics_catalog.core.exceptions import NotFoundError, StorageError, ValidationError
from lyrics_catalog.services.song_store import SongStore, parse_song_id

async def test_create_then_get(store, test_song_data):
    """A created song can be read back with the same fields."""
    song = await store.create(**test_song_data)

    assert song.id is not None
    fetched = await store.get_by_id(song.id)
    assert fetched.title == test_song_data["title"]
    assert fetched.artist == test_song_data["artist"]
    assert fetched.lyrics == test_song_data["lyrics"]

async def test_create_without_lyrics(store):
    song = await store.create("Yesterday", "The Beatles")

    fetched = await store.get_by_id(song.id)
    assert fetched.lyrics is None

async def test_list_all_empty(store):
    assert await store.list_all() == []

async def test_list_all_ordered_by_id(store):
    first = await store.create("B Song", "Artist")
    second = await store.create("A Song", "Artist")
    third = await store.create("C Song", "Artist")

    songs = await store.list_all()
    assert [song.id for song in songs] == [first.id, second.id, third.id]

async def test_new_id_absent_before_and_present_once_after(store):
    await store.create("Existing", "Artist")
    before = await store.list_all()

    song = await store.create("Fresh", "Artist")

    assert song.id not in [s.id for s in before]
    after = await store.list_all()
    assert [s.id for s in after].count(song.id) == 1
    assert all(song.id > s.id for s in before)

@pytest.mark.parametrize("title,artist", [
    ("", "John Lennon"),
    ("Imagine", ""),
    ("   ", "John Lennon"),
    (None, "John Lennon"),
    ("Imagine", None),
])
async def test_create_rejects_blank_fields(store, title, artist):
    """Blank title or artist is a validation error and writes nothing."""
    with pytest.raises(ValidationError):
        await store.create(title, artist)

    assert await store.list_all() == []

async def test_update_replaces_all_fields(store):
    song = await store.create("Imagine", "John Lennon", "old lyrics")

    updated = await store.update(song.id, "Imagine (Remastered)", "Lennon", "new lyrics")

    assert updated.id == song.id
    fetched = await store.get_by_id(song.id)
    assert (fetched.title, fetched.artist, fetched.lyrics) == ("Imagine (Remastered)", "Lennon", "new lyrics")

async def test_update_without_lyrics_clears_them(store, test_song_data):
    song = await store.create(**test_song_data)

    await store.update(song.id, song.title, song.artist)

    assert (await store.get_by_id(song.id)).lyrics is None

async def test_update_validates_before_lookup(store):
    with pytest.raises(ValidationError):
        await store.update(12345, "", "Artist")

async def test_update_keeps_song_on_validation_error(store, test_song_data):
    song = await store.create(**test_song_data)

    with pytest.raises(ValidationError):
        await store.update(song.id, "New Title", "  ")

    assert (await store.get_by_id(song.id)).title == test_song_data["title"]

async def test_delete_then_get_and_delete_again(store, test_song_data):
    song = await store.create(**test_song_data)

    await store.delete(song.id)

    with pytest.raises(NotFoundError):
        await store.get_by_id(song.id)
    with pytest.raises(NotFoundError):
        await store.delete(song.id)
    with pytest.raises(NotFoundError):
        await store.update(song.id, "Title", "Artist")

async def test_deleted_id_is_not_reused(store):
    song = await store.create("Temporary", "Artist")
    await store.delete(song.id)

    replacement = await store.create("Replacement", "Artist")

    assert replacement.id > song.id

@pytest.mark.parametrize("song_id", [999, "999", "abc", "1.5", 0, -3, "", None, 2**40])
async def test_unknown_or_malformed_ids_are_not_found(store, song_id):
    with pytest.raises(NotFoundError):
        await store.get_by_id(song_id)
    with pytest.raises(NotFoundError):
        await store.update(song_id, "Title", "Artist")
    with pytest.raises(NotFoundError):
        await store.delete(song_id)

def test_parse_song_id():
    assert parse_song_id("42") == 42
    assert parse_song_id(7) == 7

@pytest.mark.parametrize("song_id", [True, " 7 ", "1_0", "\u0661\u0660", "+10", "010", "1e1", 10.0])
def test_parse_song_id_rejects_other_spellings(song_id):
    with pytest.raises(NotFoundError):
        parse_song_id(song_id)

class FailingSession:
    """Stands in for a session factory whose database is unreachable."""
    def __call__(self):
        raise OperationalError("SELECT 1", {}, ConnectionRefusedError("connection refused"))

@pytest.mark.parametrize("operation,args", [
    ("list_all", ()),
    ("get_by_id", (1,)),
    ("create", ("Title", "Artist")),
    ("update", (1, "Title", "Artist")),
    ("delete", (1,)),
])
async def test_storage_failures_raise_storage_error(test_db, operation, args):
    test_db.SessionLocal = FailingSession()
    store = SongStore(test_db)

    with pytest.raises(StorageError) as exc_info:
        await getattr(store, operation)(*args)

    assert exc_info.value.message == "Internal server error"
    assert isinstance(exc_info.value.__cause__, OperationalError)
