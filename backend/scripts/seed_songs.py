import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List
from lyrics_catalog.core.database import DatabaseManager
from lyrics_catalog.core.exceptions import ValidationError
from lyrics_catalog.services.song_store import SongStore

logger = logging.getLogger("seed_songs")

def load_entries(path: Path) -> List[Dict]:
    """Read a JSON array of {title, artist, lyrics} objects"""
    with open(path, encoding="utf-8") as f:
        entries = json.load(f)
    if not isinstance(entries, list):
        raise ValueError(f"{path} must contain a JSON array of songs")
    return entries

async def seed(store: SongStore, entries: List[Dict]) -> Dict[str, int]:
    """Insert every valid entry through the store, skipping invalid ones"""
    counts = {"created": 0, "skipped": 0}
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            logger.warning(f"Skipping entry {index}: not an object")
            counts["skipped"] += 1
            continue
        try:
            song = await store.create(entry.get("title"), entry.get("artist"), entry.get("lyrics"))
        except ValidationError as e:
            logger.warning(f"Skipping entry {index}: {e.message}")
            counts["skipped"] += 1
            continue
        logger.info(f"Added '{song.title}' by {song.artist} as song {song.id}")
        counts["created"] += 1
    return counts

async def main(path: Path) -> Dict[str, int]:
    db = DatabaseManager()
    try:
        await db.initialize()
        return await seed(SongStore(db), load_entries(path))
    finally:
        await db.dispose()

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )
    parser = argparse.ArgumentParser(description="Load songs from a JSON file into the catalog")
    parser.add_argument("path", type=Path, help="JSON file holding a list of songs")
    args = parser.parse_args()

    counts = asyncio.run(main(args.path))
    print(f"Created {counts['created']} songs, skipped {counts['skipped']}")
