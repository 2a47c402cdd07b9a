"""
Song collection loading.

The collection is a single JSON array exported by the enrichment pipeline.
Anything that is not a readable JSON array degrades to an empty collection.
"""

import json
from pathlib import Path
from typing import Any

from loguru import logger

from .models import Song


def parse_songs(data: Any) -> list[Song]:
    """Keep the object elements of a decoded JSON array, in order."""
    if not isinstance(data, list):
        logger.warning(
            f"Song collection is not a JSON array (got {type(data).__name__}); using empty collection"
        )
        return []

    songs = [item for item in data if isinstance(item, dict)]
    dropped = len(data) - len(songs)
    if dropped:
        logger.debug(f"Dropped {dropped} non-object entries from song collection")
    return songs


def load_songs(path: Path) -> list[Song]:
    """Load the song collection from a JSON file.

    Args:
        path: Path to the JSON export

    Returns:
        List of song records in file order (empty if the file is missing or malformed)
    """
    if not path.exists():
        logger.warning(f"Song collection not found: {path}")
        return []

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning(f"Could not read song collection {path}: {e}")
        return []

    songs = parse_songs(data)
    logger.info(f"Loaded {len(songs)} songs from {path}")
    return songs


def find_song(songs: list[Song], song_id: str) -> Song | None:
    """Find a song by its id, compared as text so 7 and "7" are the same id."""
    for song in songs:
        raw_id = song.get("id")
        if raw_id is not None and str(raw_id) == song_id:
            return song
    return None
