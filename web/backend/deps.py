from functools import lru_cache
from pathlib import Path

from fastapi import Depends, Request

from song_browser.core.config import Config
from song_browser.domain.catalog import Song, load_songs


def get_config(request: Request) -> Config:
    """FastAPI dependency for the configuration the app was built with."""
    return request.app.state.config


@lru_cache(maxsize=4)
def _load_collection(data_path: str) -> tuple[Song, ...]:
    # Loaded once per path for the life of the process
    return tuple(load_songs(Path(data_path)))


def get_songs(config: Config = Depends(get_config)) -> list[Song]:
    """FastAPI dependency for the song collection."""
    return list(_load_collection(str(config.catalog.resolved_data_path())))


def clear_song_cache() -> None:
    """Forget loaded collections (tests swap data files this way)."""
    _load_collection.cache_clear()
