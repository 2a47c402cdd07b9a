"""Pytest configuration for backend tests.

Builds an app per test around a temporary materials directory and song
collection, so no test touches the user's configuration.
"""

import json
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to path so the web package imports
project_root = Path(__file__).parent.parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from song_browser.core.config import CatalogConfig, Config, MaterialsConfig, WebConfig  # noqa: E402
from web.backend.deps import clear_song_cache  # noqa: E402
from web.backend.main import create_app  # noqa: E402

ANCHOR = "Song Sheets PDF ONLY - School of Uke"

SONGS = [
    {
        "id": 1,
        "title": "7 Days",
        "artist": "Craig David",
        "songwriters": "Craig David, Mark Hill",
        "year": 2000,
        "originalKey": "Em",
        "mode": "minor",
        "era": "2000s",
        "season": "Summer",
        "genre": "Pop, British",
        "tags": ["male vocalists"],
        "level": 2,
        "numChords": 4,
        "chartPeak": 1,
        "top10": True,
        "top40": True,
        "lastfmPlays": 250000,
        "songSheetPath": f"/Users/tutor/{ANCHOR}/7 Days/7 Days Key Em.pdf",
        "melodyTabPath": f"/Users/tutor/{ANCHOR}/7 Days/7 Days Key Em TAB.pdf",
        "songSheetStatus": "Yes",
        "tabStatus": "wip",
    },
    {
        "id": 2,
        "title": "Riptide",
        "artist": "Vance Joy",
        "originalKey": "Am, C",
        "mode": "major",
        "era": "2010s",
        "season": "Summer",
        "genre": ["Indie", "Folk"],
        "level": 1,
        "chartPeak": 30,
    },
    {
        "id": 3,
        "title": "Jingle Bell Rock",
        "artist": "Bobby Helms",
        "originalKey": "D",
        "mode": "major",
        "era": "1950s",
        "season": "Winter",
        "genre": "Rock",
        "level": 3,
    },
]


@pytest.fixture
def materials_dir(tmp_path):
    """Materials root holding one song sheet."""
    root = tmp_path / "materials"
    song_dir = root / "7 Days"
    song_dir.mkdir(parents=True)
    (song_dir / "7 Days Key Em.pdf").write_bytes(b"%PDF-1.4 fake song sheet")
    return root


@pytest.fixture
def config(tmp_path, materials_dir):
    data_path = tmp_path / "songs.json"
    data_path.write_text(json.dumps(SONGS), encoding="utf-8")
    return Config(
        catalog=CatalogConfig(data_path=str(data_path)),
        materials=MaterialsConfig(root_dir=str(materials_dir)),
        web=WebConfig(allowed_origins=["http://localhost:3000"]),
    )


@pytest.fixture
def client(config):
    clear_song_cache()
    app = create_app(config)
    with TestClient(app) as test_client:
        yield test_client
    clear_song_cache()
