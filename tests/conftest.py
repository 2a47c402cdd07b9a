"""
Pytest configuration and shared fixtures
"""

import pytest

from song_browser.core.config import MaterialsConfig

ANCHOR = "/Users/tutor/Drive/Lesson Content/Song Sheets PDF ONLY - School of Uke"


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Keep config and data lookups away from the real home directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    for name in (
        "SONG_BROWSER_DATA",
        "SONG_BROWSER_MATERIALS_ROOT",
        "SONG_BROWSER_MATERIALS_URL",
        "ALLOWED_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def materials_config() -> MaterialsConfig:
    return MaterialsConfig(
        root_dir="/srv/materials",
        base_url="http://localhost:3001",
        url_prefix="/materials",
    )


@pytest.fixture
def craig_david() -> dict:
    return {
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
        "level": 2,
        "numChords": 4,
        "chartPeak": 1,
        "top10": False,
        "top40": False,
        "songSheetPath": f"{ANCHOR}/7 Days - Craig David (2000) Key Em/7 Days - Craig David (2000) Key Em.pdf",
        "melodyTabPath": f"{ANCHOR}/7 Days - Craig David (2000) Key Em/7 Days Key Em TAB.pdf",
        "songSheetStatus": "yes",
        "tabStatus": "WIP",
    }


@pytest.fixture
def sample_songs(craig_david) -> list[dict]:
    """Small mixed collection, including malformed records."""
    return [
        craig_david,
        {
            "id": 2,
            "title": "Here Comes the Sun",
            "artist": "The Beatles",
            "songwriters": "George Harrison",
            "originalKey": "A, D",
            "mode": "Major",
            "era": " 1960s ",
            "season": "Spring",
            "genre": ["Rock", " Pop "],
            "level": 3,
            "chartPeak": 58,
            "top10": False,
            "top40": False,
        },
        {
            "id": 3,
            "title": "Riptide",
            "artist": "Vance Joy",
            "originalKey": "Am, C",
            "mode": "major",
            "era": "2010s",
            "season": "Summer",
            "genre": ["Indie", "folk"],
            "level": 1,
            "top10": True,
            "top40": True,
        },
        {
            "id": 4,
            "title": "Somewhere Over the Rainbow",
            "artist": "Israel Kamakawiwo'ole",
            "originalKey": "C",
            "mode": None,
            "era": "1990s",
            "genre": "Hawaiian",
            "level": 2,
            "chartPeak": "n/a",
            "top40": True,
        },
        {
            "id": "five",
            "title": "Untitled Draft",
            "artist": None,
            "originalKey": 7,
            "era": 1980,
            "season": None,
            "genre": {"unexpected": "shape"},
            "level": "2",
        },
    ]
