"""
Facet index building.

Derives the filter options (keys, eras, seasons, genres) from the song
collection, plus the fixed option tables for level, mode and chart tier.
"""

import unicodedata
from typing import Any, Iterable

from .models import FacetIndex, Song
from .normalize import normalize_terms, split_keys, text

# Sentinel for an unset filter control
ALL = "all"

LEVEL_OPTIONS = (1, 2, 3, 4, 5)

MODE_OPTIONS = {
    "major": "Major only",
    "minor": "Minor only",
}

CHART_TIER_OPTIONS = {
    "number1": "No.1 Hits",
    "top10": "Top 10",
    "top40": "Top 40",
    "charted": "Charted (any)",
    "never": "Never charted",
}


def locale_sort_key(value: str) -> tuple[str, str, str]:
    """Approximate a locale-aware collation.

    Accents and case are ignored at the first level, accents break ties next,
    and lowercase sorts before uppercase last ("pop" < "Pop" < "Punk").
    """
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), value.casefold(), value.swapcase())


def _distinct_trimmed(songs: Iterable[Song], field: str) -> list[str]:
    values = {text(song.get(field)).strip() for song in songs}
    values.discard("")
    return sorted(values)


def collect_keys(songs: Iterable[Song]) -> list[str]:
    """Distinct original keys across the collection, sorted by code point."""
    keys: set[str] = set()
    for song in songs:
        keys.update(split_keys(song.get("originalKey")))
    return sorted(keys)


def collect_eras(songs: Iterable[Song]) -> list[str]:
    return _distinct_trimmed(songs, "era")


def collect_seasons(songs: Iterable[Song]) -> list[str]:
    return _distinct_trimmed(songs, "season")


def collect_genres(songs: Iterable[Song]) -> list[str]:
    """Distinct genres (original casing) across the collection, locale-sorted."""
    genres: set[str] = set()
    for song in songs:
        genres.update(normalize_terms(song.get("genre")))
    return sorted(genres, key=locale_sort_key)


def build_facets(songs: list[Song]) -> FacetIndex:
    """Build all facet option lists from the collection.

    Pure function of the collection; call it again whenever the collection changes.
    """
    return FacetIndex(
        keys=collect_keys(songs),
        eras=collect_eras(songs),
        seasons=collect_seasons(songs),
        genres=collect_genres(songs),
    )


def build_filter_options(facets: FacetIndex) -> dict[str, Any]:
    """Combine the discovered facets with the fixed option tables."""
    return {
        "levels": list(LEVEL_OPTIONS),
        "keys": facets.keys,
        "modes": dict(MODE_OPTIONS),
        "eras": facets.eras,
        "seasons": facets.seasons,
        "genres": facets.genres,
        "chart_tiers": dict(CHART_TIER_OPTIONS),
    }
