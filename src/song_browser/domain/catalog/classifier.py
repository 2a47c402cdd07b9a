"""Genre/tag term classification.

The source data mixes real genres ("Pop", "Soul") with descriptive tags
("British", "male vocalists", "2000s") in both the genre and tags fields.
classify_terms splits them apart with a best-effort heuristic over fixed
vocabularies. It is not authoritative: unknown single words fall back to
genres and unknown phrases fall back to tags.

Rules, first match wins (all comparisons case-insensitive):
    1. equals or contains the artist name        -> tag
    2. in the genre vocabulary                   -> genre
    3. contains a genre vocabulary entry         -> genre
    4. in the tag vocabulary                     -> tag
    5. mentions vocalist(s) / singer(s)          -> tag
    6. looks like a decade (1990s, 90s)          -> tag
    7. contains a nationality adjective          -> tag
    8. multi-word                                -> tag
    9. otherwise                                 -> genre
"""

from typing import Any, Iterable

from .models import ClassifiedTerms
from .normalize import normalize_terms, text
from .vocabulary import (
    DECADE_PATTERN,
    GENRE_VOCABULARY,
    NATIONALITY_PATTERN,
    TAG_VOCABULARY,
    VOCALIST_PATTERN,
)

GENRE = "genre"
TAG = "tag"


def flatten_terms(terms: Iterable[Any]) -> list[str]:
    """Split each term on commas and keep the trimmed, non-empty pieces."""
    flat = []
    for term in terms:
        flat.extend(normalize_terms(text(term)))
    return flat


def classify_term(term: str, artist: str = "") -> str:
    """Classify a single trimmed term as GENRE or TAG."""
    lower = term.lower()
    artist_lower = artist.strip().lower()

    if artist_lower and artist_lower in lower:
        return TAG
    if lower in GENRE_VOCABULARY:
        return GENRE
    if any(genre in lower for genre in GENRE_VOCABULARY):
        return GENRE
    if lower in TAG_VOCABULARY:
        return TAG
    if VOCALIST_PATTERN.search(lower):
        return TAG
    if DECADE_PATTERN.search(lower):
        return TAG
    if NATIONALITY_PATTERN.search(lower):
        return TAG
    if " " in lower:
        return TAG
    return GENRE


def _unique_preserving_order(terms: list[str]) -> list[str]:
    """Drop case-insensitive duplicates, keeping the first spelling seen."""
    seen = set()
    unique = []
    for term in terms:
        key = term.lower()
        if key not in seen:
            seen.add(key)
            unique.append(term)
    return unique


def classify_terms(terms: Iterable[Any], artist: Any = "") -> ClassifiedTerms:
    """Partition genre/tag terms into genres and descriptive tags.

    Args:
        terms: Mixed terms; each may hold several comma-separated sub-terms
        artist: The owning song's artist, whose name never counts as a genre

    Returns:
        ClassifiedTerms with each list de-duplicated case-insensitively in first-seen order

    Example:
        classify_terms(["Pop, British"], "Craig David")
        -> ClassifiedTerms(genres=["Pop"], tags=["British"])
    """
    artist_name = text(artist)
    genres = []
    tags = []

    for term in flatten_terms(terms):
        if classify_term(term, artist_name) == GENRE:
            genres.append(term)
        else:
            tags.append(term)

    return ClassifiedTerms(
        genres=_unique_preserving_order(genres),
        tags=_unique_preserving_order(tags),
    )


def classify_song_terms(song: Any) -> ClassifiedTerms:
    """Classify a song's combined genre and tags fields against its artist."""
    combined = normalize_terms(song.get("genre")) + normalize_terms(song.get("tags"))
    return classify_terms(combined, song.get("artist"))
