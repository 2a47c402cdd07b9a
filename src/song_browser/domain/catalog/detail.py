"""
Song detail and table-row assembly.

Merges a song's chart performance, popularity stats, teaching metadata,
classified genres/tags and resolved learning materials into the structures
the renderers and the API consume.
"""

from typing import Any

from song_browser.core.config import MaterialsConfig
from song_browser.domain.materials.resolver import song_materials

from .classifier import classify_song_terms
from .filters import chart_status
from .models import PopularityMetric, Song, SongDetail
from .normalize import display_value, flag, normalize_terms, number, string_list, text
from .status import normalize_status

SPOTIFY_TRACK_URL = "https://open.spotify.com/track/{track_id}"

# Values at which a popularity bar is drawn full width
LASTFM_PLAYS_FULL_SCALE = 100_000
LASTFM_LISTENERS_FULL_SCALE = 50_000

# (label, song field) pairs shown in the overview section, in display order
OVERVIEW_FIELDS = (
    ("Original Key", "originalKey"),
    ("SOU Keys", "souKeys"),
    ("Mode", "mode"),
    ("SOU Level", "level"),
    ("Time Signature", "timeSignature"),
    ("BPM", "bpm"),
    ("Tempo", "tempoLabel"),
    ("Number of Chords", "numChords"),
    ("Chords", "chords"),
    ("Strum Style", "strumStyle"),
    ("Fingerpicking Style", "fingerpickingStyle"),
)

CREDIT_FIELDS = (
    ("Words & Music", "wordsAndMusic"),
    ("Publisher", "publisher"),
)


def _field_text(song: Song, field: str) -> str:
    value = song.get(field)
    if isinstance(value, (list, tuple)):
        return ", ".join(string_list(value))
    if not value:
        return ""
    return display_value(value)


def _with_source(song: Song, field: str, source_field: str) -> str:
    value = _field_text(song, field)
    source = text(song.get(source_field))
    if value and source:
        return f"{value} ({source})"
    return value


def _percent(value: float, full_scale: float) -> float:
    return max(0.0, min(100.0, value / full_scale * 100))


def _badges(song: Song) -> list[str]:
    badges = []
    tier = text(song.get("popularityTier"))
    if tier:
        badges.append(f"{tier} Popularity")
    if flag(song.get("top10")):
        badges.append("Top 10")
    elif flag(song.get("top40")):
        badges.append("Top 40")

    peak = chart_status(song).peak
    if peak is not None and peak > 0:
        badges.append(f"Peak #{display_value(peak)}")
    return badges


def _links(song: Song) -> dict[str, str]:
    links = {}
    discogs_url = text(song.get("discogsUrl"))
    if discogs_url:
        links["Discogs"] = discogs_url

    track_id = display_value(song.get("spotifyTrackId"))
    if track_id:
        links["Spotify Track"] = SPOTIFY_TRACK_URL.format(track_id=track_id)

    # Empty URL marks YouTube as pending
    links["YouTube"] = text(song.get("youtubeUrl"))
    return links


def _chart_achievements(song: Song) -> list[str]:
    achievements = []
    if flag(song.get("top10")):
        achievements.append("Top 10 Hit")
    elif flag(song.get("top40")):
        achievements.append("Top 40 Hit")

    peak = chart_status(song).peak
    if peak is not None and peak > 0:
        achievements.append(f"Peak Position: #{display_value(peak)}")
    return achievements


def _popularity(song: Song) -> list[PopularityMetric]:
    metrics = []

    plays = number(song.get("lastfmPlays"))
    if plays:
        metrics.append(
            PopularityMetric("Last.fm Plays", plays, _percent(plays, LASTFM_PLAYS_FULL_SCALE))
        )

    listeners = number(song.get("lastfmListeners"))
    if listeners:
        metrics.append(
            PopularityMetric(
                "Last.fm Listeners",
                listeners,
                _percent(listeners, LASTFM_LISTENERS_FULL_SCALE),
            )
        )

    spotify = number(song.get("spotifyPopularity"))
    if spotify:
        metrics.append(PopularityMetric("Spotify Popularity", spotify, _percent(spotify, 100)))

    return metrics


def _has_popularity(song: Song) -> bool:
    return any(
        bool(song.get(field))
        for field in (
            "lastfmPlays",
            "lastfmListeners",
            "spotifyPopularity",
            "chartPeak",
            "top10",
            "top40",
        )
    )


def build_song_detail(song: Song, materials_config: MaterialsConfig) -> SongDetail:
    """Assemble the full detail view for one song.

    Args:
        song: Song record from the collection
        materials_config: Where the materials server lives

    Returns:
        SongDetail with every section populated from whatever fields the song has
    """
    terms = classify_song_terms(song)
    extra_tags = [text(song.get(field)).strip() for field in ("season", "era")]
    tags = terms.tags + [tag for tag in extra_tags if tag]

    info = {"Year": _field_text(song, "year")}
    release_date = _with_source(song, "releaseDate", "releaseDateSource")
    if release_date:
        info["Release Date"] = release_date
    songwriters = _with_source(song, "songwriters", "songwritersSource")
    if songwriters:
        info["Written by"] = songwriters

    overview = {}
    for label, field in OVERVIEW_FIELDS:
        value = _field_text(song, field)
        if value:
            overview[label] = value

    credits = {}
    for label, field in CREDIT_FIELDS:
        value = _field_text(song, field)
        if value:
            credits[label] = value

    tier = text(song.get("popularityTier"))

    return SongDetail(
        title=text(song.get("title")),
        artist=text(song.get("artist")),
        cover_art_url=text(song.get("coverArtUrl")),
        badges=_badges(song),
        links=_links(song),
        info=info,
        genres=terms.genres,
        tags=tags,
        overview=overview,
        teaching_notes=text(song.get("teachingNotes")),
        materials=song_materials(song, materials_config),
        wikipedia_intro=text(song.get("wikipediaIntro")),
        wikipedia_url=text(song.get("wikipediaUrl")),
        chart_achievements=_chart_achievements(song),
        popularity=_popularity(song),
        popularity_tier=tier if tier != "Unknown" else "",
        credits=credits,
        notes=text(song.get("notes")),
        has_popularity=_has_popularity(song),
    )


def summarize_song(song: Song) -> dict[str, Any]:
    """Flatten a song into the browse table's columns."""
    return {
        "id": display_value(song.get("id")),
        "title": text(song.get("title")),
        "artist": text(song.get("artist")),
        "year": display_value(song.get("year")),
        "genre": ", ".join(normalize_terms(song.get("genre"))),
        "season": text(song.get("season")),
        "mode": text(song.get("mode")),
        "key": text(song.get("originalKey")),
        "level": display_value(song.get("level")),
        "num_chords": display_value(song.get("numChords")),
        "song_sheet_status": normalize_status(song.get("songSheetStatus")),
        "tab_status": normalize_status(song.get("tabStatus")),
    }
