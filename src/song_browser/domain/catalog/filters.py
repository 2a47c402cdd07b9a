"""Song filter engine.

Applies the browser's filter controls (text search plus seven facets) to the
song collection. All active filters are combined with AND logic; a control
left at "all" matches every song. Results keep collection order.

The collection is small and static, so results are recomputed from scratch on
every filter change. A large or mutable collection would want per-facet
inverted indexes intersected instead.
"""

from dataclasses import dataclass
from typing import Optional

from .facets import ALL, CHART_TIER_OPTIONS, LEVEL_OPTIONS, MODE_OPTIONS
from .models import ChartStatus, Song
from .normalize import flag, normalize_terms, number, split_keys, text

SEARCH_FIELDS = ("title", "artist", "songwriters")


@dataclass(frozen=True)
class FilterState:
    """Current value of every filter control."""

    search: str = ""
    level: str = ALL
    key: str = ALL
    mode: str = ALL
    era: str = ALL
    season: str = ALL
    genre: str = ALL
    chart: str = ALL

    @classmethod
    def from_params(
        cls,
        search: Optional[str] = None,
        level: Optional[str | int] = None,
        key: Optional[str] = None,
        mode: Optional[str] = None,
        era: Optional[str] = None,
        season: Optional[str] = None,
        genre: Optional[str] = None,
        chart: Optional[str] = None,
    ) -> "FilterState":
        """Build a state from user input, treating None as "all".

        Raises:
            ValueError: If level, mode or chart is not one of its allowed values
        """
        level_value = ALL if level is None else str(level).strip()
        if level_value != ALL and level_value not in {str(n) for n in LEVEL_OPTIONS}:
            raise ValueError(
                f"Invalid level: {level!r}. Must be 'all' or one of {list(LEVEL_OPTIONS)}"
            )

        mode_value = ALL if mode is None else mode.strip().lower()
        if mode_value != ALL and mode_value not in MODE_OPTIONS:
            raise ValueError(
                f"Invalid mode: {mode!r}. Must be 'all' or one of {list(MODE_OPTIONS)}"
            )

        chart_value = ALL if chart is None else chart.strip()
        if chart_value != ALL and chart_value not in CHART_TIER_OPTIONS:
            raise ValueError(
                f"Invalid chart tier: {chart!r}. Must be 'all' or one of {list(CHART_TIER_OPTIONS)}"
            )

        return cls(
            search=search or "",
            level=level_value,
            key=ALL if key is None else key,
            mode=mode_value,
            era=ALL if era is None else era,
            season=ALL if season is None else season,
            genre=ALL if genre is None else genre,
            chart=chart_value,
        )

    @property
    def is_empty(self) -> bool:
        """True when no control narrows the result."""
        return not self.search.strip() and all(
            value == ALL
            for value in (
                self.level,
                self.key,
                self.mode,
                self.era,
                self.season,
                self.genre,
                self.chart,
            )
        )


def chart_status(song: Song) -> ChartStatus:
    """Derive chart tiers from chartPeak and the top10/top40 flags."""
    peak = number(song.get("chartPeak"))
    has_peak = peak is not None and peak > 0
    top10 = flag(song.get("top10"))
    top40 = flag(song.get("top40"))

    return ChartStatus(
        peak=peak,
        is_top10=top10 or (has_peak and peak <= 10),
        is_top40=top40 or (has_peak and peak <= 40),
        charted=has_peak or top10 or top40,
    )


def matches_search(song: Song, query: str) -> bool:
    """Case-insensitive substring match on title, artist or songwriters."""
    query = query.strip().lower()
    if not query:
        return True
    return any(query in text(song.get(field)).lower() for field in SEARCH_FIELDS)


def matches_level(song: Song, level: str) -> bool:
    if level == ALL:
        return True
    try:
        wanted = int(str(level).strip())
    except ValueError:
        return False
    value = number(song.get("level"))
    return value is not None and value == wanted


def matches_key(song: Song, key: str) -> bool:
    if key == ALL:
        return True
    return key in split_keys(song.get("originalKey"))


def matches_mode(song: Song, mode: str) -> bool:
    if mode == ALL:
        return True
    wanted = mode.strip().lower()
    if wanted not in MODE_OPTIONS:
        return True
    return text(song.get("mode")).strip().lower() == wanted


def matches_text_facet(song: Song, field: str, value: str) -> bool:
    """Exact trimmed equality, used for era and season."""
    if value == ALL:
        return True
    return text(song.get(field)).strip() == value


def matches_genre(song: Song, genre: str) -> bool:
    if genre == ALL:
        return True
    wanted = genre.lower()
    return any(g.lower() == wanted for g in normalize_terms(song.get("genre")))


def matches_chart(song: Song, chart: str) -> bool:
    """Check the chart tier control.

    "number1" needs a numeric chartPeak of exactly 1; the top10/top40 flags
    alone never qualify a song as a number one.
    """
    if chart == ALL:
        return True

    status = chart_status(song)
    if chart == "number1":
        return status.peak == 1
    if chart == "top10":
        return status.is_top10
    if chart == "top40":
        return status.is_top40
    if chart == "charted":
        return status.charted
    if chart == "never":
        return not status.charted
    return True


def matches_filters(song: Song, state: FilterState) -> bool:
    """Check if a song passes every active filter."""
    return (
        matches_search(song, state.search)
        and matches_level(song, state.level)
        and matches_key(song, state.key)
        and matches_mode(song, state.mode)
        and matches_text_facet(song, "era", state.era)
        and matches_text_facet(song, "season", state.season)
        and matches_genre(song, state.genre)
        and matches_chart(song, state.chart)
    )


def filter_songs(songs: list[Song], state: FilterState) -> list[Song]:
    """Apply all filters (AND logic) to songs, preserving collection order.

    Args:
        songs: Full song collection
        state: Current filter controls

    Returns:
        The songs passing every active filter
    """
    if state.is_empty:
        return list(songs)
    return [song for song in songs if matches_filters(song, state)]
