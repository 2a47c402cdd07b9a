"""
Song catalog domain models.

Songs stay as the loosely-typed mappings decoded from the JSON export; every
field is read through the accessors in normalize.py. The structures below are
the derived, typed views computed from them.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, NamedTuple, Optional

from song_browser.domain.materials.resolver import MaterialLink

# One record of the JSON export (title, artist, originalKey, genre, ...)
Song = Mapping[str, Any]


class FacetIndex(NamedTuple):
    """Distinct, sorted values offered as filter options."""

    keys: list[str]
    eras: list[str]
    seasons: list[str]
    genres: list[str]


class ClassifiedTerms(NamedTuple):
    """Genre/tag terms split into canonical genres and descriptive tags."""

    genres: list[str]
    tags: list[str]


class ChartStatus(NamedTuple):
    """Chart performance derived from chartPeak, top10 and top40."""

    peak: Optional[float]  # None unless chartPeak is a number
    is_top10: bool
    is_top40: bool
    charted: bool


@dataclass(frozen=True)
class PopularityMetric:
    """A popularity figure plus the width of its display bar (0-100)."""

    label: str
    value: float
    percent: float


@dataclass(frozen=True)
class SongDetail:
    """Everything the detail view shows for one song."""

    title: str
    artist: str
    cover_art_url: str = ""
    badges: list[str] = field(default_factory=list)
    links: dict[str, str] = field(default_factory=dict)  # label -> url ("" = pending)
    info: dict[str, str] = field(default_factory=dict)
    genres: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    overview: dict[str, str] = field(default_factory=dict)
    teaching_notes: str = ""
    materials: list[MaterialLink] = field(default_factory=list)
    wikipedia_intro: str = ""
    wikipedia_url: str = ""
    chart_achievements: list[str] = field(default_factory=list)
    popularity: list[PopularityMetric] = field(default_factory=list)
    popularity_tier: str = ""
    credits: dict[str, str] = field(default_factory=dict)
    notes: str = ""
    has_popularity: bool = False

    @property
    def has_materials(self) -> bool:
        return bool(self.materials)
