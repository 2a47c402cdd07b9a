from pydantic import BaseModel
from typing import Optional


class HealthResponse(BaseModel):
    status: str
    materialsPath: str


class FilterOptionsResponse(BaseModel):
    levels: list[int]
    keys: list[str]
    modes: dict[str, str]
    eras: list[str]
    seasons: list[str]
    genres: list[str]
    chart_tiers: dict[str, str]


class SongSummary(BaseModel):
    id: str
    title: str
    artist: str
    year: str = ""
    genre: str = ""
    season: str = ""
    mode: str = ""
    key: str = ""
    level: str = ""
    num_chords: str = ""
    song_sheet_status: str = ""
    tab_status: str = ""


class SongListResponse(BaseModel):
    total: int  # Size of the whole collection
    count: int  # Songs matching the filters
    songs: list[SongSummary]


class MaterialLinkInfo(BaseModel):
    kind: str
    label: str
    url: Optional[str] = None  # None when the material cannot be served
    available: bool

    model_config = {"frozen": True}


class PopularityMetricInfo(BaseModel):
    label: str
    value: float
    percent: float


class SongDetailResponse(BaseModel):
    id: str
    title: str
    artist: str
    cover_art_url: str = ""
    badges: list[str] = []
    links: dict[str, str] = {}
    info: dict[str, str] = {}
    genres: list[str] = []
    tags: list[str] = []
    overview: dict[str, str] = {}
    teaching_notes: str = ""
    materials: list[MaterialLinkInfo] = []
    has_materials: bool = False
    wikipedia_intro: str = ""
    wikipedia_url: str = ""
    chart_achievements: list[str] = []
    popularity: list[PopularityMetricInfo] = []
    popularity_tier: str = ""
    has_popularity: bool = False
    credits: dict[str, str] = {}
    notes: str = ""
