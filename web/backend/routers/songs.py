from fastapi import APIRouter, HTTPException, Depends, Query
from loguru import logger
from typing import Literal, Optional

from ..deps import get_config, get_songs
from ..schemas import (
    FilterOptionsResponse,
    MaterialLinkInfo,
    PopularityMetricInfo,
    SongDetailResponse,
    SongListResponse,
    SongSummary,
)
from song_browser.core.config import Config
from song_browser.domain.catalog import (
    FilterState,
    Song,
    build_facets,
    build_filter_options,
    build_song_detail,
    filter_songs,
    find_song,
    summarize_song,
)

router = APIRouter()

ModeParam = Literal["all", "major", "minor"]
ChartParam = Literal["all", "number1", "top10", "top40", "charted", "never"]


@router.get("/facets", response_model=FilterOptionsResponse)
async def get_facets(songs: list[Song] = Depends(get_songs)):
    """Filter options discovered from the collection plus the fixed tables."""
    return build_filter_options(build_facets(songs))


@router.get("/songs", response_model=SongListResponse)
async def list_songs(
    search: Optional[str] = None,
    level: Optional[int] = Query(None, ge=1, le=5),
    key: Optional[str] = None,
    mode: Optional[ModeParam] = None,
    era: Optional[str] = None,
    season: Optional[str] = None,
    genre: Optional[str] = None,
    chart: Optional[ChartParam] = None,
    songs: list[Song] = Depends(get_songs),
):
    """Songs matching every given filter, in collection order."""
    state = FilterState.from_params(
        search=search,
        level=level,
        key=key,
        mode=mode,
        era=era,
        season=season,
        genre=genre,
        chart=chart,
    )
    results = filter_songs(songs, state)
    logger.debug(f"Filter matched {len(results)} of {len(songs)} songs")

    return SongListResponse(
        total=len(songs),
        count=len(results),
        songs=[SongSummary(**summarize_song(song)) for song in results],
    )


@router.get("/songs/{song_id}", response_model=SongDetailResponse)
async def get_song(
    song_id: str,
    songs: list[Song] = Depends(get_songs),
    config: Config = Depends(get_config),
):
    """Full detail view for one song."""
    song = find_song(songs, song_id)
    if song is None:
        raise HTTPException(404, "Song not found")

    detail = build_song_detail(song, config.materials)

    return SongDetailResponse(
        id=song_id,
        title=detail.title,
        artist=detail.artist,
        cover_art_url=detail.cover_art_url,
        badges=detail.badges,
        links=detail.links,
        info=detail.info,
        genres=detail.genres,
        tags=detail.tags,
        overview=detail.overview,
        teaching_notes=detail.teaching_notes,
        materials=[
            MaterialLinkInfo(
                kind=link.kind, label=link.label, url=link.url, available=link.available
            )
            for link in detail.materials
        ],
        has_materials=detail.has_materials,
        wikipedia_intro=detail.wikipedia_intro,
        wikipedia_url=detail.wikipedia_url,
        chart_achievements=detail.chart_achievements,
        popularity=[
            PopularityMetricInfo(label=m.label, value=m.value, percent=m.percent)
            for m in detail.popularity
        ],
        popularity_tier=detail.popularity_tier,
        has_popularity=detail.has_popularity,
        credits=detail.credits,
        notes=detail.notes,
    )
