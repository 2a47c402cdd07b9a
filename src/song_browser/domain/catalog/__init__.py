"""Catalog domain - song collection querying and metadata normalization.

This domain handles:
- Loading the song collection
- Facet option building
- Multi-facet filtering
- Genre/tag classification
- Material status normalization
- Detail view assembly
"""

# Models
from .models import (
    ChartStatus,
    ClassifiedTerms,
    FacetIndex,
    PopularityMetric,
    Song,
    SongDetail,
)

# Loading
from .loader import find_song, load_songs, parse_songs

# Facets
from .facets import (
    ALL,
    CHART_TIER_OPTIONS,
    LEVEL_OPTIONS,
    MODE_OPTIONS,
    build_facets,
    build_filter_options,
)

# Filtering
from .filters import FilterState, chart_status, filter_songs, matches_filters

# Classification and status
from .classifier import classify_song_terms, classify_terms
from .status import normalize_status

# Detail view
from .detail import build_song_detail, summarize_song

__all__ = [
    # Models
    "ChartStatus",
    "ClassifiedTerms",
    "FacetIndex",
    "PopularityMetric",
    "Song",
    "SongDetail",
    # Loading
    "find_song",
    "load_songs",
    "parse_songs",
    # Facets
    "ALL",
    "CHART_TIER_OPTIONS",
    "LEVEL_OPTIONS",
    "MODE_OPTIONS",
    "build_facets",
    "build_filter_options",
    # Filtering
    "FilterState",
    "chart_status",
    "filter_songs",
    "matches_filters",
    # Classification and status
    "classify_song_terms",
    "classify_terms",
    "normalize_status",
    # Detail view
    "build_song_detail",
    "summarize_song",
]
