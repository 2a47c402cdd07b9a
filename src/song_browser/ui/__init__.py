"""Rich renderings of the browse table and the song detail view."""

from .detail import render_song_detail
from .table import EMPTY_MESSAGE, render_facets, render_song_table

__all__ = [
    "EMPTY_MESSAGE",
    "render_facets",
    "render_song_detail",
    "render_song_table",
]
