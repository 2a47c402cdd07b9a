"""Song browser table rendering with Rich."""

from typing import Any

from rich.table import Table

from song_browser.domain.catalog import FacetIndex

EMPTY_MESSAGE = "No songs match your search yet."

# (header, summary key, centered)
COLUMNS = (
    ("Song", "title", False),
    ("Artist", "artist", False),
    ("Year", "year", False),
    ("Genre", "genre", False),
    ("Season", "season", True),
    ("Major/Minor", "mode", True),
    ("Key", "key", True),
    ("Teaching Level", "level", True),
    ("# Chords", "num_chords", True),
    ("Songsheet", "song_sheet_status", True),
    ("TAB", "tab_status", True),
)


def render_song_table(summaries: list[dict[str, Any]], total: int) -> Table:
    """Build the browse table for the filtered songs.

    Args:
        summaries: Rows from summarize_song, in display order
        total: Size of the whole collection, shown in the caption

    Returns:
        Rich Table ready to print
    """
    table = Table(
        title="School of Uke - Song Browser",
        caption=f"Showing {len(summaries)} of {total} songs",
        header_style="bold",
        expand=True,
    )
    for header, _, centered in COLUMNS:
        table.add_column(header, justify="center" if centered else "left")

    if not summaries:
        table.add_row(EMPTY_MESSAGE, *([""] * (len(COLUMNS) - 1)))
        return table

    for summary in summaries:
        table.add_row(*(summary.get(key, "") for _, key, _ in COLUMNS))

    return table


def render_facets(facets: FacetIndex) -> Table:
    """Two-column table of every discovered facet value."""
    table = Table(title="Filter Options", show_lines=True)
    table.add_column("Facet", style="bold cyan")
    table.add_column("Values")

    for name, values in (
        ("Keys", facets.keys),
        ("Eras", facets.eras),
        ("Seasons", facets.seasons),
        ("Genres", facets.genres),
    ):
        table.add_row(name, ", ".join(values) or "-")

    return table
