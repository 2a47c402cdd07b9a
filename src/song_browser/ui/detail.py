"""
Song detail rendering with Rich.

Lays the SongDetail sections out as a single panel, in the same order as the
web modal: header, basic info, overview, teaching notes, materials, about,
popularity and charts, credits, notes.
"""

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from song_browser.domain.catalog import SongDetail

BAR_WIDTH = 20


def _bar(percent: float) -> str:
    filled = round(percent / 100 * BAR_WIDTH)
    return "█" * filled + "░" * (BAR_WIDTH - filled)


def _grid(rows: dict[str, str]) -> Table:
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="bold")
    grid.add_column()
    for label, value in rows.items():
        grid.add_row(label, value or "—")
    return grid


def _heading(title: str) -> Text:
    return Text(f"\n{title}", style="bold bright_cyan")


def _format_number(value: float) -> str:
    return f"{int(value):,}" if float(value).is_integer() else f"{value:,}"


def render_song_detail(detail: SongDetail) -> Panel:
    """Build the detail panel for one song."""
    parts = []

    header = Text(detail.title, style="bold")
    if detail.artist:
        header.append(f"\n{detail.artist}", style="italic")
    parts.append(header)

    if detail.badges:
        parts.append(Text("  ".join(f"[{badge}]" for badge in detail.badges), style="yellow"))

    links = [
        f"{label}: {url}" if url else f"{label}: (pending)"
        for label, url in detail.links.items()
    ]
    if links:
        parts.append(Text("\n".join(links), style="dim"))

    basic = dict(detail.info)
    if detail.genres:
        basic["Genre"] = ", ".join(detail.genres)
    if detail.tags:
        basic["Tags"] = ", ".join(detail.tags)
    parts.append(_grid(basic))

    parts.append(_heading("Song Overview"))
    parts.append(_grid(detail.overview) if detail.overview else Text("—"))

    if detail.teaching_notes:
        parts.append(_heading("Teaching Notes"))
        parts.append(Text(detail.teaching_notes))

    parts.append(_heading("Available Materials"))
    if detail.has_materials:
        for link in detail.materials:
            if link.available:
                parts.append(Text(f"{link.label}: {link.url}"))
            else:
                parts.append(Text(f"{link.label}: unavailable", style="dim"))
    else:
        parts.append(Text("No learning materials available yet", style="dim"))

    if detail.wikipedia_intro:
        parts.append(_heading("About This Song"))
        parts.append(Text(detail.wikipedia_intro))
        if detail.wikipedia_url:
            parts.append(Text(f"Read more on Wikipedia: {detail.wikipedia_url}", style="dim"))

    parts.append(_heading("Popularity & Charts"))
    if detail.has_popularity:
        if detail.chart_achievements:
            parts.append(Text("  ".join(detail.chart_achievements), style="yellow"))
        metrics = Table.grid(padding=(0, 2))
        metrics.add_column(style="bold")
        metrics.add_column(justify="right")
        metrics.add_column()
        for metric in detail.popularity:
            value = _format_number(metric.value)
            if metric.label == "Spotify Popularity":
                value = f"{value}/100"
            metrics.add_row(metric.label, value, _bar(metric.percent))
        if detail.popularity_tier:
            metrics.add_row("Tier", detail.popularity_tier, "")
        parts.append(metrics)
    else:
        parts.append(Text("Popularity data pending enrichment", style="dim"))

    if detail.credits:
        parts.append(_heading("Credits"))
        parts.append(_grid(detail.credits))

    if detail.notes:
        parts.append(_heading("Notes"))
        parts.append(Text(detail.notes))

    return Panel(
        Group(*parts),
        border_style="bright_cyan",
        padding=(1, 2),
        title="Song Details",
        title_align="left",
    )
