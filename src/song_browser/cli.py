"""
Song Browser CLI - Entry point

Browse and filter the song collection, inspect a song's details, or run the
materials/catalog web server.
"""

import argparse
import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from song_browser import __version__
from song_browser.core.config import Config, ensure_directories, load_config
from song_browser.core.console import get_console
from song_browser.core.output import log, setup_from_config
from song_browser.domain.catalog import (
    CHART_TIER_OPTIONS,
    MODE_OPTIONS,
    FilterState,
    build_facets,
    build_song_detail,
    filter_songs,
    find_song,
    load_songs,
    summarize_song,
)
from song_browser.ui import render_facets, render_song_detail, render_song_table

# Project root detection (where pyproject.toml and web/ live)
PROJECT_ROOT = Path(__file__).parent.parent.parent


def _load_collection(config: Config, data_path: Optional[str]) -> list:
    path = Path(data_path).expanduser() if data_path else config.catalog.resolved_data_path()
    return load_songs(path)


def run_list(config: Config, args: argparse.Namespace) -> int:
    """Print the filtered song table.

    Returns:
        Exit code (0 for success, 2 for invalid filter values)
    """
    try:
        state = FilterState.from_params(
            search=args.search,
            level=args.level,
            key=args.key,
            mode=args.mode,
            era=args.era,
            season=args.season,
            genre=args.genre,
            chart=args.chart,
        )
    except ValueError as e:
        log(f"❌ {e}", level="error")
        return 2

    songs = _load_collection(config, args.data)
    results = filter_songs(songs, state)
    logger.debug(f"Filter {state} matched {len(results)} of {len(songs)} songs")

    console = get_console()
    console.print(f"Total songs in database: {len(songs)}")
    console.print(render_song_table([summarize_song(song) for song in results], len(songs)))
    return 0


def run_facets(config: Config, args: argparse.Namespace) -> int:
    """Print every discovered filter option."""
    songs = _load_collection(config, args.data)
    get_console().print(render_facets(build_facets(songs)))
    return 0


def run_show(config: Config, args: argparse.Namespace) -> int:
    """Print the detail view for one song.

    Returns:
        Exit code (0 for success, 1 if the song id is unknown)
    """
    songs = _load_collection(config, args.data)
    song = find_song(songs, args.song_id)
    if song is None:
        log(f"❌ No song with id {args.song_id}", level="error")
        return 1

    detail = build_song_detail(song, config.materials)
    get_console().print(render_song_detail(detail))
    return 0


def run_serve(config: Config, args: argparse.Namespace) -> int:
    """Run the FastAPI app (materials server + catalog API) under uvicorn.

    The app factory reloads configuration in the server process, so --data is
    handed over through SONG_BROWSER_DATA.
    """
    import uvicorn

    if args.data:
        os.environ["SONG_BROWSER_DATA"] = str(Path(args.data).expanduser())

    host = args.host or config.web.host
    port = args.port or config.web.port

    log(f"📄 Materials server running at http://{host}:{port}")
    log(f"📁 Serving files from: {config.materials.root_dir}")

    uvicorn.run(
        "web.backend.main:create_app",
        factory=True,
        host=host,
        port=port,
        app_dir=str(PROJECT_ROOT),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="School of Uke - Song Browser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--data",
        help="Path to the song collection JSON (overrides [catalog] data_path)",
    )

    subparsers = parser.add_subparsers(dest="subcommand", help="Available commands")

    list_parser = subparsers.add_parser("list", help="List songs matching the filters")
    list_parser.add_argument("--search", help="Match title, artist or songwriters")
    list_parser.add_argument("--level", help="Teaching level 1-5")
    list_parser.add_argument("--key", help="Original key, e.g. Em")
    list_parser.add_argument("--mode", choices=list(MODE_OPTIONS), help="Major or minor")
    list_parser.add_argument("--era", help="Era, e.g. 1960s")
    list_parser.add_argument("--season", help="Season, e.g. Winter")
    list_parser.add_argument("--genre", help="Genre (case-insensitive)")
    list_parser.add_argument(
        "--chart", choices=list(CHART_TIER_OPTIONS), help="Chart performance tier"
    )

    subparsers.add_parser("facets", help="Show the available filter values")

    show_parser = subparsers.add_parser("show", help="Show details for one song")
    show_parser.add_argument("song_id", help="Song id")

    serve_parser = subparsers.add_parser("serve", help="Run the materials and catalog server")
    serve_parser.add_argument("--host", help="Bind address (default from [web] host)")
    serve_parser.add_argument("--port", type=int, help="Port (default from [web] port)")

    return parser


COMMANDS = {
    "list": run_list,
    "facets": run_facets,
    "show": run_show,
    "serve": run_serve,
}


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the song-browser command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.subcommand:
        parser.print_help()
        return 0

    config = load_config()
    ensure_directories()
    setup_from_config(config.logging)

    return COMMANDS[args.subcommand](config, args)


if __name__ == "__main__":
    sys.exit(main())
