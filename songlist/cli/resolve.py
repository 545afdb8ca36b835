"""Command-line playlist resolver.

Usage::

    python -m songlist.cli 2075587
    python -m songlist.cli "https://music.163.com/#/playlist?id=2075587" --json
    python -m songlist.cli 2075587 --output songs.txt

Prints one "Title - Artist" line per song (or the JSON song list) to
stdout.  Log output goes to stderr; ``--quiet`` raises it to WARNING.
Exit code is 0 on success and 1 on any resolution error.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any

from songlist.config.settings import Settings
from songlist.models.playlist import SongList
from songlist.utils.errors import SongListError
from songlist.utils.logging import configure_logging


def _format_text_output(song_list: SongList) -> str:
    """Header line with name and counts, then one song per line."""
    lines = [f"# {song_list.name} ({len(song_list.songs)}/{song_list.songs_count})"]
    lines.extend(song_list.songs)
    return "\n".join(lines)


def _format_json_output(song_list: SongList) -> str:
    return song_list.model_dump_json(indent=2)


async def _run(link: str, json_output: bool, output_file: str | None, app_settings: Settings) -> int:
    """Resolve *link* and write the result.  Returns the process exit code."""
    # Deferred import keeps ``--help`` fast.
    from songlist.main import build_components, close_components

    components: dict[str, Any] | None = None
    try:
        components = build_components(app_settings)
        song_list = await components["playlist_service"].discover(link)
    except SongListError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    finally:
        if components is not None:
            await close_components(components)

    text = _format_json_output(song_list) if json_output else _format_text_output(song_list)
    if output_file:
        Path(output_file).write_text(text + "\n", encoding="utf-8")
        print(f"Results written to: {output_file}", file=sys.stderr)
    else:
        print(text)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m songlist.cli",
        description="Resolve a NetEase Cloud Music playlist into 'Title - Artist' lines.",
    )
    parser.add_argument(
        "link",
        type=str,
        help="Playlist share link or numeric playlist id.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Print the song list as JSON.",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Write the result to a file instead of stdout.",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point; exits with the code returned by :func:`_run`."""
    args = _build_parser().parse_args(argv)
    app_settings = Settings()

    configure_logging(
        log_level="WARNING" if args.quiet else app_settings.log_level,
        stream=sys.stderr,
    )
    exit_code = asyncio.run(_run(args.link, args.json_output, args.output, app_settings))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
