# src/playlist_extractor/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from .constants import DEFAULT_OUTPUT_NAMES
from .core import scan_folder
from .errors import BadArgument, ExtractorError, OutputWriteError
from .io.exports import resolve_output_path, write_report
from .io.scan import ensure_directory
from .types import ExtractOptions, RunStats
from .utils.logging import get_logger


class _ArgumentParser(argparse.ArgumentParser):
    """Report usage errors as BadArgument so they exit with status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        raise BadArgument(message)


def build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog="playlist-extractor",
        description="Collect playlist names and share codes from a folder of JSON files.",
    )
    p.add_argument(
        "folder",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Folder to scan for .json files (default: current directory)",
    )
    p.add_argument(
        "--authors", "-a", action="store_true", help="Also extract authorName/authorSteamId"
    )
    p.add_argument("--description", "-d", action="store_true", help="Also extract description")
    p.add_argument("--quiet", "-q", action="store_true", help="Do not print run statistics")
    p.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        default=None,
        help="Directory for the results file (default: parent of the scanned folder)",
    )
    p.add_argument(
        "--output-name",
        "-n",
        default=None,
        help="Results file name (default: results.txt, or results.json/.csv for other formats)",
    )
    p.add_argument(
        "--format", "-f", choices=list(DEFAULT_OUTPUT_NAMES), default="text", help="Output format"
    )
    p.add_argument(
        "--debug",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Verbose extraction logs (use --debug / --no-debug).",
    )
    return p


def print_stats(stats: RunStats) -> None:
    print()
    print("Statistics:")
    print(f"  Files found:            {stats.files_seen}")
    print(f"  Successful parses:      {stats.successful_parses}")
    print(f"  Failed parses:          {stats.failed_parses}")
    print(f"  Duplicate share codes:  {stats.duplicate_share_codes}")
    print(f"  Duplicate names:        {stats.duplicate_names}")


def main(argv: list[str] | None = None) -> None:
    p = build_parser()
    try:
        args = p.parse_args(argv)
    except BadArgument as e:
        raise SystemExit(f"{p.prog}: error: {e}") from e

    log = get_logger()
    log.setLevel(logging.DEBUG if args.debug else logging.INFO)

    options = ExtractOptions(authors=args.authors, description=args.description)
    name = args.output_name or DEFAULT_OUTPUT_NAMES[args.format]

    try:
        ensure_directory(args.folder)
        if args.output_dir is not None:
            ensure_directory(args.output_dir)
    except ExtractorError as e:
        raise SystemExit(f"Error: {e}") from e

    print(f"Scanning folder: {args.folder}")
    print()
    result = scan_folder(args.folder, options)
    stats = result.stats

    if not args.quiet:
        print_stats(stats)

    if stats.files_seen == 0:
        print("No .json files found in the directory.")
        return
    print(f"Processed {stats.files_seen} JSON file(s).")
    if not result.records:
        print("No valid results to write.")
        return

    out_path = resolve_output_path(args.folder, args.output_dir, name)
    try:
        write_report(result.records, out_path, options, fmt=args.format)
    except OutputWriteError as e:
        log.error("%s (%s)", e, e.__cause__)
        return
    print(f"Results written to {out_path}")


if __name__ == "__main__":
    main()
