from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from .http_utils import DEFAULT_TIMEOUT
from .ytdlp import DEFAULT_EXECUTABLE

COMMANDS = ("info", "download", "both", "series")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Download TVer episodes and whole series through yt-dlp.",
        epilog=(
            "examples:\n"
            "  tver-downloader info https://tver.jp/episodes/epuk32qiqy\n"
            "  tver-downloader series https://tver.jp/series/srrazrs5j2 --list\n"
            "  tver-downloader series https://tver.jp/series/srrazrs5j2 --from 10 --to 15"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "command",
        choices=COMMANDS,
        help="info: show video info; download: download one episode; "
        "both: info and download; series: list or download a whole series.",
    )
    parser.add_argument(
        "url",
        help="TVer episode URL (https://tver.jp/episodes/...) or series URL (https://tver.jp/series/...).",
    )
    parser.add_argument(
        "output",
        nargs="?",
        default="./downloads",
        help="Destination directory (default: ./downloads).",
    )
    parser.add_argument(
        "--list",
        dest="list_only",
        action="store_true",
        help="Series only: print the episode list without downloading.",
    )
    parser.add_argument(
        "--all",
        dest="all_episodes",
        action="store_true",
        help="Series only: keep every episode, including ones without a number.",
    )
    parser.add_argument(
        "--from",
        dest="from_episode",
        type=int,
        default=0,
        help="Series only: first episode number to download (default: no lower bound).",
    )
    parser.add_argument(
        "--to",
        dest="to_episode",
        type=int,
        default=0,
        help="Series only: last episode number to download (default: no upper bound).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="HTTP timeout in seconds for platform API requests (default: 60).",
    )
    parser.add_argument(
        "--yt-dlp",
        dest="ytdlp",
        default=DEFAULT_EXECUTABLE,
        help="Path to the yt-dlp executable (default: yt-dlp).",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def validate_args(args: argparse.Namespace) -> None:
    if args.from_episode < 0:
        raise SystemExit("--from must be zero or greater.")
    if args.to_episode < 0:
        raise SystemExit("--to must be zero or greater.")
    if args.from_episode and args.to_episode and args.to_episode < args.from_episode:
        raise SystemExit("--to must not be smaller than --from.")
    if args.timeout <= 0:
        raise SystemExit("Timeout must be a positive number.")
    output_path = Path(args.output)
    if output_path.exists() and not output_path.is_dir():
        raise SystemExit(f"Output path exists and is not a directory: {output_path}")
