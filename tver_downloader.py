from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from tverseries import (
    PlatformClient,
    download_episode,
    download_series,
    fetch_info,
    fetch_info_and_download,
    parse_args,
    validate_args,
)
from tverseries.ui import ConsoleUI
from tverseries.ytdlp import YtDlpDownloader, check_ytdlp


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    validate_args(args)

    output_dir = Path(args.output)
    ui = ConsoleUI()

    try:
        version = check_ytdlp(args.ytdlp)
        ui.log_event(f"yt-dlp version: {version}", level="muted")
        output_dir.mkdir(parents=True, exist_ok=True)
        ui.log_event(f"Output directory: {output_dir}", level="info")

        downloader = YtDlpDownloader(output_dir, executable=args.ytdlp, ui=ui)
        if args.command == "info":
            fetch_info(args.url, output_dir, downloader=downloader, ui=ui)
        elif args.command == "download":
            download_episode(args.url, downloader=downloader, ui=ui)
        elif args.command == "both":
            fetch_info_and_download(args.url, output_dir, downloader=downloader, ui=ui)
        else:
            download_series(
                args.url,
                output_dir,
                from_episode=args.from_episode,
                to_episode=args.to_episode,
                list_only=args.list_only,
                all_episodes=args.all_episodes,
                client=PlatformClient(timeout=args.timeout, ui=ui),
                downloader=downloader,
                ui=ui,
            )
        ui.log_event("Done.", level="success")
    except KeyboardInterrupt:
        ui.log_event("Interrupted by user.", level="error")
        raise SystemExit("Interrupted by user.")
    except Exception as exc:
        ui.log_event(str(exc), level="error")
        raise SystemExit(str(exc)) from None
    finally:
        ui.finalize()


if __name__ == "__main__":
    main()
