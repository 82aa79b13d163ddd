from __future__ import annotations

import json
import subprocess
import time
from dataclasses import fields
from pathlib import Path
from typing import Any, Optional, Sequence

from .errors import DownloadError
from .models import VideoInfo
from .ui import ConsoleUI

DEFAULT_EXECUTABLE = "yt-dlp"
DEFAULT_OPTIONS = ("-N", "10", "--write-info-json")
OUTPUT_TEMPLATE = "%(series)s - %(episode)s - %(uploader)s.%(ext)s"


def check_ytdlp(executable: str = DEFAULT_EXECUTABLE) -> str:
    """Return the installed yt-dlp version, or raise if it cannot be run."""
    try:
        result = subprocess.run(
            [executable, "--version"],
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        raise DownloadError(f"yt-dlp was not found. Please install it ({exc}).") from exc
    return result.stdout.strip()


def video_info_from_dict(data: dict[str, Any]) -> VideoInfo:
    known = {field.name for field in fields(VideoInfo)}
    values = {key: value for key, value in data.items() if key in known and value is not None}
    values.setdefault("id", "")
    values.setdefault("title", "")
    return VideoInfo(**values)


class YtDlpDownloader:
    def __init__(
        self,
        output_dir: Path,
        *,
        executable: str = DEFAULT_EXECUTABLE,
        options: Sequence[str] = DEFAULT_OPTIONS,
        ui: Optional[ConsoleUI] = None,
    ) -> None:
        self.output_dir = output_dir
        self.executable = executable
        self.options = list(options)
        self.ui = ui

    @property
    def output_template(self) -> str:
        return str(self.output_dir / OUTPUT_TEMPLATE)

    def get_video_info(self, url: str) -> VideoInfo:
        if self.ui:
            self.ui.log_event(f"Fetching video info: {url}", level="info")
        try:
            result = subprocess.run(
                [self.executable, "--dump-json", "--no-download", url],
                capture_output=True,
                text=True,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            raise DownloadError(f"yt-dlp could not read video info for {url} ({exc})") from exc

        try:
            data = json.loads(result.stdout)
        except ValueError as exc:
            raise DownloadError(f"yt-dlp returned invalid JSON for {url}") from exc
        if not isinstance(data, dict):
            raise DownloadError(f"yt-dlp returned an unexpected document for {url}")

        info = video_info_from_dict(data)
        if self.ui:
            self.ui.log_event(f"Video info received: {info.title}", level="success")
        return info

    def download(self, url: str) -> float:
        """Download ``url`` and return the elapsed time in seconds."""
        if self.ui:
            self.ui.log_event(f"Starting download: {url}", level="info")
        command = [self.executable, *self.options, "-o", self.output_template, url]

        start = time.perf_counter()
        try:
            # yt-dlp's own progress goes straight to the terminal.
            result = subprocess.run(command, check=False)
        except OSError as exc:
            raise DownloadError(f"yt-dlp could not be started ({exc})") from exc
        if result.returncode != 0:
            raise DownloadError(f"yt-dlp exited with status {result.returncode} for {url}")

        elapsed = time.perf_counter() - start
        if self.ui:
            self.ui.log_event(f"Download finished in {elapsed:,.1f}s.", level="success")
        return elapsed
