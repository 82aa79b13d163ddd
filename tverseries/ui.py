from __future__ import annotations

import os
import sys
from typing import Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ParsedEpisode, VideoInfo


class ConsoleUI:
    _COLORS = {
        "info": "36",      # cyan
        "success": "32",   # green
        "warning": "33",   # yellow
        "error": "31",     # red
        "muted": "90",     # bright black / grey
    }
    _LABELS = {
        "info": "INFO",
        "success": "DONE",
        "warning": "WARN",
        "error": "ERR",
        "muted": "...",
    }

    def __init__(self) -> None:
        self._supports_ansi = sys.stdout.isatty() and os.getenv("TERM") != "dumb"
        self._status_line: Optional[str] = None
        self._last_status_length = 0

        if os.name == "nt" and self._supports_ansi:
            try:
                import colorama
            except ImportError:
                self._supports_ansi = False
            else:
                colorama.just_fix_windows_console()

    def _format_plain(self, message: str, level: str) -> str:
        if level == "muted":
            return f"  {message}"
        label = self._LABELS.get(level, level.upper())
        return f"[{label}] {message}"

    def _colorize(self, text: str, level: str) -> str:
        if not self._supports_ansi:
            return text
        code = self._COLORS.get(level)
        if not code:
            return text
        return f"\x1b[{code}m{text}\x1b[0m"

    def _clear_status(self) -> None:
        if not self._last_status_length:
            return
        sys.stdout.write("\r" + " " * self._last_status_length + "\r")
        sys.stdout.flush()
        self._last_status_length = 0

    def _render_status(self) -> None:
        if not self._status_line:
            return
        sys.stdout.write("\r" + self._status_line)
        sys.stdout.flush()
        self._last_status_length = len(self._status_line)

    def update_status(self, message: Optional[str], *, level: str = "info") -> None:
        self._clear_status()
        self._status_line = None if message is None else self._format_plain(message, level)
        self._render_status()

    def log_event(self, message: str, *, level: str = "info") -> None:
        self._clear_status()
        print(self._colorize(self._format_plain(message, level), level), flush=True)
        self._render_status()

    def show_episodes(self, episodes: Sequence["ParsedEpisode"]) -> None:
        self._clear_status()
        print("\n=== Episodes ===")
        for index, episode in enumerate(episodes, start=1):
            if episode.has_number:
                heading = f"Episode {episode.episode_number}"
            else:
                heading = self._colorize("[number unknown]", "warning")
            print(f"{index:2d}. {heading}: {episode.title}")
            print(f"    ID: {episode.episode_id}")
            print(f"    URL: {episode.url}")
            print()
        print(f"Total: {len(episodes)} episodes")
        print("================", flush=True)
        self._render_status()

    def show_video_info(self, info: "VideoInfo") -> None:
        self._clear_status()
        print("\n=== Video info ===")
        print(f"ID: {info.id}")
        print(f"Title: {info.title}")
        print(f"Series: {info.series}")
        print(f"Season: {info.season}")
        print(f"Episode: {info.episode}")
        if info.episode_number > 0:
            print(f"Episode number: {info.episode_number}")
        print(f"Uploader: {info.uploader}")
        print(f"Upload date: {info.upload_date}")
        if info.duration > 0:
            print(f"Duration: {info.duration:.0f}s ({info.duration / 60:.1f} min)")
        print(f"URL: {info.webpage_url}")
        if info.description:
            print(f"Description: {info.description.strip()}")
        print("==================\n", flush=True)
        self._render_status()

    def finalize(self) -> None:
        self._clear_status()
        self._status_line = None
