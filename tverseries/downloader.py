from __future__ import annotations

from pathlib import Path
from typing import Optional

from .api import PlatformClient
from .errors import DownloadError
from .models import ParsedEpisode, VideoInfo
from .parsing import extract_episode_id, filter_episodes, parse_episodes, sort_episodes
from .series import resolve_series
from .storage import SERIES_FILENAME, save_series_file, save_video_info
from .ui import ConsoleUI
from .ytdlp import YtDlpDownloader


def _save_info(info: VideoInfo, output_directory: Path, ui: ConsoleUI) -> None:
    try:
        path = save_video_info(info, output_directory)
    except OSError as exc:
        ui.log_event(f"Could not save video info: {exc}", level="warning")
        return
    ui.log_event(f"Video info saved: {path}", level="success")


def fetch_info(
    episode_url: str,
    output_directory: Path,
    *,
    downloader: YtDlpDownloader,
    ui: ConsoleUI,
) -> VideoInfo:
    episode_id = extract_episode_id(episode_url)
    ui.log_event(f"Episode ID: {episode_id}", level="muted")
    info = downloader.get_video_info(episode_url)
    ui.show_video_info(info)
    _save_info(info, output_directory, ui)
    return info


def download_episode(
    episode_url: str,
    *,
    downloader: YtDlpDownloader,
    ui: ConsoleUI,
) -> None:
    episode_id = extract_episode_id(episode_url)
    ui.log_event(f"Episode ID: {episode_id}", level="muted")
    downloader.download(episode_url)


def fetch_info_and_download(
    episode_url: str,
    output_directory: Path,
    *,
    downloader: YtDlpDownloader,
    ui: ConsoleUI,
) -> VideoInfo:
    info = fetch_info(episode_url, output_directory, downloader=downloader, ui=ui)
    downloader.download(episode_url)
    return info


def download_series(
    series_url: str,
    output_directory: Path,
    *,
    from_episode: int = 0,
    to_episode: int = 0,
    list_only: bool = False,
    all_episodes: bool = False,
    client: Optional[PlatformClient] = None,
    downloader: YtDlpDownloader,
    ui: ConsoleUI,
) -> tuple[list[ParsedEpisode], list[ParsedEpisode]]:
    """Resolve a series, list it, and download the selected episodes.

    Returns the selected episodes and the subset whose download failed.
    """
    ui.update_status("Resolving series...", level="info")
    entries = resolve_series(series_url, client=client, ui=ui)
    ui.update_status(None)
    episodes = sort_episodes(parse_episodes(entries))
    if not all_episodes:
        episodes = filter_episodes(episodes, from_episode, to_episode)

    ui.show_episodes(episodes)

    try:
        series_path = save_series_file(episodes, output_directory / SERIES_FILENAME)
    except OSError as exc:
        ui.log_event(f"Could not save series info: {exc}", level="warning")
    else:
        ui.log_event(f"Series info saved: {series_path}", level="success")

    if list_only:
        ui.log_event("Episode listing complete.", level="success")
        return episodes, []

    if not episodes:
        ui.log_event("No episodes selected for download.", level="warning")
        return episodes, []

    total = len(episodes)
    ui.log_event(f"Downloading {total} episodes...", level="info")
    failed: list[ParsedEpisode] = []
    for idx, episode in enumerate(episodes, start=1):
        ui.log_event(f"[{idx}/{total}] Downloading: {episode.title}", level="info")
        # yt-dlp streams to this terminal; no status line may be left on screen.
        ui.update_status(None)
        try:
            downloader.download(episode.url)
        except DownloadError as exc:
            ui.log_event(
                f"Episode {episode.episode_number} ({episode.episode_id}) failed: {exc}",
                level="error",
            )
            failed.append(episode)
            continue
        ui.log_event(f"Completed: {episode.title}", level="success")

    ui.update_status(None)
    if failed:
        ui.log_event(
            f"Downloaded {total - len(failed)}/{total} episodes; {len(failed)} failed.",
            level="warning",
        )
    else:
        ui.log_event(f"All {total} episodes downloaded.", level="success")
    return episodes, failed
