from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Sequence

from .models import ParsedEpisode, VideoInfo

SERIES_FILENAME = "series_info.json"

# Keys written for each episode in the series file.
_EPISODE_KEYS = {
    "episode_number": "EpisodeNumber",
    "title": "Title",
    "url": "URL",
    "episode_id": "ID",
    "original_title": "OriginalTitle",
}


def episode_to_dict(episode: ParsedEpisode) -> dict[str, Any]:
    return {key: getattr(episode, field) for field, key in _EPISODE_KEYS.items()}


def episode_from_dict(data: dict[str, Any]) -> ParsedEpisode:
    title = str(data.get("Title", ""))
    return ParsedEpisode(
        episode_number=int(data.get("EpisodeNumber") or 0),
        title=title,
        url=str(data.get("URL", "")),
        episode_id=str(data.get("ID", "")),
        original_title=str(data.get("OriginalTitle", title)),
    )


def _write_json(path: Path, document: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(document, handle, indent=2, ensure_ascii=False)
        handle.write("\n")


def save_series_file(episodes: Sequence[ParsedEpisode], path: Path) -> Path:
    document = {
        "episodes": [episode_to_dict(episode) for episode in episodes],
        "count": len(episodes),
    }
    _write_json(path, document)
    return path


def load_series_file(path: Path) -> list[ParsedEpisode]:
    with path.open("r", encoding="utf-8") as handle:
        document = json.load(handle)
    return [episode_from_dict(item) for item in document.get("episodes") or []]


def save_video_info(info: VideoInfo, output_dir: Path) -> Path:
    path = output_dir / f"{info.id}_info.json"
    _write_json(path, asdict(info))
    return path
