from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Credentials:
    platform_uid: str
    platform_token: str

    def as_params(self) -> dict[str, str]:
        return {"platform_uid": self.platform_uid, "platform_token": self.platform_token}


@dataclass(frozen=True)
class RawEpisodeEntry:
    title: str
    episode_id: str
    webpage_url: str
    entry_type: str = "video"
    extractor: str = "TVer"
    end_at: int = 0


@dataclass(frozen=True)
class ParsedEpisode:
    episode_number: int
    title: str
    url: str
    episode_id: str
    original_title: str

    @property
    def has_number(self) -> bool:
        return self.episode_number != 0


@dataclass(frozen=True)
class VideoInfo:
    id: str
    title: str
    description: str = ""
    uploader: str = ""
    uploader_id: str = ""
    upload_date: str = ""
    duration: float = 0.0
    series: str = ""
    season: str = ""
    episode: str = ""
    episode_number: int = 0
    webpage_url: str = ""
    extractor: str = ""
    extractor_key: str = ""
