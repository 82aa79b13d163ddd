from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

import cloudscraper

from .errors import APIError, AuthenticationError
from .http_utils import DEFAULT_TIMEOUT, create_scraper, decode_json, perform_request
from .models import Credentials, RawEpisodeEntry
from .ui import ConsoleUI

PLATFORM_API_BASE = "https://platform-api.tver.jp"
TOKEN_URL = f"{PLATFORM_API_BASE}/v2/api/platform_users/browser/create"
SERIES_SEASONS_URL = f"{PLATFORM_API_BASE}/service/api/v1/callSeriesSeasons/{{series_id}}"
SEASON_EPISODES_URL = f"{PLATFORM_API_BASE}/service/api/v1/callSeasonEpisodes/{{season_id}}"
EPISODE_URL_TEMPLATE = "https://tver.jp/episodes/{episode_id}"

SEASON_TYPE = "season"
EPISODE_TYPE = "episode"

T = TypeVar("T")


def _contents(payload: dict[str, Any]) -> list[dict[str, Any]]:
    result = payload.get("Result") or {}
    if not isinstance(result, dict):
        raise ValueError("Result is not an object")
    contents = result.get("Contents") or []
    if not isinstance(contents, list):
        raise ValueError("Result.Contents is not a list")
    return [item for item in contents if isinstance(item, dict)]


def _content_of(item: dict[str, Any]) -> dict[str, Any]:
    content = item.get("Content") or {}
    if not isinstance(content, dict):
        raise ValueError("Content is not an object")
    return content


def _string_field(content: dict[str, Any], key: str) -> str:
    value = content.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key} is not a string")
    return value


def _end_at(content: dict[str, Any]) -> int:
    value = content.get("EndAt")
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("EndAt is not a number")
    # NaN and Infinity are accepted by json but are not timestamps.
    return int(value)


def _season_ids(contents: list[dict[str, Any]]) -> list[str]:
    return [
        _string_field(_content_of(item), "Id")
        for item in contents
        if item.get("Type") == SEASON_TYPE
    ]


def _episode_entries(contents: list[dict[str, Any]]) -> list[RawEpisodeEntry]:
    episodes: list[RawEpisodeEntry] = []
    for item in contents:
        if item.get("Type") != EPISODE_TYPE:
            continue
        content = _content_of(item)
        episode_id = _string_field(content, "Id")
        episodes.append(
            RawEpisodeEntry(
                title=_string_field(content, "Title"),
                episode_id=episode_id,
                webpage_url=EPISODE_URL_TEMPLATE.format(episode_id=episode_id),
                end_at=_end_at(content),
            )
        )
    return episodes


class PlatformClient:
    """Thin client over the TVer platform API.

    The client holds no session token of its own: ``authenticate`` returns a
    ``Credentials`` value which every lookup takes explicitly.
    """

    def __init__(
        self,
        scraper: Optional[cloudscraper.CloudScraper] = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        ui: Optional[ConsoleUI] = None,
    ) -> None:
        self.scraper = scraper if scraper is not None else create_scraper()
        self.timeout = timeout
        self.ui = ui

    def authenticate(self) -> Credentials:
        try:
            response = perform_request(
                self.scraper,
                "POST",
                TOKEN_URL,
                timeout=self.timeout,
                purpose="Token request",
                data={"device_type": "pc"},
                ui=self.ui,
            )
            payload = decode_json(response, "Token request")
        except APIError as exc:
            raise AuthenticationError(f"Could not obtain a platform token: {exc}") from exc

        result = payload.get("Result")
        if not isinstance(result, dict):
            raise AuthenticationError("Token response has no Result object.")
        uid = result.get("platform_uid")
        token = result.get("platform_token")
        if not isinstance(uid, str) or not isinstance(token, str) or not uid or not token:
            raise AuthenticationError("Token response is missing platform_uid or platform_token.")

        if self.ui:
            self.ui.log_event(f"Token acquired: UID={uid[:8]}...", level="success")
        return Credentials(platform_uid=uid, platform_token=token)

    def _lookup(
        self,
        url: str,
        credentials: Credentials,
        purpose: str,
        decode: Callable[[list[dict[str, Any]]], list[T]],
    ) -> list[T]:
        response = perform_request(
            self.scraper,
            "GET",
            url,
            timeout=self.timeout,
            purpose=purpose,
            params=credentials.as_params(),
            ui=self.ui,
        )
        payload = decode_json(response, purpose)
        try:
            return decode(_contents(payload))
        except (ValueError, OverflowError) as exc:
            raise APIError(
                f"{purpose} returned an unexpected envelope ({exc})",
                status_code=response.status_code,
                body=response.text,
            ) from exc

    def list_seasons(self, series_id: str, credentials: Credentials) -> list[str]:
        return self._lookup(
            SERIES_SEASONS_URL.format(series_id=series_id),
            credentials,
            f"Season list for series {series_id}",
            _season_ids,
        )

    def list_episodes(self, season_id: str, credentials: Credentials) -> list[RawEpisodeEntry]:
        return self._lookup(
            SEASON_EPISODES_URL.format(season_id=season_id),
            credentials,
            f"Episode list for season {season_id}",
            _episode_entries,
        )
