from __future__ import annotations

import json
from typing import Any, Optional, Union

import pytest
import requests

from tverseries.api import PlatformClient


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: Optional[str] = None) -> None:
        self.status_code = status_code
        if text is None:
            text = json.dumps(payload, ensure_ascii=False) if payload is not None else ""
        self.text = text

    def json(self) -> Any:
        return json.loads(self.text)


class FakeSession:
    """Replays canned responses keyed by URL and records every request."""

    def __init__(self, routes: Optional[dict[str, Union[FakeResponse, Exception]]] = None) -> None:
        self.routes = dict(routes or {})
        self.calls: list[dict[str, Any]] = []

    def request(self, method, url, data=None, params=None, headers=None, timeout=None):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "data": data,
                "params": params,
                "headers": headers,
                "timeout": timeout,
            }
        )
        if url not in self.routes:
            raise requests.ConnectionError(f"no route for {url}")
        outcome = self.routes[url]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def urls(self) -> list[str]:
        return [call["url"] for call in self.calls]


class RecordingUI:
    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []
        self.statuses: list[Optional[str]] = []
        self.status: Optional[str] = None
        self.listings: list[list] = []
        self.infos: list = []

    def log_event(self, message: str, *, level: str = "info") -> None:
        self.events.append((level, message))

    def update_status(self, message, *, level: str = "info") -> None:
        self.statuses.append(message)
        self.status = message

    def show_episodes(self, episodes) -> None:
        self.listings.append(list(episodes))

    def show_video_info(self, info) -> None:
        self.infos.append(info)

    def finalize(self) -> None:
        pass

    def messages(self, level: str) -> list[str]:
        return [message for event_level, message in self.events if event_level == level]


def token_payload(uid: str = "uid-1234567890", token: str = "token-abc") -> dict:
    return {"Result": {"platform_uid": uid, "platform_token": token}}


def seasons_payload(*season_ids: str) -> dict:
    contents = [{"Type": "season", "Content": {"Id": season_id}} for season_id in season_ids]
    return {"Result": {"Contents": contents}}


def episodes_payload(*episodes: tuple[str, str]) -> dict:
    contents = [
        {"Type": "episode", "Content": {"Id": episode_id, "Title": title, "EndAt": 1700000000}}
        for episode_id, title in episodes
    ]
    return {"Result": {"Contents": contents}}


@pytest.fixture
def ui() -> RecordingUI:
    return RecordingUI()


@pytest.fixture
def make_client(ui):
    def _make(routes) -> tuple[PlatformClient, FakeSession]:
        session = FakeSession(routes)
        return PlatformClient(session, timeout=60.0, ui=ui), session

    return _make
