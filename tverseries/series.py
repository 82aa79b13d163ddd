from __future__ import annotations

from typing import Optional

from .api import PlatformClient
from .errors import APIError
from .models import RawEpisodeEntry
from .parsing import extract_series_id
from .ui import ConsoleUI


def resolve_series(
    series_url: str,
    *,
    client: Optional[PlatformClient] = None,
    ui: Optional[ConsoleUI] = None,
) -> list[RawEpisodeEntry]:
    """Collect every episode of a series, season by season, in server order.

    URL and authentication failures propagate. A season whose episode list
    cannot be fetched is logged and skipped.
    """
    internal_ui = ui or ConsoleUI()
    internal_ui.log_event(f"Resolving series: {series_url}", level="info")

    series_id = extract_series_id(series_url)
    internal_ui.log_event(f"Series ID: {series_id}", level="muted")

    api_client = client or PlatformClient(ui=internal_ui)
    credentials = api_client.authenticate()

    season_ids = api_client.list_seasons(series_id, credentials)
    internal_ui.log_event(f"Seasons found: {len(season_ids)}", level="info")

    episodes: list[RawEpisodeEntry] = []
    for season_id in season_ids:
        try:
            season_episodes = api_client.list_episodes(season_id, credentials)
        except APIError as exc:
            internal_ui.log_event(
                f"Skipping season {season_id}: {exc}",
                level="warning",
            )
            continue
        episodes.extend(season_episodes)

    internal_ui.log_event(f"Episodes found: {len(episodes)}", level="success")
    return episodes
