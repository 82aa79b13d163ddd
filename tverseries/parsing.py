from __future__ import annotations

import re
from typing import Iterable, Sequence

from .errors import URLFormatError
from .models import ParsedEpisode, RawEpisodeEntry
from .numbering import extract_episode_number

EPISODE_ID_PATTERN = re.compile(r"episodes/([a-zA-Z0-9]+)")
SERIES_ID_PATTERN = re.compile(r"series/([a-zA-Z0-9]+)")


def extract_series_id(url: str) -> str:
    match = SERIES_ID_PATTERN.search(url)
    if not match:
        raise URLFormatError(f"Could not find a series ID in URL: {url}")
    return match.group(1)


def extract_episode_id(url: str) -> str:
    match = EPISODE_ID_PATTERN.search(url)
    if not match:
        raise URLFormatError(f"Could not find an episode ID in URL: {url}")
    return match.group(1)


def parse_episode(entry: RawEpisodeEntry) -> ParsedEpisode:
    match = EPISODE_ID_PATTERN.search(entry.webpage_url)
    return ParsedEpisode(
        episode_number=extract_episode_number(entry.title),
        title=entry.title,
        url=entry.webpage_url,
        episode_id=match.group(1) if match else "",
        original_title=entry.title,
    )


def parse_episodes(entries: Iterable[RawEpisodeEntry]) -> list[ParsedEpisode]:
    return [parse_episode(entry) for entry in entries]


def sort_episodes(episodes: Sequence[ParsedEpisode]) -> list[ParsedEpisode]:
    """Ascending by episode number; unnumbered episodes keep their order at the end."""
    return sorted(episodes, key=lambda episode: (not episode.has_number, episode.episode_number))


def filter_episodes(
    episodes: Iterable[ParsedEpisode],
    from_episode: int = 0,
    to_episode: int = 0,
) -> list[ParsedEpisode]:
    """Keep numbered episodes inside ``[from_episode, to_episode]``.

    A bound of 0 leaves that side of the range open. Unnumbered episodes are
    always dropped.
    """
    filtered: list[ParsedEpisode] = []
    for episode in episodes:
        if not episode.has_number:
            continue
        if from_episode > 0 and episode.episode_number < from_episode:
            continue
        if to_episode > 0 and episode.episode_number > to_episode:
            continue
        filtered.append(episode)
    return filtered
