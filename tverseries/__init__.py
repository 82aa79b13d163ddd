from .api import PlatformClient
from .cli import parse_args, validate_args
from .downloader import download_episode, download_series, fetch_info, fetch_info_and_download
from .parsing import filter_episodes, parse_episodes, sort_episodes
from .series import resolve_series

__all__ = [
    "PlatformClient",
    "download_episode",
    "download_series",
    "fetch_info",
    "fetch_info_and_download",
    "filter_episodes",
    "parse_args",
    "parse_episodes",
    "resolve_series",
    "sort_episodes",
    "validate_args",
]
