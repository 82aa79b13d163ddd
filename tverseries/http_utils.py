from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING

import cloudscraper
import requests
from cloudscraper.exceptions import CaptchaException, CloudflareException

from .errors import APIError

if TYPE_CHECKING:
    from .ui import ConsoleUI


DEFAULT_TIMEOUT = 60.0

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/126.0.0.0 Safari/537.36"
)

DEFAULT_HEADERS = {
    "User-Agent": DEFAULT_USER_AGENT,
    "Accept": "application/json, text/plain, */*",
    "Accept-Language": "ja,en-US;q=0.9,en;q=0.8",
}


def create_scraper() -> cloudscraper.CloudScraper:
    scraper = cloudscraper.create_scraper(
        browser={"browser": "chrome", "platform": "windows", "mobile": False},
    )
    # cloudscraper picks a random UA per session; the API only accepts a desktop one.
    scraper.headers.update(DEFAULT_HEADERS)
    return scraper


def perform_request(
    scraper: cloudscraper.CloudScraper,
    method: str,
    url: str,
    *,
    timeout: float,
    purpose: str,
    data: Optional[dict[str, str]] = None,
    params: Optional[dict[str, str]] = None,
    ui: Optional["ConsoleUI"] = None,
) -> requests.Response:
    """Issue a single request and return the response if it carries a 2xx status.

    There is no retry: transport failures and error statuses surface as
    ``APIError`` straight away.
    """
    if ui:
        ui.log_event(f"{purpose}: {method} {url}", level="muted")
    try:
        response = scraper.request(
            method=method,
            url=url,
            data=data,
            params=params,
            headers={"User-Agent": DEFAULT_USER_AGENT},
            timeout=timeout,
        )
    except (requests.RequestException, CloudflareException, CaptchaException) as exc:
        message = str(exc).strip() or exc.__class__.__name__
        raise APIError(f"{purpose} failed ({message})") from exc

    if not 200 <= response.status_code < 300:
        raise APIError(
            f"{purpose} returned HTTP {response.status_code}: {response.text}",
            status_code=response.status_code,
            body=response.text,
        )
    return response


def decode_json(response: requests.Response, purpose: str) -> dict[str, Any]:
    try:
        payload = response.json()
    except ValueError as exc:
        raise APIError(
            f"{purpose} returned a body that is not JSON",
            status_code=response.status_code,
            body=response.text,
        ) from exc
    if not isinstance(payload, dict):
        raise APIError(
            f"{purpose} returned an unexpected JSON document",
            status_code=response.status_code,
            body=response.text,
        )
    return payload
