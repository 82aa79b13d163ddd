from __future__ import annotations

from typing import Optional


class TVerError(RuntimeError):
    """Base class for every failure raised by this package."""


class URLFormatError(TVerError):
    pass


class AuthenticationError(TVerError):
    pass


class APIError(TVerError):
    def __init__(self, message: str, *, status_code: Optional[int] = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class DownloadError(TVerError):
    pass
