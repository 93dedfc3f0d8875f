"""Exception types shared by the API listers, the page capturer and the exporter."""

from __future__ import annotations

from typing import Optional


class ExportError(Exception):
    """Base class for every failure raised by the export workflow."""


class AuthenticationError(ExportError):
    """The GitHub credential was rejected; never retried."""

    def __init__(self, message: str, status_code: int = 401) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransientError(ExportError):
    """Rate limits, 5xx responses and network blips."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApiError(ExportError):
    """A terminal non-2xx answer from the REST API (404, 422, ...); never retried."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class NavigationError(ExportError):
    """The headless browser could not load a page."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"failed to load {url}: {reason}")
        self.url = url
        self.reason = reason


class ExhaustedRetriesError(ExportError):
    """An operation kept failing after the whole retry budget was spent."""

    def __init__(self, label: str, attempts: int, last_error: BaseException) -> None:
        super().__init__(f"{label} failed after {attempts} attempt(s): {last_error}")
        self.label = label
        self.attempts = attempts
        self.last_error = last_error


class HeadersFileError(ExportError):
    """The JSON headers file is missing, unreadable or not an object."""


__all__ = [
    "ExportError",
    "AuthenticationError",
    "TransientError",
    "ApiError",
    "NavigationError",
    "ExhaustedRetriesError",
    "HeadersFileError",
]
