"""Immutable records produced by the repository and pull-request listers."""

from __future__ import annotations

import datetime as dt
import re
from dataclasses import dataclass
from typing import Optional

_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


def parse_github_timestamp(raw: str) -> dt.datetime:
    """Parse an ISO-8601 GitHub timestamp into an aware UTC datetime."""
    value = dt.datetime.fromisoformat(raw.replace("Z", "+00:00"))
    if value.tzinfo is None:
        value = value.replace(tzinfo=dt.timezone.utc)
    return value.astimezone(dt.timezone.utc)


@dataclass(frozen=True)
class RepositoryRef:
    name: str
    owner_login: str

    @property
    def full_name(self) -> str:
        return f"{self.owner_login}/{self.name}"


@dataclass(frozen=True)
class PullRequestRecord:
    url: str
    number: int
    repo_name: str
    author_login: Optional[str]
    created_at: dt.datetime
    assignee_login: Optional[str] = None

    @property
    def diff_url(self) -> str:
        """Web URL of the PR's changed-files view."""
        return f"{self.url}/files"

    @property
    def screenshot_filename(self) -> str:
        return f"{self.repo_name}#{self.number}.png"


@dataclass(frozen=True)
class MonthWindow:
    """Half-open interval [start, end) covering one calendar month in UTC."""

    start: dt.datetime
    end: dt.datetime

    @classmethod
    def parse(cls, month: str) -> "MonthWindow":
        match = _MONTH_RE.match(month.strip()) if month else None
        if not match:
            raise ValueError(f"month must look like YYYY-MM, got {month!r}")
        year, mon = int(match.group(1)), int(match.group(2))
        if not 1 <= mon <= 12:
            raise ValueError(f"month out of range in {month!r}")
        start = dt.datetime(year, mon, 1, tzinfo=dt.timezone.utc)
        if mon == 12:
            end = dt.datetime(year + 1, 1, 1, tzinfo=dt.timezone.utc)
        else:
            end = dt.datetime(year, mon + 1, 1, tzinfo=dt.timezone.utc)
        return cls(start=start, end=end)

    def contains(self, moment: dt.datetime) -> bool:
        return self.start <= moment < self.end


__all__ = [
    "MonthWindow",
    "PullRequestRecord",
    "RepositoryRef",
    "parse_github_timestamp",
]
