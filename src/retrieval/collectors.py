"""Repository and pull-request listers for the GitHub REST API."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from .http_client import api_url, paged_get
from .models import MonthWindow, PullRequestRecord, RepositoryRef, parse_github_timestamp


def _login(user_obj: Optional[dict]) -> Optional[str]:
    return (user_obj or {}).get("login") or None


def to_repository_ref(raw: Dict[str, Any]) -> RepositoryRef:
    return RepositoryRef(name=raw["name"], owner_login=_login(raw.get("owner")) or "")


def to_pull_request_record(raw: Dict[str, Any], repo_name: str) -> PullRequestRecord:
    """Map a raw `GET /pulls` entry onto a PullRequestRecord."""
    return PullRequestRecord(
        url=raw["html_url"],
        number=int(raw["number"]),
        repo_name=repo_name,
        author_login=_login(raw.get("user")),
        created_at=parse_github_timestamp(raw["created_at"]),
        assignee_login=_login(raw.get("assignee")),
    )


async def list_repositories(credential: str, owner_login: str) -> List[RepositoryRef]:
    """Return every repository visible to `credential` that `owner_login` owns.

    `/user/repos` lists repositories across all owners the credential can see,
    so the owner filter is applied client-side after the last page.
    """
    raw = await paged_get(api_url("/user/repos"), credential)
    repos = [to_repository_ref(entry) for entry in raw]
    return [repo for repo in repos if repo.owner_login == owner_login]


def filter_pull_requests(records: Iterable[PullRequestRecord],
                         author_login: Optional[str] = None,
                         month: Optional[str] = None) -> List[PullRequestRecord]:
    """Keep records matching the author login and/or the YYYY-MM month (AND)."""
    window = MonthWindow.parse(month) if month else None
    kept = []
    for record in records:
        if author_login and record.author_login != author_login:
            continue
        if window and not window.contains(record.created_at):
            continue
        kept.append(record)
    return kept


async def list_pull_requests(credential: str,
                             owner_login: str,
                             repo_name: str,
                             author_login: Optional[str] = None,
                             month: Optional[str] = None) -> List[PullRequestRecord]:
    """Return all pull requests (any state) of `owner_login/repo_name` that match the filters."""
    if month:
        MonthWindow.parse(month)
    url = api_url(f"/repos/{owner_login}/{repo_name}/pulls?state=all")
    raw = await paged_get(url, credential)
    records = [to_pull_request_record(entry, repo_name) for entry in raw]
    return filter_pull_requests(records, author_login, month)


__all__ = [
    "filter_pull_requests",
    "list_pull_requests",
    "list_repositories",
    "to_pull_request_record",
    "to_repository_ref",
]
