"""Export pipeline: repositories -> matching pull requests -> diff-view screenshots."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from src.capture import capture_screenshot
from src.retrieval.collectors import list_pull_requests, list_repositories
from src.retrieval.models import MonthWindow, PullRequestRecord, RepositoryRef
from src.retry import retry

from .config import ExportConfig


async def capture_pull_request(record: PullRequestRecord,
                               headers: Optional[Dict[str, str]],
                               config: ExportConfig) -> Path:
    """Screenshot one PR's diff view, retrying the capture on its own budget."""
    output = config.output_dir / record.screenshot_filename
    return await retry(
        lambda: capture_screenshot(record.diff_url, output, headers, config.capture),
        config.capture_attempts,
        label=f"screenshot {record.repo_name}#{record.number}",
    )


async def process_repo(credential: str,
                       repo: RepositoryRef,
                       author_login: Optional[str],
                       month: Optional[str],
                       headers: Optional[Dict[str, str]],
                       config: ExportConfig) -> List[Path]:
    """List the matching PRs of one repository and capture each of them."""
    records = await retry(
        lambda: list_pull_requests(credential, repo.owner_login, repo.name, author_login, month),
        config.listing_attempts,
        label=f"list pull requests {repo.full_name}",
    )
    print(f"  {len(records)} matching pull request(s)")
    saved = []
    for record in records:
        saved.append(await capture_pull_request(record, headers, config))
    return saved


async def export_pull_requests(credential: str,
                               owner_login: str,
                               author_login: Optional[str],
                               month: Optional[str],
                               headers: Optional[Dict[str, str]] = None,
                               config: Optional[ExportConfig] = None) -> List[Path]:
    """Screenshot the diff view of every PR by `author_login` created in `month`.

    Each repository runs inside its own retry scope, so a retry re-lists the
    PRs and re-captures every screenshot of that repository, including the
    ones that already succeeded.
    """
    config = config or ExportConfig()
    if month:
        MonthWindow.parse(month)
    config.output_dir.mkdir(parents=True, exist_ok=True)

    repos = await list_repositories(credential, owner_login)
    print(f"Processing {len(repos)} repos owned by {owner_login}...")

    saved: List[Path] = []
    for index, repo in enumerate(repos, start=1):
        print(f"\n[repo {index}/{len(repos)}] {repo.full_name}")
        saved.extend(
            await retry(
                lambda repo=repo: process_repo(
                    credential, repo, author_login, month, headers, config
                ),
                config.repo_attempts,
                label=f"export {repo.full_name}",
            )
        )
    print(f"\nSaved {len(saved)} screenshot(s) to {config.output_dir}")
    return saved


__all__ = ["capture_pull_request", "export_pull_requests", "process_repo"]
