"""Command-line entry point for listing, capturing and exporting pull requests."""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from typing import List, Optional

from playwright.async_api import Error as PlaywrightError

from src.capture import capture_pdf, capture_screenshot
from src.capture.config import CaptureRequest
from src.errors import ExportError
from src.headers import load_headers_file
from src.pipeline.config import ExportConfig
from src.pipeline.runner import export_pull_requests
from src.retrieval.collectors import list_pull_requests, list_repositories

ANY = "-"


def resolve_credential(value: str) -> str:
    """`-` reads the token from GITHUB_TOKEN."""
    if value != ANY:
        return value
    token = os.getenv("GITHUB_TOKEN")
    if not token:
        raise ExportError("credential '-' given but GITHUB_TOKEN is not set")
    return token


def _optional(value: Optional[str]) -> Optional[str]:
    return None if value in (None, "", ANY) else value


async def _list_repos(args: argparse.Namespace) -> None:
    for repo in await list_repositories(resolve_credential(args.credential), args.owner):
        print(repo.full_name)


async def _list_prs(args: argparse.Namespace) -> None:
    credential = resolve_credential(args.credential)
    author = _optional(args.author)
    for repo in await list_repositories(credential, args.owner):
        records = await list_pull_requests(
            credential, repo.owner_login, repo.name, author, _optional(args.month)
        )
        for record in records:
            print(f"{record.repo_name}#{record.number} {record.created_at.isoformat()} {record.url}")


async def _export_prs(args: argparse.Namespace) -> None:
    await export_pull_requests(
        resolve_credential(args.credential),
        args.owner,
        _optional(args.author),
        _optional(args.month),
        load_headers_file(args.headers_file),
        ExportConfig.from_env(args.output_dir),
    )


async def _save_pdf(args: argparse.Namespace) -> None:
    request = CaptureRequest.for_pdf(args.url, args.output, args.headers_file)
    await capture_pdf(request.url, request.output, load_headers_file(request.headers_file))


async def _save_screenshot(args: argparse.Namespace) -> None:
    request = CaptureRequest.for_screenshot(args.url, args.output, args.headers_file)
    await capture_screenshot(request.url, request.output, load_headers_file(request.headers_file))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pr-export",
        description="Export GitHub pull request diff views as screenshots.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("list-repos", help="List repositories owned by OWNER.")
    p.add_argument("credential", help="GitHub token, or '-' to read GITHUB_TOKEN")
    p.add_argument("owner")
    p.set_defaults(handler=_list_repos)

    p = sub.add_parser("list-prs", help="List pull requests by AUTHOR created in MONTH.")
    p.add_argument("credential")
    p.add_argument("owner")
    p.add_argument("author", help="PR author login, or '-' for any author")
    p.add_argument("month", help="YYYY-MM, or '-' for any month")
    p.set_defaults(handler=_list_prs)

    p = sub.add_parser("export-prs", help="Screenshot the diff view of every matching PR.")
    p.add_argument("credential")
    p.add_argument("owner")
    p.add_argument("author", help="PR author login, or '-' for any author")
    p.add_argument("month", help="YYYY-MM")
    p.add_argument("--headers-file", help="JSON object of extra HTTP headers for page loads")
    p.add_argument("--output-dir", help="directory for <repo>#<number>.png files")
    p.set_defaults(handler=_export_prs)

    p = sub.add_parser("save-pdf", help="Save a page as PDF.")
    p.add_argument("url")
    p.add_argument("--output", help="defaults to output.pdf")
    p.add_argument("--headers-file")
    p.set_defaults(handler=_save_pdf)

    p = sub.add_parser("save-screenshot", help="Save a full-page screenshot.")
    p.add_argument("url")
    p.add_argument("--output", help="defaults to output.png")
    p.add_argument("--headers-file")
    p.set_defaults(handler=_save_screenshot)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        asyncio.run(args.handler(args))
    except (ExportError, PlaywrightError, ValueError) as exc:
        print(f"[error] {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
