"""Central configuration constants for the GitHub REST listers."""

from __future__ import annotations

import os

USER_AGENT = "pr-diff-exporter/1.0"
BASE_URL = os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/")
PER_PAGE = 100  # GitHub's maximum page size
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "90"))
TRANSIENT_STATUSES = {429, 500, 502, 503, 504}

__all__ = [
    "USER_AGENT",
    "BASE_URL",
    "PER_PAGE",
    "REQUEST_TIMEOUT",
    "TRANSIENT_STATUSES",
]
