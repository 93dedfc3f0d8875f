"""HTTP helpers that classify GitHub REST responses and walk paginated listings.

Nothing here retries: failures are raised as typed errors so that the caller
can wrap whole operations in ``src.retry.retry``.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List

import requests

from src.errors import ApiError, AuthenticationError, TransientError

from .config import BASE_URL, PER_PAGE, REQUEST_TIMEOUT, TRANSIENT_STATUSES, USER_AGENT

SESSION = requests.Session()
SESSION.headers.update(
    {
        "Accept": "application/vnd.github+json",
        "User-Agent": USER_AGENT,
    }
)


def auth_headers(credential: str) -> Dict[str, str]:
    """Per-request Authorization header for a bearer credential."""
    return {"Authorization": f"Bearer {credential}"}


def log_http_error(resp: requests.Response, url: str) -> str:
    """Print a short, human-readable message when GitHub returns an error."""
    try:
        body = resp.json()
    except Exception:
        body = {"text": (resp.text or "")[:300]}
    if not isinstance(body, dict):
        body = {"text": str(body)[:300]}
    msg = body.get("message") or body.get("error") or body.get("text")
    print(f"[error] HTTP {resp.status_code} for {url}\n  -> {msg}")
    return str(msg or "")


def is_rate_limited(resp: requests.Response) -> bool:
    """True for 429s and for 403s that carry an exhausted rate-limit budget."""
    if resp.status_code == 429:
        return True
    if resp.status_code != 403:
        return False
    headers = resp.headers or {}
    return headers.get("X-RateLimit-Remaining") == "0" or bool(headers.get("Retry-After"))


def request_json(method: str, url: str, credential: str, **kwargs) -> Any:
    """Perform a single REST call and return the decoded JSON body."""
    timeout = kwargs.pop("timeout", REQUEST_TIMEOUT)
    headers = dict(kwargs.pop("headers", None) or {})
    headers.update(auth_headers(credential))
    try:
        resp = SESSION.request(method, url, headers=headers, timeout=timeout, **kwargs)
    except requests.RequestException as exc:
        raise TransientError(f"{method} {url}: {exc}") from exc

    if 200 <= resp.status_code < 300:
        return resp.json()

    msg = log_http_error(resp, url)
    if resp.status_code == 401:
        raise AuthenticationError(f"credential rejected for {url}: {msg}")
    if is_rate_limited(resp):
        raise TransientError(f"rate limited on {url}: {msg}", resp.status_code)
    if resp.status_code in TRANSIENT_STATUSES:
        raise TransientError(f"HTTP {resp.status_code} for {url}: {msg}", resp.status_code)
    raise ApiError(f"HTTP {resp.status_code} for {url}: {msg}", resp.status_code)


async def fetch_json(url: str, credential: str) -> Any:
    """Run a blocking GET on a worker thread so the event loop stays free."""
    return await asyncio.to_thread(request_json, "GET", url, credential)


def api_url(path: str) -> str:
    return f"{BASE_URL}/{path.lstrip('/')}"


async def paged_get(url: str, credential: str) -> List[Dict[str, Any]]:
    """Fetch every page of a listing until GitHub returns an empty or short page."""
    results: List[Dict[str, Any]] = []
    page = 1
    while True:
        sep = "&" if "?" in url else "?"
        page_url = f"{url}{sep}per_page={PER_PAGE}&page={page}"
        batch = await fetch_json(page_url, credential)
        if not isinstance(batch, list) or not batch:
            break

        results.extend(batch)
        if len(batch) < PER_PAGE:
            break

        page += 1
    return results


__all__ = [
    "SESSION",
    "api_url",
    "auth_headers",
    "fetch_json",
    "is_rate_limited",
    "log_http_error",
    "paged_get",
    "request_json",
]
