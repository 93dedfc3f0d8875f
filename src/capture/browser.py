"""Render web pages to PDF or PNG with a throwaway headless Chromium."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Union

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page, async_playwright

from src.errors import NavigationError
from .config import CaptureConfig

PathLike = Union[str, Path]


async def _navigate(page: Page, url: str, config: CaptureConfig) -> None:
    try:
        response = await page.goto(url, wait_until=config.wait_until, timeout=config.timeout_ms)
    except PlaywrightError as exc:
        raise NavigationError(url, str(exc)) from exc
    if response is not None and response.status >= 400:
        raise NavigationError(url, f"HTTP {response.status}")


async def _capture(url: str,
                   output_path: PathLike,
                   headers: Optional[Dict[str, str]],
                   config: CaptureConfig,
                   *,
                   as_pdf: bool) -> Path:
    path = Path(output_path)
    async with async_playwright() as playwright:
        browser = await playwright.chromium.launch(headless=True)
        try:
            page = await browser.new_page()
            if headers:
                await page.set_extra_http_headers(headers)
            if not as_pdf:
                await page.set_viewport_size(
                    {"width": config.viewport_width, "height": config.viewport_height}
                )
            await _navigate(page, url, config)
            if as_pdf:
                await page.pdf(path=str(path))
            else:
                await page.screenshot(path=str(path), full_page=True)
        finally:
            await browser.close()
    return path


async def capture_pdf(url: str,
                      output_path: PathLike,
                      headers: Optional[Dict[str, str]] = None,
                      config: Optional[CaptureConfig] = None) -> Path:
    """Save `url` as a PDF using the browser's default print layout."""
    path = await _capture(url, output_path, headers, config or CaptureConfig(), as_pdf=True)
    print(f"[saved] {url} -> {path}")
    return path


async def capture_screenshot(url: str,
                             output_path: PathLike,
                             headers: Optional[Dict[str, str]] = None,
                             config: Optional[CaptureConfig] = None) -> Path:
    """Save a full-page PNG of `url` rendered in a 1920x1080 viewport."""
    path = await _capture(url, output_path, headers, config or CaptureConfig(), as_pdf=False)
    print(f"[saved] {url} -> {path}")
    return path


__all__ = ["capture_pdf", "capture_screenshot"]
