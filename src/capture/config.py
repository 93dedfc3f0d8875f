"""Browser settings and output defaults for page captures."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

VIEWPORT_WIDTH = 1920
VIEWPORT_HEIGHT = 1080
CAPTURE_TIMEOUT_MS = int(os.getenv("CAPTURE_TIMEOUT_MS", "30000"))
DEFAULT_PDF_OUTPUT = "output.pdf"
DEFAULT_SCREENSHOT_OUTPUT = "output.png"


@dataclass(frozen=True)
class CaptureConfig:
    viewport_width: int = VIEWPORT_WIDTH
    viewport_height: int = VIEWPORT_HEIGHT
    timeout_ms: int = CAPTURE_TIMEOUT_MS
    wait_until: str = "load"


@dataclass(frozen=True)
class CaptureRequest:
    """One `save-pdf` / `save-screenshot` invocation."""

    url: str
    output: str = DEFAULT_PDF_OUTPUT
    headers_file: Optional[str] = None

    @classmethod
    def for_pdf(cls, url: str, output: Optional[str] = None,
                headers_file: Optional[str] = None) -> "CaptureRequest":
        return cls(url=url, output=output or DEFAULT_PDF_OUTPUT, headers_file=headers_file)

    @classmethod
    def for_screenshot(cls, url: str, output: Optional[str] = None,
                       headers_file: Optional[str] = None) -> "CaptureRequest":
        return cls(url=url, output=output or DEFAULT_SCREENSHOT_OUTPUT, headers_file=headers_file)


__all__ = [
    "CAPTURE_TIMEOUT_MS",
    "CaptureConfig",
    "CaptureRequest",
    "DEFAULT_PDF_OUTPUT",
    "DEFAULT_SCREENSHOT_OUTPUT",
    "VIEWPORT_HEIGHT",
    "VIEWPORT_WIDTH",
]
