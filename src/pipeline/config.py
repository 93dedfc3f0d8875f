"""Configuration for the export pipeline."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from src.capture.config import DEFAULT_PDF_OUTPUT, DEFAULT_SCREENSHOT_OUTPUT, CaptureConfig
from src.retry import DEFAULT_MAX_ATTEMPTS

REPO_ATTEMPTS = int(os.getenv("EXPORT_REPO_ATTEMPTS", str(DEFAULT_MAX_ATTEMPTS)))
LISTING_ATTEMPTS = int(os.getenv("EXPORT_LISTING_ATTEMPTS", str(DEFAULT_MAX_ATTEMPTS)))
CAPTURE_ATTEMPTS = int(os.getenv("EXPORT_CAPTURE_ATTEMPTS", str(DEFAULT_MAX_ATTEMPTS)))
OUTPUT_DIR = os.getenv("EXPORT_OUTPUT_DIR", ".")


@dataclass(frozen=True)
class ExportConfig:
    """Retry budgets and output location for one export run.

    The three budgets map to the nested retry scopes: the whole repository,
    the PR listing inside it, and each screenshot.
    """

    output_dir: Path = Path(".")
    repo_attempts: int = DEFAULT_MAX_ATTEMPTS
    listing_attempts: int = DEFAULT_MAX_ATTEMPTS
    capture_attempts: int = DEFAULT_MAX_ATTEMPTS
    capture: CaptureConfig = field(default_factory=CaptureConfig)

    @classmethod
    def from_env(cls, output_dir: Optional[str] = None) -> "ExportConfig":
        return cls(
            output_dir=Path(output_dir or OUTPUT_DIR),
            repo_attempts=REPO_ATTEMPTS,
            listing_attempts=LISTING_ATTEMPTS,
            capture_attempts=CAPTURE_ATTEMPTS,
        )


__all__ = [
    "CAPTURE_ATTEMPTS",
    "DEFAULT_PDF_OUTPUT",
    "DEFAULT_SCREENSHOT_OUTPUT",
    "ExportConfig",
    "LISTING_ATTEMPTS",
    "OUTPUT_DIR",
    "REPO_ATTEMPTS",
]
