"""Tests for src.pipeline.config ensuring env overrides and defaults work.

Run with coverage to validate configuration handling:
    pytest tests/test_config.py --maxfail=1 -v --cov=src.pipeline.config --cov-report=term-missing
"""

from importlib import reload
from pathlib import Path

import src.pipeline.config as config
from src.capture.config import CaptureConfig
from src.retrieval import config as api_config


def test_config_defaults_are_present():
    assert config.DEFAULT_PDF_OUTPUT == "output.pdf"
    assert config.DEFAULT_SCREENSHOT_OUTPUT == "output.png"
    assert api_config.PER_PAGE == 100
    assert api_config.USER_AGENT.startswith("pr-diff-exporter")
    export = config.ExportConfig()
    assert export.output_dir == Path(".")
    assert (export.repo_attempts, export.listing_attempts, export.capture_attempts) == (5, 5, 5)
    assert export.capture == CaptureConfig()
    assert (export.capture.viewport_width, export.capture.viewport_height) == (1920, 1080)


def test_env_override_for_attempts(monkeypatch):
    monkeypatch.setenv("EXPORT_CAPTURE_ATTEMPTS", "2")
    monkeypatch.setenv("EXPORT_OUTPUT_DIR", "shots")
    reloaded = reload(config)
    try:
        export = reloaded.ExportConfig.from_env()
        assert export.capture_attempts == 2
        assert export.repo_attempts == 5
        assert export.output_dir == Path("shots")
        assert reloaded.ExportConfig.from_env("elsewhere").output_dir == Path("elsewhere")
    finally:
        monkeypatch.delenv("EXPORT_CAPTURE_ATTEMPTS", raising=False)
        monkeypatch.delenv("EXPORT_OUTPUT_DIR", raising=False)
        reload(config)
