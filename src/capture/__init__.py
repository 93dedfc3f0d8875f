"""Headless-browser page capture."""

from .browser import capture_pdf, capture_screenshot

__all__ = ["capture_pdf", "capture_screenshot"]
