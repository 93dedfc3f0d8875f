"""Pull-request diff export pipeline."""

from .runner import export_pull_requests, process_repo

__all__ = ["export_pull_requests", "process_repo"]
