"""Convenience shim to run the exporter CLI from a checkout."""

from __future__ import annotations

import sys

from src.cli import main


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
