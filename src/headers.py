"""Load the JSON headers file applied to every page load of a run."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

from .errors import HeadersFileError


def load_headers_file(path: Optional[str | Path]) -> Optional[Dict[str, str]]:
    """Read a `{"Header-Name": "value"}` JSON object; return None when no path is given."""
    if not path:
        return None
    headers_path = Path(path).expanduser()
    try:
        with headers_path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        raise HeadersFileError(f"cannot read headers file {headers_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise HeadersFileError(f"headers file {headers_path} must contain a JSON object")
    return {str(name): str(value) for name, value in data.items()}


__all__ = ["load_headers_file"]
