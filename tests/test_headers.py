"""Tests for src.headers loading the JSON headers file."""

import json

import pytest

from src.errors import HeadersFileError
from src.headers import load_headers_file


def test_load_headers_file_returns_string_mapping(tmp_path):
    path = tmp_path / "headers.json"
    path.write_text(json.dumps({"Cookie": "user_session=abc", "X-Count": 3}))
    assert load_headers_file(path) == {"Cookie": "user_session=abc", "X-Count": "3"}


def test_load_headers_file_none_when_no_path():
    assert load_headers_file(None) is None


def test_load_headers_file_rejects_non_object(tmp_path):
    path = tmp_path / "headers.json"
    path.write_text("[1, 2]")
    with pytest.raises(HeadersFileError):
        load_headers_file(path)


def test_load_headers_file_missing_or_invalid(tmp_path):
    with pytest.raises(HeadersFileError):
        load_headers_file(tmp_path / "missing.json")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(HeadersFileError):
        load_headers_file(bad)
