"""Tests for src.retrieval.collectors covering the repository and PR listers.

Run with coverage to exercise the listing and filtering logic:
    pytest tests/test_collectors.py --maxfail=1 -v --cov=src.retrieval.collectors --cov-report=term-missing
"""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from src.errors import AuthenticationError
from src.retrieval import collectors


def _repo(name, owner):
    return {"name": name, "owner": {"login": owner}}


def _pr(number, author, created_at, assignee=None):
    return {
        "html_url": f"https://github.com/acme/widgets/pull/{number}",
        "number": number,
        "user": {"login": author} if author else None,
        "assignee": {"login": assignee} if assignee else None,
        "created_at": created_at,
    }


@patch("src.retrieval.collectors.paged_get", new_callable=AsyncMock)
def test_list_repositories_filters_by_owner_preserving_order(mock_paged):
    mock_paged.return_value = [_repo("one", "orgA"), _repo("two", "orgA"), _repo("three", "orgB")]
    repos = asyncio.run(collectors.list_repositories("tok", "orgA"))
    assert [r.name for r in repos] == ["one", "two"]
    assert all(r.owner_login == "orgA" for r in repos)
    assert mock_paged.call_args.args[0].endswith("/user/repos")
    assert mock_paged.call_args.args[1] == "tok"


@patch("src.retrieval.collectors.paged_get", new_callable=AsyncMock)
def test_list_repositories_propagates_auth_errors(mock_paged):
    mock_paged.side_effect = AuthenticationError("nope")
    with pytest.raises(AuthenticationError):
        asyncio.run(collectors.list_repositories("bad", "orgA"))


def test_to_pull_request_record_maps_fields():
    record = collectors.to_pull_request_record(
        _pr(7, "alice", "2024-05-10T08:00:00Z", assignee="bob"), "widgets"
    )
    assert record.number == 7
    assert record.repo_name == "widgets"
    assert record.author_login == "alice"
    assert record.assignee_login == "bob"
    assert record.url == "https://github.com/acme/widgets/pull/7"


def test_to_pull_request_record_without_author():
    record = collectors.to_pull_request_record(_pr(8, None, "2024-05-10T08:00:00Z"), "widgets")
    assert record.author_login is None


def test_filter_author_and_month_is_conjunctive():
    records = [
        collectors.to_pull_request_record(_pr(1, "A", "2024-01-15T00:00:00Z"), "r"),
        collectors.to_pull_request_record(_pr(2, "A", "2024-02-15T00:00:00Z"), "r"),
        collectors.to_pull_request_record(_pr(3, "B", "2024-01-15T00:00:00Z"), "r"),
    ]
    kept = collectors.filter_pull_requests(records, "A", "2024-01")
    assert [r.number for r in kept] == [1]


def test_filter_drops_records_without_author():
    records = [collectors.to_pull_request_record(_pr(1, None, "2024-01-15T00:00:00Z"), "r")]
    assert collectors.filter_pull_requests(records, "A", None) == []
    assert len(collectors.filter_pull_requests(records, None, None)) == 1


@patch("src.retrieval.collectors.paged_get", new_callable=AsyncMock)
def test_list_pull_requests_filters_after_full_pagination(mock_paged):
    mock_paged.return_value = [
        _pr(i, "alice" if i % 2 else "bob", "2024-05-10T08:00:00Z") for i in range(237)
    ]
    records = asyncio.run(
        collectors.list_pull_requests("tok", "acme", "widgets", "alice", "2024-05")
    )
    assert len(records) == 118
    url = mock_paged.call_args.args[0]
    assert url.endswith("/repos/acme/widgets/pulls?state=all")


@patch("src.retrieval.collectors.paged_get", new_callable=AsyncMock)
def test_list_pull_requests_without_filters_returns_everything(mock_paged):
    mock_paged.return_value = [_pr(1, None, "2023-01-01T00:00:00Z"), _pr(2, "x", "2024-05-01T00:00:00Z")]
    records = asyncio.run(collectors.list_pull_requests("tok", "acme", "widgets"))
    assert [r.number for r in records] == [1, 2]


@patch("src.retrieval.collectors.paged_get", new_callable=AsyncMock)
def test_list_pull_requests_rejects_bad_month_before_fetching(mock_paged):
    with pytest.raises(ValueError):
        asyncio.run(collectors.list_pull_requests("tok", "acme", "widgets", None, "May"))
    mock_paged.assert_not_called()
