"""Shared test fixtures for link-changed-markdown."""

import copy
import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from link_changed_markdown.models import PullRequestContext

PR_URL = "https://api.github.com/repos/octo-org/docs-site/pulls/1"
COMMENTS_URL = "https://api.github.com/repos/octo-org/docs-site/issues/1/comments"
HTML_URL = "https://github.com/octo-org/docs-site"
HEAD_BLOB = f"{HTML_URL}/blob/feature/md-test"
BASE_BLOB = f"{HTML_URL}/blob/main"

_EVENT: Dict[str, Any] = {
    "action": "opened",
    "number": 1,
    "pull_request": {
        "url": PR_URL,
        "id": 1001,
        "html_url": f"{HTML_URL}/pull/1",
        "comments_url": COMMENTS_URL,
        "number": 1,
        "state": "open",
        "title": "Update docs",
        "user": {"login": "octocat"},
        "head": {
            "label": "octo-org:feature/md-test",
            "ref": "feature/md-test",
            "sha": "3f2a1c9",
            "repo": {"full_name": "octo-org/docs-site", "html_url": HTML_URL},
        },
        "base": {
            "label": "octo-org:main",
            "ref": "main",
            "sha": "9b8e7d6",
            "repo": {"full_name": "octo-org/docs-site", "html_url": HTML_URL},
        },
    },
    "repository": {"full_name": "octo-org/docs-site", "html_url": HTML_URL},
}

_FILES: List[Dict[str, Any]] = [
    {"sha": "a1", "filename": "README.md", "status": "modified", "additions": 2, "deletions": 1},
    {"sha": "b2", "filename": "src/app.py", "status": "modified", "additions": 5, "deletions": 0},
    {"sha": "c3", "filename": "new.md", "status": "added", "additions": 10, "deletions": 0},
]

_COMMENTS: List[Dict[str, Any]] = [
    {
        "id": 11,
        "url": "https://api.github.com/repos/octo-org/docs-site/issues/comments/11",
        "body": "Looks good to me",
        "user": {"login": "reviewer"},
    },
    {
        "id": 12,
        "url": "https://api.github.com/repos/octo-org/docs-site/issues/comments/12",
        "body": "<!-- link-changed-markdown -->\n\nMarkdown changes in this PR:\n\n* added: [x.md](x)\n",
        "user": {"login": "github-actions[bot]"},
    },
]


@pytest.fixture
def pr_event() -> Dict[str, Any]:
    """pull_request opened event payload (trimmed to realistic keys)."""
    return copy.deepcopy(_EVENT)


@pytest.fixture
def pr_files() -> List[Dict[str, Any]]:
    """Changed-files listing for the PR."""
    return copy.deepcopy(_FILES)


@pytest.fixture
def pr_comments() -> List[Dict[str, Any]]:
    """Comments listing with one ordinary and one managed comment."""
    return copy.deepcopy(_COMMENTS)


@pytest.fixture
def context(pr_event: Dict[str, Any]) -> PullRequestContext:
    return PullRequestContext.from_event(pr_event)


@pytest.fixture
def event_file(tmp_path: Path, pr_event: Dict[str, Any]) -> Path:
    path = tmp_path / "event.json"
    path.write_text(json.dumps(pr_event))
    return path


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove GitHub/credential env vars that CI may set."""
    for key in (
        "GITHUB_TOKEN",
        "GITHUB_TOKEN_FILE",
        "GITHUB_EVENT_PATH",
        "GITHUB_API_URL",
        "GITHUB_TIMEOUT",
        "DEBUG_CREDENTIALS_PATH",
        "LOGGING_LEVEL",
        "LOGGING_FORMAT",
    ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
