"""Data models for changed files, pull request context and comments (Pydantic)."""

from link_changed_markdown.models.change import MARKDOWN_SUFFIX, ChangeRecord, ChangeStatus
from link_changed_markdown.models.comment import MARKER, ManagedComment
from link_changed_markdown.models.context import PullRequestContext
from link_changed_markdown.models.payload import fetch_key

__all__ = [
    "MARKDOWN_SUFFIX",
    "MARKER",
    "ChangeRecord",
    "ChangeStatus",
    "ManagedComment",
    "PullRequestContext",
    "fetch_key",
]
