"""REST clients (base and GitHub implementation)."""

from link_changed_markdown.adapters.base import ApiClient, ApiError
from link_changed_markdown.adapters.github import GitHubClient

__all__ = ["ApiClient", "ApiError", "GitHubClient"]
