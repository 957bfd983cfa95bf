"""Pull request context extracted from a pull_request event payload."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict

from link_changed_markdown.models.payload import fetch_key


class PullRequestContext(BaseModel):
    """Endpoints and branch locations for one pull request.

    Extracted once per run; ``files_url`` is the PR API URL plus ``/files``.
    """

    model_config = ConfigDict(frozen=True)

    files_url: str
    comments_url: str
    base_ref: str
    base_repo_url: str
    head_ref: str
    head_repo_url: str

    @property
    def base_blob_url(self) -> str:
        return f"{self.base_repo_url}/blob/{self.base_ref}"

    @property
    def head_blob_url(self) -> str:
        return f"{self.head_repo_url}/blob/{self.head_ref}"

    @classmethod
    def from_event(cls, event: Dict[str, Any]) -> "PullRequestContext":
        """Build context from the webhook event; missing keys raise PayloadError."""

        def get(*keys: str) -> Any:
            return fetch_key(event, "pull_request", *keys, source="event payload")

        return cls(
            files_url=f"{get('url')}/files",
            comments_url=get("comments_url"),
            base_ref=get("base", "ref"),
            base_repo_url=get("base", "repo", "html_url"),
            head_ref=get("head", "ref"),
            head_repo_url=get("head", "repo", "html_url"),
        )
