"""Issue comment on a pull request."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict

from link_changed_markdown.models.payload import fetch_key

MARKER = "<!-- link-changed-markdown -->"


class ManagedComment(BaseModel):
    """Comment as returned by the comments endpoint (url is its identifier)."""

    model_config = ConfigDict(frozen=True)

    url: str
    body: str

    @property
    def is_managed(self) -> bool:
        """True when the body carries the marker, i.e. this tool owns it."""
        return MARKER in self.body

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ManagedComment":
        source = "comment record"
        return cls(
            url=fetch_key(data, "url", source=source),
            body=fetch_key(data, "body", source=source) or "",
        )
