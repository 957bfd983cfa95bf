"""Changed-file record from the pull request files endpoint."""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict

from link_changed_markdown.models.payload import fetch_key

MARKDOWN_SUFFIX = ".md"


class ChangeStatus(str, Enum):
    """Status of a file relative to the base branch.

    GitHub may report values not listed here (copied, changed, ...); those
    map to UNKNOWN and keep their raw text on the record.
    """

    ADDED = "added"
    MODIFIED = "modified"
    REMOVED = "removed"
    RENAMED = "renamed"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str) -> "ChangeStatus":
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class ChangeRecord(BaseModel):
    """One entry of the changed-files listing."""

    model_config = ConfigDict(frozen=True)

    filename: str
    status: str

    @property
    def kind(self) -> ChangeStatus:
        return ChangeStatus.parse(self.status)

    @property
    def is_markdown(self) -> bool:
        return self.filename.endswith(MARKDOWN_SUFFIX)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ChangeRecord":
        source = "changed-file record"
        return cls(
            filename=fetch_key(data, "filename", source=source),
            status=fetch_key(data, "status", source=source),
        )
