"""
Keep exactly one managed comment on a pull request in sync with the report.

Decision table over (report, existing managed comment):
- report, no comment: create
- report, comment with identical body: nothing
- report, comment with other body: update
- no report, comment: delete
- no report, no comment: nothing

At most one mutation is issued per call.
"""

import logging
from enum import Enum
from typing import Iterable

from link_changed_markdown.adapters.base import ApiClient
from link_changed_markdown.models import ManagedComment, PullRequestContext

PER_PAGE = 100


class ReconcileAction(str, Enum):
    """What reconcile did to the managed comment."""

    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    DELETED = "deleted"
    NOTHING = "nothing"


def find_managed_comment(comments: Iterable[ManagedComment]) -> ManagedComment | None:
    """First comment carrying the marker, in API order."""
    return next((c for c in comments if c.is_managed), None)


class CommentReconciler:
    """Create, update or delete the managed comment to match a report."""

    def __init__(self, client: ApiClient, log: logging.Logger | None = None) -> None:
        self._client = client
        self._log = log or logging.getLogger(__name__)

    def find_existing(self, context: PullRequestContext) -> ManagedComment | None:
        # First page only, like the changed-files listing.
        data = self._client.get(context.comments_url, params={"per_page": PER_PAGE}) or []
        comment = find_managed_comment(ManagedComment.from_api(d) for d in data)
        if comment is not None:
            self._log.info("Found existing comment %s", comment.url)
        else:
            self._log.info("No existing comment")
        return comment

    def reconcile(self, context: PullRequestContext, report: str | None) -> ReconcileAction:
        existing = self.find_existing(context)

        if report is not None and existing is None:
            created = self._client.post(context.comments_url, {"body": report}) or {}
            self._log.info("Created comment %s", created.get("url", ""))
            return ReconcileAction.CREATED

        if report is not None and existing is not None:
            if existing.body == report:
                self._log.info("Comment is already correct")
                return ReconcileAction.UNCHANGED
            updated = self._client.patch(existing.url, {"body": report}) or {}
            self._log.info("Updated comment %s", updated.get("url", existing.url))
            return ReconcileAction.UPDATED

        if existing is not None:
            self._client.delete(existing.url)
            self._log.info("Deleted comment %s", existing.url)
            return ReconcileAction.DELETED

        self._log.info("Nothing to do")
        return ReconcileAction.NOTHING
