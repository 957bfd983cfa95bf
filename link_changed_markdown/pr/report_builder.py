"""
Build the Markdown report of changed Markdown files for a pull request.

The report starts with the marker line so the comment can be recognised
later, lists at most MAX_LISTED files sorted by filename and links each one
to its head and/or base branch version. No Markdown change means no report.
"""

import json
import logging
from typing import Iterable, List

from link_changed_markdown.adapters.base import ApiClient
from link_changed_markdown.models import MARKER, ChangeRecord, ChangeStatus, PullRequestContext

MAX_LISTED = 10
PER_PAGE = 100
TITLE = "Markdown changes in this PR:"


def select_markdown_changes(records: Iterable[ChangeRecord]) -> List[ChangeRecord]:
    """Keep Markdown files that were not renamed, sorted by filename (codepoint order)."""
    selected = [r for r in records if r.is_markdown and r.kind is not ChangeStatus.RENAMED]
    return sorted(selected, key=lambda r: r.filename)


def render_line(context: PullRequestContext, change: ChangeRecord) -> str:
    """One bullet for a change.

    Filenames are not URL-escaped; unusual characters in branch names or
    filenames can produce broken links.
    """
    filename = change.filename
    head_link = f"[{filename}]({context.head_blob_url}/{filename})"
    base_link = f"[view this on the base branch]({context.base_blob_url}/{filename})"

    kind = change.kind
    if kind is ChangeStatus.ADDED:
        return f"* added: {head_link}"
    if kind is ChangeStatus.MODIFIED:
        return f"* modified: {head_link} ({base_link})"
    if kind is ChangeStatus.REMOVED:
        return f"* removed: {filename} ({base_link})"
    return f"* ? {json.dumps(change.status, ensure_ascii=False)}"


def build_report(context: PullRequestContext, records: Iterable[ChangeRecord]) -> str | None:
    """Render the report for the given change records, or None if no Markdown changed."""
    changes = select_markdown_changes(records)
    if not changes:
        return None

    lines = [MARKER, "", TITLE, ""]
    lines.extend(render_line(context, change) for change in changes[:MAX_LISTED])
    if len(changes) > MAX_LISTED:
        lines.append(f"* and {len(changes) - MAX_LISTED} more")
    return "\n".join(lines) + "\n"


class ReportBuilder:
    """Fetch a pull request's changed files and render the report."""

    def __init__(self, client: ApiClient, log: logging.Logger | None = None) -> None:
        self._client = client
        self._log = log or logging.getLogger(__name__)

    def fetch_changes(self, context: PullRequestContext) -> List[ChangeRecord]:
        # Only the first page is read; PRs with more than PER_PAGE files are truncated.
        data = self._client.get(context.files_url, params={"per_page": PER_PAGE}) or []
        return [ChangeRecord.from_api(d) for d in data]

    def build(self, context: PullRequestContext) -> str | None:
        records = self.fetch_changes(context)
        changes = select_markdown_changes(records)
        self._log.info("Building comment about %s changed Markdown files", len(changes))
        return build_report(context, changes)
