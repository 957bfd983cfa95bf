"""link-changed-markdown entry point.

Run on a pull_request event (e.g. from a GitHub Actions workflow): lists the
Markdown files the PR changes and keeps one comment on the PR describing them.
Usage: link-changed-markdown [--config PATH] [--event PATH] [--dry-run] [--check]
"""

import argparse
import logging
import sys
from pathlib import Path

from link_changed_markdown.adapters import GitHubClient
from link_changed_markdown.config import AppConfig, load_config
from link_changed_markdown.event import load_event
from link_changed_markdown.exceptions import LinkMarkdownError
from link_changed_markdown.logging import AppLogging
from link_changed_markdown.models import PullRequestContext
from link_changed_markdown.pr import CommentReconciler, ReconcileAction, ReportBuilder


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="link-changed-markdown",
        description="Comment on a pull request with links to its changed Markdown files",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file (optional)",
    )
    parser.add_argument(
        "--event",
        "-e",
        type=Path,
        default=None,
        help="Path to the pull_request event JSON (default: GITHUB_EVENT_PATH)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the report instead of updating the PR comment",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Load config and resolve credentials, then exit",
    )
    return parser.parse_args(argv)


def make_client(config: AppConfig) -> GitHubClient:
    """Build the one API client shared by the builder and the reconciler."""
    creds = config.credentials()
    return GitHubClient(
        token=creds.token,
        basic_auth=creds.basic_auth,
        timeout=config.github.timeout,
    )


def run(config: AppConfig, event_path: Path | None = None, dry_run: bool = False) -> ReconcileAction | None:
    """Build the report and reconcile the managed comment.

    Returns the action taken, or None on a dry run.
    """
    log = logging.getLogger("link_changed_markdown.run")
    event = load_event(config.event_path_resolved(event_path))
    context = PullRequestContext.from_event(event)
    client = make_client(config)
    try:
        report = ReportBuilder(client).build(context)
        if dry_run:
            print(report if report is not None else "No Markdown changes; no comment needed.")
            return None
        action = CommentReconciler(client).reconcile(context, report)
        log.info("Done: %s", action.value)
        return action
    finally:
        client.close()


def main(argv: list[str] | None = None) -> int:
    """Entry point for link-changed-markdown."""
    args = parse_args(argv)
    config = load_config(args.config)
    AppLogging(config.logging).setup()
    log = logging.getLogger("link_changed_markdown.main")

    if args.check:
        try:
            creds = config.credentials()
        except LinkMarkdownError as e:
            log.error("%s", e)
            return 1
        print("Config OK:", "basic auth" if creds.basic_auth else "token")
        return 0

    try:
        run(config, event_path=args.event, dry_run=args.dry_run)
    except LinkMarkdownError as e:
        log.error("%s", e)
        return 1
    except Exception as e:
        log.exception("Fatal error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
