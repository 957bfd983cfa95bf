"""Strict key lookup for JSON payloads."""

from typing import Any

from link_changed_markdown.exceptions import PayloadError


def fetch_key(data: Any, *keys: str, source: str = "payload") -> Any:
    """Walk nested dicts by keys, raising PayloadError on the first missing one.

    The error names the dotted path up to and including the missing key,
    e.g. ``fetch_key(event, "pull_request", "base", "ref")`` reports
    ``pull_request.base.ref``.
    """
    current = data
    for depth, key in enumerate(keys, 1):
        if not isinstance(current, dict) or key not in current:
            raise PayloadError(".".join(keys[:depth]), source)
        current = current[key]
    return current
