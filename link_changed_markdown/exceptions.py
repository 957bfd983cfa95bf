"""Exceptions for link-changed-markdown."""


class LinkMarkdownError(Exception):
    """Base exception for all link-changed-markdown errors."""


class ConfigError(LinkMarkdownError):
    """Missing credentials, event file or other configuration problems."""


class PayloadError(LinkMarkdownError):
    """A required key is missing from an event payload or API record."""

    def __init__(self, path: str, source: str) -> None:
        super().__init__(f"missing key '{path}' in {source}")
        self.path = path
        self.source = source
