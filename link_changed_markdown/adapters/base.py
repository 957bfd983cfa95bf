"""Abstract REST client used by the report builder and comment reconciler."""

from abc import ABC, abstractmethod
from typing import Any, Dict

from link_changed_markdown.exceptions import LinkMarkdownError


class ApiError(LinkMarkdownError):
    """Raised when an API call fails or returns an unexpected status."""

    def __init__(
        self,
        message: str,
        method: str,
        url: str,
        status_code: int | None = None,
        expected_status: int | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.status_code = status_code
        self.expected_status = expected_status


class ApiClient(ABC):
    """Four JSON operations against absolute URLs, each one HTTP call."""

    @abstractmethod
    def get(self, url: str, params: Dict[str, Any] | None = None) -> Any:
        """GET url, expecting 200; return decoded JSON."""
        ...

    @abstractmethod
    def post(self, url: str, body: Dict[str, Any]) -> Any:
        """POST a JSON body, expecting 201; return decoded JSON."""
        ...

    @abstractmethod
    def patch(self, url: str, body: Dict[str, Any]) -> Any:
        """PATCH a JSON body, expecting 200; return decoded JSON."""
        ...

    @abstractmethod
    def delete(self, url: str) -> None:
        """DELETE url, expecting 204."""
        ...
