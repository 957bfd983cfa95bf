"""GitHub REST API client."""

import logging
from typing import Any, Dict

import requests

from link_changed_markdown.adapters.base import ApiClient, ApiError

ACCEPT = "application/vnd.github.v3+json"

logger = logging.getLogger(__name__)


class GitHubClient(ApiClient):
    """GitHub API implementation over a single requests session.

    Authenticate with a bearer ``token`` or, for local debugging, with
    ``basic_auth=(user, password)``.
    """

    def __init__(
        self,
        token: str | None = None,
        basic_auth: tuple[str, str] | None = None,
        timeout: float = 30,
    ) -> None:
        self._timeout = timeout
        self._session = requests.Session()
        self._session.headers["Accept"] = ACCEPT
        if basic_auth is not None:
            self._session.auth = basic_auth
        elif token:
            self._session.headers["Authorization"] = f"Bearer {token}"

    def _request(
        self,
        method: str,
        url: str,
        expected_status: int,
        params: Dict[str, Any] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> Any:
        logger.debug("%s %s", method, url)
        try:
            resp = self._session.request(method, url, params=params, json=json, timeout=self._timeout)
        except requests.RequestException as e:
            raise ApiError(f"{method} {url} -> {e}", method, url) from e
        if resp.status_code != expected_status:
            raise ApiError(
                f"{method} {url} -> HTTP {resp.status_code} {resp.reason or ''}".rstrip()
                + f" (expected {expected_status})",
                method,
                url,
                status_code=resp.status_code,
                expected_status=expected_status,
            )
        if not resp.content:
            return None
        return resp.json()

    def get(self, url: str, params: Dict[str, Any] | None = None) -> Any:
        return self._request("GET", url, 200, params=params)

    def post(self, url: str, body: Dict[str, Any]) -> Any:
        return self._request("POST", url, 201, json=body)

    def patch(self, url: str, body: Dict[str, Any]) -> Any:
        return self._request("PATCH", url, 200, json=body)

    def delete(self, url: str) -> None:
        self._request("DELETE", url, 204)

    def close(self) -> None:
        self._session.close()
