"""Mini README: HTTP transport for the budgeting REST API.

Structure:
    * ApiError - failure reported by the service or the network.
    * YnabClient - bearer-authenticated JSON client built on requests.

Every successful response wraps its payload in a ``data`` member; the client
returns that member so endpoint bindings deal only with resource payloads.
Errors are parsed from the ``{"error": {"id", "name", "detail"}}`` envelope.
There is no retry logic: a failed request aborts the running command.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import requests

from ..configuration import DEFAULT_BASE_URL
from ..errors import ClinabError
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class ApiError(ClinabError):
    """Non-success response (or transport failure, status 0)."""

    def __init__(self, status_code: int, error_id: str, error_name: str, detail: str) -> None:
        super().__init__(f"YNAB API Error ({status_code}): {detail}")
        self.status_code = status_code
        self.error_id = error_id
        self.error_name = error_name
        self.detail = detail

    @classmethod
    def from_response(cls, response: requests.Response) -> "ApiError":
        """Parse the error envelope, falling back to the HTTP status line."""

        try:
            error = response.json()["error"]
            return cls(
                response.status_code,
                str(error.get("id", "unknown")),
                str(error.get("name", "unknown")),
                str(error.get("detail", "")),
            )
        except (ValueError, KeyError, TypeError, AttributeError):
            return cls(
                response.status_code,
                "unknown",
                "unknown",
                f"HTTP {response.status_code}: {response.reason}",
            )


class YnabClient:
    """Thin JSON client adding authentication and envelope handling."""

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )
        LOGGER.debug("API client initialised for %s", self.base_url)

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> Any:
        """Send a request and return the ``data`` member of the response."""

        url = f"{self.base_url}{path}"
        query = _drop_none(params)
        LOGGER.debug("%s %s params=%s", method, path, query)
        try:
            response = self.session.request(
                method,
                url,
                params=query or None,
                json=body,
                timeout=self.timeout,
            )
        except requests.RequestException as error:
            raise ApiError(0, "network", "network_error", str(error)) from error

        if not response.ok:
            raise ApiError.from_response(response)
        try:
            return response.json().get("data")
        except (ValueError, AttributeError) as error:
            raise ApiError(
                response.status_code,
                "unknown",
                "unknown",
                f"Unexpected non-JSON response from {path}",
            ) from error

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, body: Any) -> Any:
        return self.request("POST", path, body=body)

    def put(self, path: str, body: Any) -> Any:
        return self.request("PUT", path, body=body)

    def patch(self, path: str, body: Any) -> Any:
        return self.request("PATCH", path, body=body)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    def close(self) -> None:
        self.session.close()


def _drop_none(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Remove unset query parameters and stringify booleans the API way."""

    query: Dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        query[key] = str(value).lower() if isinstance(value, bool) else str(value)
    return query
