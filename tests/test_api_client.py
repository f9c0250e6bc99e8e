"""Mini README: Tests for the HTTP transport and endpoint bindings.

Structure:
    * StubSession - stands in for ``requests.Session`` and records requests.
    * YnabClient tests - envelope unwrapping, query cleanup and error parsing.
    * YnabApi tests - paths, request bodies and resource unwrapping.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
import requests

from clinab.api import ApiError, YnabApi, YnabClient


class StubResponse:
    """Minimal response object exposing the attributes the client reads."""

    def __init__(self, status_code: int, payload: Any = None, reason: str = "OK") -> None:
        self.status_code = status_code
        self.reason = reason
        self._payload = payload

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class StubSession:
    """Record outgoing requests and replay queued responses."""

    def __init__(self, *responses: Any) -> None:
        self.headers: Dict[str, str] = {}
        self.calls: List[Dict[str, Any]] = []
        self._responses = list(responses)
        self.closed = False

    def request(self, method: str, url: str, **kwargs: Any) -> StubResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True


def _client(*responses: Any, base_url: str = "https://example.test/v1/") -> YnabClient:
    return YnabClient("secret-token", base_url=base_url, session=StubSession(*responses))


def _calls(client: YnabClient) -> List[Dict[str, Any]]:
    return client.session.calls  # type: ignore[attr-defined]


def test_client_sets_bearer_headers() -> None:
    client = _client()
    assert client.session.headers["Authorization"] == "Bearer secret-token"
    assert client.session.headers["Accept"] == "application/json"


def test_request_unwraps_data_member() -> None:
    client = _client(StubResponse(200, {"data": {"user": {"id": "u-1"}}}))
    assert client.get("/user") == {"user": {"id": "u-1"}}

    call = _calls(client)[0]
    assert call["method"] == "GET"
    assert call["url"] == "https://example.test/v1/user"
    assert call["params"] is None
    assert call["json"] is None
    assert call["timeout"] == 30.0


def test_request_drops_unset_params_and_lowercases_booleans() -> None:
    client = _client(StubResponse(200, {"data": {}}))
    client.get(
        "/budgets",
        {"include_accounts": True, "last_knowledge_of_server": None, "since_date": "2024-01-01"},
    )
    assert _calls(client)[0]["params"] == {
        "include_accounts": "true",
        "since_date": "2024-01-01",
    }


def test_error_envelope_becomes_api_error() -> None:
    payload = {"error": {"id": "404.2", "name": "resource_not_found", "detail": "Resource not found"}}
    client = _client(StubResponse(404, payload, reason="Not Found"))

    with pytest.raises(ApiError) as excinfo:
        client.get("/budgets/missing")

    error = excinfo.value
    assert error.status_code == 404
    assert error.error_id == "404.2"
    assert error.error_name == "resource_not_found"
    assert error.detail == "Resource not found"
    assert str(error) == "YNAB API Error (404): Resource not found"


def test_non_json_error_falls_back_to_status_line() -> None:
    client = _client(StubResponse(502, None, reason="Bad Gateway"))

    with pytest.raises(ApiError) as excinfo:
        client.get("/user")

    assert excinfo.value.error_id == "unknown"
    assert excinfo.value.detail == "HTTP 502: Bad Gateway"


def test_network_failure_is_reported_with_status_zero() -> None:
    client = _client(requests.ConnectionError("connection refused"))

    with pytest.raises(ApiError) as excinfo:
        client.get("/user")

    assert excinfo.value.status_code == 0
    assert excinfo.value.error_name == "network_error"
    assert "connection refused" in excinfo.value.detail


def test_close_closes_session() -> None:
    client = _client()
    client.close()
    assert client.session.closed  # type: ignore[attr-defined]


def test_api_unwraps_resource_members() -> None:
    client = _client(
        StubResponse(200, {"data": {"budgets": [{"id": "b1", "name": "Household"}]}}),
        StubResponse(200, {"data": {"account": {"id": "a1", "balance": 1000}}}),
    )
    api = YnabApi(client)

    assert api.list_budgets() == [{"id": "b1", "name": "Household"}]
    assert api.get_account("b1", "a1") == {"id": "a1", "balance": 1000}
    assert _calls(client)[1]["url"].endswith("/budgets/b1/accounts/a1")


def test_list_methods_pass_server_knowledge_and_return_raw_mapping() -> None:
    raw = {"data": {"accounts": [], "server_knowledge": 42}}
    client = _client(StubResponse(200, raw))
    api = YnabApi(client)

    assert api.list_accounts("b1", server_knowledge=41) == {"accounts": [], "server_knowledge": 42}
    assert _calls(client)[0]["params"] == {"last_knowledge_of_server": "41"}


def test_transaction_filters_are_forwarded() -> None:
    client = _client(StubResponse(200, {"data": {"transactions": []}}))
    YnabApi(client).list_account_transactions(
        "b1", "a1", since_date="2024-03-01", type_="unapproved"
    )

    call = _calls(client)[0]
    assert call["url"].endswith("/budgets/b1/accounts/a1/transactions")
    assert call["params"] == {"since_date": "2024-03-01", "type": "unapproved"}


def test_create_transaction_wraps_body() -> None:
    client = _client(StubResponse(201, {"data": {"transaction": {"id": "t1"}}}))
    YnabApi(client).create_transaction("b1", {"account_id": "a1", "amount": -85500})

    call = _calls(client)[0]
    assert call["method"] == "POST"
    assert call["json"] == {"transaction": {"account_id": "a1", "amount": -85500}}


def test_month_category_assignment_uses_patch() -> None:
    client = _client(StubResponse(200, {"data": {"category": {"id": "c1", "budgeted": 250000}}}))
    result = YnabApi(client).update_month_category("b1", "2024-03-01", "c1", 250000)

    call = _calls(client)[0]
    assert call["method"] == "PATCH"
    assert call["url"].endswith("/budgets/b1/months/2024-03-01/categories/c1")
    assert call["json"] == {"category": {"budgeted": 250000}}
    assert result["budgeted"] == 250000


def test_delete_scheduled_transaction() -> None:
    client = _client(StubResponse(200, {"data": {"scheduled_transaction": {"id": "s1"}}}))
    result: Optional[Dict[str, Any]] = YnabApi(client).delete_scheduled_transaction("b1", "s1")

    assert _calls(client)[0]["method"] == "DELETE"
    assert result == {"id": "s1"}


def test_success_without_json_body_is_reported_as_api_error() -> None:
    client = _client(StubResponse(200, None, reason="OK"))

    with pytest.raises(ApiError) as excinfo:
        client.get("/user")

    assert excinfo.value.status_code == 200
    assert excinfo.value.error_id == "unknown"
    assert "/user" in excinfo.value.detail
