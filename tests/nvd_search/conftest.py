"""tests/conftest.py

Common fixtures for the entire test suite.
"""

import json

import httpx
import pytest

from nvd_search.config.urls import NVD_CVE_API_URL


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep NVD_SEARCH_* variables from the developer's shell out of the tests."""
    for var in ("NVD_SEARCH_API_KEY", "NVD_SEARCH_BASE_URL", "NVD_SEARCH_TIMEOUT_SECONDS", "NVD_SEARCH_RAISE_ON_TRANSPORT_ERROR"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def nvd_payload():
    """Factory for a CVE API 2.0 response envelope."""

    def _payload(*cve_ids: str) -> dict:
        return {
            "resultsPerPage": len(cve_ids),
            "startIndex": 0,
            "totalResults": len(cve_ids),
            "format": "NVD_CVE",
            "version": "2.0",
            "timestamp": "2023-05-01T12:00:00.000",
            "vulnerabilities": [
                {"cve": {"id": cve_id, "sourceIdentifier": "cve@mitre.org", "vulnStatus": "Analyzed"}}
                for cve_id in cve_ids
            ],
        }

    return _payload


@pytest.fixture
def mock_httpx_client(monkeypatch):
    """
    Replaces httpx.Client with a mock that uses a MockTransport.

    Returns a handler function that tests can use to register mock responses.
    Every request seen by the transport is recorded in `add_response.requests`.
    """
    responses = {}
    requests_log: list[httpx.Request] = []
    original_client = httpx.Client

    def add_response(
        url: str,
        method: str = "GET",
        status_code: int = 200,
        json_payload: object | None = None,
        content: bytes | None = None,
    ):
        """Register a mock response for a given URL and method."""
        if json_payload is not None:
            body = json.dumps(json_payload).encode("utf-8")
        else:
            body = content if content is not None else b""
        responses[(method.upper(), url)] = (status_code, body)

    def mock_transport(request: httpx.Request) -> httpx.Response:
        """The transport logic that returns registered responses or a 404."""
        requests_log.append(request)
        key = (request.method, str(request.url))
        if key in responses:
            status, body = responses[key]
            headers = {"Content-Length": str(len(body))}
            return httpx.Response(status, content=body, headers=headers)

        return httpx.Response(404, text=f"Mock URL not found: {request.method} {request.url}")

    def patched_client(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(mock_transport)
        return original_client(*args, **kwargs)

    monkeypatch.setattr(httpx, "Client", patched_client)
    add_response.requests = requests_log  # type: ignore[attr-defined]
    add_response.base_url = NVD_CVE_API_URL  # type: ignore[attr-defined]
    return add_response
