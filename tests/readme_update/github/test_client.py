"""
Tests for the GitHub HTTP client using httpx.MockTransport.
"""

import json

import httpx
import pytest

from readme_update.core.errors import GitHubAPIError
from readme_update.github.client import GitHubClient


def make_client(handler) -> GitHubClient:
    http = httpx.Client(transport=httpx.MockTransport(handler))
    return GitHubClient(token="secret", user_agent="test-agent", http_client=http)


def test_rest_request_headers():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["auth"] = request.headers["Authorization"]
        seen["agent"] = request.headers["User-Agent"]
        return httpx.Response(200, json=[])

    with make_client(handler) as client:
        assert client.get_public_events("octo") == []

    assert seen == {
        "path": "/users/octo/events/public",
        "auth": "token secret",
        "agent": "test-agent",
    }


def test_repositories_request_first_page_of_100():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/users/octo/repos"
        assert request.url.params["per_page"] == "100"
        return httpx.Response(200, json=[{"name": "alpha"}])

    with make_client(handler) as client:
        assert client.get_repositories("octo") == [{"name": "alpha"}]


def test_languages_follow_absolute_url():
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == "https://api.github.com/repos/octo/alpha/languages"
        return httpx.Response(200, json={"Python": 10})

    with make_client(handler) as client:
        languages = client.get_languages(
            "https://api.github.com/repos/octo/alpha/languages"
        )

    assert languages == {"Python": 10}


def test_graphql_uses_bearer_and_variables():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"data": {"user": None}})

    with make_client(handler) as client:
        result = client.graphql("query { viewer { login } }", {"login": "octo"})

    assert result == {"data": {"user": None}}
    assert seen["method"] == "POST"
    assert seen["auth"] == "Bearer secret"
    assert seen["body"] == {
        "query": "query { viewer { login } }",
        "variables": {"login": "octo"},
    }


@pytest.mark.parametrize("status_code", [401, 403, 404, 500])
def test_error_status_raises(status_code):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json={"message": "nope"})

    with make_client(handler) as client:
        with pytest.raises(GitHubAPIError) as exc_info:
            client.get_user("octo")

    assert exc_info.value.status_code == status_code


def test_transport_error_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with make_client(handler) as client:
        with pytest.raises(GitHubAPIError) as exc_info:
            client.get_public_events("octo")

    assert exc_info.value.status_code is None


def test_invalid_json_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>")

    with make_client(handler) as client:
        with pytest.raises(GitHubAPIError, match="invalid JSON"):
            client.get_user("octo")


def test_unexpected_shape_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"message": "not a list"})

    with make_client(handler) as client:
        with pytest.raises(GitHubAPIError):
            client.get_public_events("octo")


def test_injected_client_is_not_closed():
    http = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))

    with GitHubClient(token="t", http_client=http):
        pass

    assert not http.is_closed
    http.close()
