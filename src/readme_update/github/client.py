"""
Thin synchronous client for the GitHub REST and GraphQL APIs.

Only the endpoints needed for the profile README are wrapped:

- `GET /users/{user}/events/public`
- `GET /users/{user}/repos`
- `GET {languages_url}` for each repository
- `GET /users/{user}`
- `POST /graphql`
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from readme_update.core.errors import GitHubAPIError

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.github.com"
DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"
DEFAULT_USER_AGENT = "readme-update GitHub Action"


class GitHubClient:
    """
    GitHub API client authenticated with a personal or workflow token.

    An existing `httpx.Client` can be passed in; it is then left open on
    `close()` and owned by the caller.

    Example usage:
        with GitHubClient(token) as client:
            events = client.get_public_events("octocat")
    """

    def __init__(
        self,
        token: str,
        api_base: str = DEFAULT_API_BASE,
        graphql_url: str = DEFAULT_GRAPHQL_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        http_client: Optional[httpx.Client] = None,
    ):
        self.token = token
        self.api_base = api_base.rstrip("/")
        self.graphql_url = graphql_url
        self.user_agent = user_agent
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(
            timeout=timeout, follow_redirects=True
        )

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    # REST uses the legacy `token` scheme, GraphQL requires `Bearer`
    def _headers(self, scheme: str = "token") -> Dict[str, str]:
        return {
            "Authorization": f"{scheme} {self.token}",
            "User-Agent": self.user_agent,
            "Accept": "application/vnd.github+json",
        }

    def _request(self, method: str, url: str, scheme: str = "token", **kwargs) -> Any:
        logger.debug(f"{method} {url}")
        try:
            response = self._http.request(
                method, url, headers=self._headers(scheme), **kwargs
            )
        except httpx.HTTPError as e:
            raise GitHubAPIError(f"{method} {url} failed: {e}") from e

        if response.is_error:
            raise GitHubAPIError(
                f"{method} {url} returned {response.status_code}: "
                f"{response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise GitHubAPIError(
                f"{method} {url} returned invalid JSON",
                status_code=response.status_code,
            ) from e

    def get_public_events(self, username: str) -> List[Dict[str, Any]]:
        """Return the user's public events, newest first."""
        data = self._request("GET", f"{self.api_base}/users/{username}/events/public")
        if not isinstance(data, list):
            raise GitHubAPIError("Expected a list of events")
        return data

    def get_repositories(self, username: str) -> List[Dict[str, Any]]:
        """Return the user's public repositories (first 100)."""
        data = self._request(
            "GET",
            f"{self.api_base}/users/{username}/repos",
            params={"per_page": 100},
        )
        if not isinstance(data, list):
            raise GitHubAPIError("Expected a list of repositories")
        return data

    def get_languages(self, languages_url: str) -> Dict[str, int]:
        """Return the byte count per language for a single repository."""
        data = self._request("GET", languages_url)
        if not isinstance(data, dict):
            raise GitHubAPIError(f"Expected an object from {languages_url}")
        return data

    def get_user(self, username: str) -> Dict[str, Any]:
        """Return the public profile of a user."""
        data = self._request("GET", f"{self.api_base}/users/{username}")
        if not isinstance(data, dict):
            raise GitHubAPIError("Expected a user object")
        return data

    def graphql(
        self, query: str, variables: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Execute a GraphQL query.

        GraphQL reports query errors in the body with a 200 status; those are
        returned to the caller untouched under the `errors` key.
        """
        body: Dict[str, Any] = {"query": query}
        if variables:
            body["variables"] = variables
        data = self._request("POST", self.graphql_url, scheme="Bearer", json=body)
        if not isinstance(data, dict):
            raise GitHubAPIError("Expected a GraphQL response object")
        return data
