"""GitHub REST API access for the collaborators endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict
from urllib.parse import quote

import requests

from .constants import API_BASE, USER_AGENT


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one API request: a decoded payload or a failure reason."""

    ok: bool
    payload: Any = None
    reason: str = ""

    @classmethod
    def success(cls, payload: Any) -> "FetchResult":
        return cls(ok=True, payload=payload)

    @classmethod
    def failure(cls, reason: str) -> "FetchResult":
        return cls(ok=False, reason=reason)


def collaborators_endpoint(owner: str, repo: str) -> str:
    """Return the API path listing the collaborators of ``owner/repo``."""
    return f"repos/{quote(owner, safe='')}/{quote(repo, safe='')}/collaborators"


class CollaboratorsClient:
    """Small wrapper around requests for the collaborators endpoint."""

    def __init__(
        self,
        principal: str,
        token: str,
        api_base: str = API_BASE,
        session: requests.Session | None = None,
    ) -> None:
        self.session = session or requests.Session()
        self.api_base = api_base.rstrip("/")
        self._auth = (principal, token)

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": USER_AGENT,
        }

    def get(self, endpoint: str) -> FetchResult:
        """
        Issue one authenticated GET against ``endpoint``.

        Only the first page the API returns is read; there is no retry and
        no timeout beyond the library default.

        Returns:
            ``FetchResult.success`` with the decoded JSON body, or
            ``FetchResult.failure`` for any transport error, HTTP error
            status, empty body or undecodable body.
        """
        url = f"{self.api_base}/{endpoint}"
        try:
            response = self.session.get(url, auth=self._auth, headers=self._headers())
            response.raise_for_status()
        except requests.HTTPError as exc:
            return FetchResult.failure(f"HTTP error: {exc}")
        except requests.RequestException as exc:
            return FetchResult.failure(f"request failed: {exc.__class__.__name__}")

        if not response.text.strip():
            return FetchResult.failure("empty response body")
        try:
            return FetchResult.success(response.json())
        except ValueError:
            return FetchResult.failure("response body is not valid JSON")

    def fetch_collaborators(self, owner: str, repo: str) -> FetchResult:
        """Fetch the collaborators collection of ``owner/repo``."""
        return self.get(collaborators_endpoint(owner, repo))
