"""Shared request stubs for the test suite."""
from __future__ import annotations

import json
from typing import Dict, List

import pytest
import requests


class StubResponse:
    def __init__(self, status_code: int = 200, json_data=None, text: str | None = None):
        self.status_code = status_code
        if text is None:
            text = json.dumps(json_data) if json_data is not None else ""
        self.text = text

    def json(self):
        return json.loads(self.text)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


class RecordingSession:
    def __init__(self, responses: List):
        self._responses = list(responses)
        self.calls: List[Dict] = []

    def get(self, url, auth=None, headers=None, **kwargs):
        self.calls.append({"url": url, "auth": auth, "headers": headers or {}, "kwargs": kwargs})
        if not self._responses:
            raise AssertionError("Unexpected request")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def sample_payload():
    return [
        {"login": "alice", "permissions": {"admin": True, "push": True, "pull": True}},
        {"login": "bob", "permissions": {"admin": False, "push": True, "pull": True}},
        {"login": "carol", "permissions": {"admin": False, "push": False, "pull": True}},
    ]
