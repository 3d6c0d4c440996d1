"""Shared fixtures: a fake `requests.post` that records calls and replays canned bodies."""

from __future__ import annotations

import json
from typing import Any

import pytest

from webplotly import transport


class FakeResponse:
    def __init__(self, body: Any, status_code: int = 200) -> None:
        self.status_code = status_code
        self.text = body if isinstance(body, str) else json.dumps(body)
        self.content = self.text.encode("utf-8")


class FakeServer:
    """Stands in for `requests.post`; queue bodies with `reply()`."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self._replies: list[FakeResponse] = []

    def reply(self, body: Any, status_code: int = 200) -> None:
        self._replies.append(FakeResponse(body, status_code))

    def __call__(self, url: str, data: dict[str, Any] | None = None, timeout: Any = None) -> FakeResponse:
        self.calls.append({"url": url, "data": data, "timeout": timeout})
        if self._replies:
            return self._replies.pop(0)
        return FakeResponse({})

    @property
    def last(self) -> dict[str, Any]:
        return self.calls[-1]

    def last_field(self, name: str) -> Any:
        """Decoded JSON of the `args`/`kwargs` form field of the last call."""
        return json.loads(self.last["data"][name])


@pytest.fixture
def server(monkeypatch: pytest.MonkeyPatch) -> FakeServer:
    fake = FakeServer()
    monkeypatch.setattr(transport.requests, "post", fake)
    return fake
