"""Shared fixtures: an in-memory stand-in for the backend behind requests."""

from __future__ import annotations

import json as jsonlib
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest
import requests

sys.path.append(str(Path(__file__).resolve().parents[1]))

from memory.ui_state import StateStore  # noqa: E402
from handlers.actions import ActionHandlers  # noqa: E402
from tools.api_client import BackendClient  # noqa: E402

BASE_URL = "http://backend.test"


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        if text is None:
            text = "" if body is None else jsonlib.dumps(body)
        self.text = text
        self.content = text.encode()

    def json(self) -> Any:
        return jsonlib.loads(self.text)


class FakeBackend:
    """Mimics the subset of ``requests.Session`` used by :class:`BackendClient`.

    Routes model the real API closely enough for handler tests. ``overrides``
    maps ``(method, path)`` to a response, an exception instance, or a callable
    returning either.
    """

    def __init__(self, base_url: str = BASE_URL) -> None:
        self.base_url = base_url
        self.calls: List[Dict[str, Any]] = []
        self.profiles: Dict[str, Dict[str, Any]] = {}
        self.wardrobe: List[Dict[str, Any]] = []
        self.challenges: List[Dict[str, Any]] = [
            {"title": "Monochrome Monday", "prompt": "One colour, head to toe.", "reward_points": 50},
            {"title": "Thrift Flip", "prompt": "Restyle a thrifted piece.", "reward_points": 80},
        ]
        self.overrides: Dict[Tuple[str, str], Any] = {}
        self.on_request: Optional[Callable[[str, str], None]] = None

    def calls_to(self, method: str, path: str) -> List[Dict[str, Any]]:
        return [call for call in self.calls if call["method"] == method and call["path"] == path]

    def request(
        self,
        method: str,
        url: str,
        json: Any = None,
        params: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> FakeResponse:
        path = url[len(self.base_url):] or "/"
        self.calls.append({"method": method, "path": path, "json": json, "params": params, "timeout": timeout})
        if self.on_request:
            self.on_request(method, path)

        override = self.overrides.get((method, path))
        if callable(override) and not isinstance(override, Exception):
            override = override()
        if isinstance(override, Exception):
            raise override
        if isinstance(override, FakeResponse):
            return override
        return self._route(method, path, json, params or {})

    def _route(self, method: str, path: str, body: Any, params: Dict[str, str]) -> FakeResponse:
        if (method, path) == ("GET", "/"):
            return FakeResponse(body={"message": "Mazzura backend running"})
        if (method, path) == ("GET", "/api/challenges"):
            return FakeResponse(body=self.challenges)
        if (method, path) == ("POST", "/api/profile"):
            self.profiles[body["email"]] = dict(body)
            return FakeResponse(body={"id": "p-1", **body})
        if (method, path) == ("GET", "/api/profile"):
            profile = self.profiles.get(params.get("email", ""))
            if profile is None:
                return FakeResponse(404, text='{"detail":"Profile not found"}')
            return FakeResponse(body=profile)
        if (method, path) == ("POST", "/api/wardrobe"):
            record = {"id": f"w-{len(self.wardrobe) + 1}", **body}
            self.wardrobe.append(record)
            return FakeResponse(body=record)
        if (method, path) == ("GET", "/api/wardrobe"):
            owner = params.get("email")
            return FakeResponse(body=[item for item in self.wardrobe if item["owner_email"] == owner])
        if (method, path) == ("POST", "/api/outfits/generate"):
            return FakeResponse(
                body={
                    "title": f"{body.get('mood') or 'Easy'} look for {body.get('event') or 'today'}",
                    "items": [
                        {"category": "top", "name": "Oversized tee", "color": "black", "brand": "Local craft"},
                        {"category": "bottom", "name": "Wide jeans", "color": "", "brand": None},
                    ],
                }
            )
        return FakeResponse(404, text="Not Found")


def refused() -> requests.ConnectionError:
    return requests.ConnectionError("[Errno 111] Connection refused")


@pytest.fixture()
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture()
def client(backend: FakeBackend) -> BackendClient:
    return BackendClient(BASE_URL, session=backend)


@pytest.fixture()
def store() -> StateStore:
    return StateStore()


@pytest.fixture()
def handlers(client: BackendClient, store: StateStore) -> ActionHandlers:
    return ActionHandlers(client, store)
