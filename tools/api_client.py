"""HTTP client for the Mazzura backend API."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

import requests
from pydantic import ValidationError

from logic.validation import HealthStatus, parse_challenges, parse_model, parse_outfit, parse_wardrobe
from models.challenge import Challenge
from models.outfit import GeneratedOutfit
from models.wardrobe_item import WardrobeRecord
from tools.observability import instrument_call

logger = logging.getLogger(__name__)
T = TypeVar("T")


class BackendError(RuntimeError):
    """Base class for failures talking to the backend."""


class ConnectivityError(BackendError):
    """Raised when the request never reached the server."""


class RequestError(BackendError):
    """Raised when the server answered with a non-success status.

    The message is the raw response body so it can be shown to the user as-is.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class BackendClient:
    """Thin wrapper over :class:`requests.Session` bound to one base URL.

    Every call is a single attempt: no retries, and no timeout unless one was
    configured.
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def url_for(self, path: str) -> str:
        if not path or path == "/":
            return self.base_url
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(
        self,
        path: str,
        method: str = "GET",
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Perform one request and return the parsed JSON body.

        Raises:
            ConnectivityError: the host could not be reached.
            RequestError: the server returned a non-2xx status or a body that
                is not JSON.
        """

        url = self.url_for(path)
        try:
            response = self.session.request(method, url, json=json, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Backend unreachable", extra={"url": url, "error_type": type(exc).__name__})
            raise ConnectivityError(f"Cannot reach backend at {self.base_url}: {exc}") from exc

        if not 200 <= response.status_code < 300:
            logger.warning(
                "Non-success status from backend",
                extra={"path": path, "status_code": response.status_code},
            )
            raise RequestError(response.text, status_code=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise RequestError(
                f"Backend returned a non-JSON body for {path}", status_code=response.status_code
            ) from exc

    def _validated(self, path: str, parser: Callable[[Any], T], payload: Any) -> T:
        try:
            return parser(payload)
        except ValidationError as exc:
            logger.error("Backend payload failed schema validation", extra={"path": path})
            raise RequestError(f"Unexpected response from {path}: {exc.error_count()} invalid field(s)") from exc

    @instrument_call("health")
    def health(self) -> HealthStatus:
        payload = self.request("/")
        return self._validated("/", lambda body: parse_model(HealthStatus, body), payload)

    @instrument_call("list_challenges")
    def list_challenges(self) -> List[Challenge]:
        payload = self.request("/api/challenges")
        return self._validated("/api/challenges", parse_challenges, payload)

    @instrument_call("save_profile")
    def save_profile(self, payload: Dict[str, Any]) -> Any:
        return self.request("/api/profile", method="POST", json=payload)

    @instrument_call("get_profile")
    def get_profile(self, email: str) -> Dict[str, Any]:
        return self.request("/api/profile", params={"email": email})

    @instrument_call("add_wardrobe_item")
    def add_wardrobe_item(self, payload: Dict[str, Any]) -> Any:
        return self.request("/api/wardrobe", method="POST", json=payload)

    @instrument_call("list_wardrobe")
    def list_wardrobe(self, email: str) -> List[WardrobeRecord]:
        payload = self.request("/api/wardrobe", params={"email": email})
        return self._validated("/api/wardrobe", parse_wardrobe, payload)

    @instrument_call("generate_outfit")
    def generate_outfit(self, payload: Dict[str, Any]) -> GeneratedOutfit:
        body = self.request("/api/outfits/generate", method="POST", json=payload)
        return self._validated("/api/outfits/generate", parse_outfit, body)


__all__ = ["BackendClient", "BackendError", "ConnectivityError", "RequestError"]
