# src/console/api.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import quote

import requests

from src.backend.config import settings

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """The store could not complete a request. ``str(exc)`` is safe to show to a user."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class EmployeeApiClient:
    """
    Thin HTTP client for the employee store.

    ``session`` only needs requests-style ``get/post/put/delete`` methods, so
    a ``requests.Session`` or a test client can be passed in.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Any = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or settings.CONSOLE_BASE_URL).rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout if timeout is not None else settings.CONSOLE_TIMEOUT

    # -------------------------
    # plumbing
    # -------------------------
    def _request(self, method: str, path: str = "", json: Optional[Mapping[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        kwargs: Dict[str, Any] = {"timeout": self.timeout}
        if json is not None:
            kwargs["json"] = dict(json)
        try:
            resp = getattr(self.session, method)(url, **kwargs)
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method.upper(), url, e)
            raise StoreError("Could not reach the employee store.") from e

        if resp.status_code >= 400:
            message = _error_message(resp)
            logger.warning("%s %s -> %s %s", method.upper(), url, resp.status_code, message)
            raise StoreError(message, status_code=resp.status_code)

        if not resp.content:
            return None
        return resp.json()

    # -------------------------
    # store operations
    # -------------------------
    def list_employees(self) -> List[Dict[str, Any]]:
        return self._request("get") or []

    def create_employee(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        return self._request("post", json=fields)

    def update_employee(self, record_id: int, fields: Mapping[str, Any]) -> None:
        self._request("put", f"/{record_id}", json=fields)

    def delete_employee(self, record_id: int) -> None:
        self._request("delete", f"/{record_id}")

    def list_directories(self) -> List[str]:
        return self._request("get", "/directories") or []

    def list_divisions(self, directory: str) -> List[str]:
        return self._request("get", f"/divisions/{quote(directory, safe='')}") or []


def _error_message(resp: Any) -> str:
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"Request failed with status {resp.status_code}"
