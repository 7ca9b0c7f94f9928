"""
Read-only client for the hosted backend's PostgREST interface.

Only `select` style reads are exposed; the dashboard never writes.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

import requests

from student_dashboard.config import BackendSettings

logger = logging.getLogger(__name__)

REST_PATH = "/rest/v1"


class BackendError(RuntimeError):
    """A query against the backend failed or returned an unusable payload.

    `code` carries the PostgREST or Postgres error code when the backend sent one.
    """

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.code = code


def _quote(value: Any) -> str:
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def _http_error(response: Optional[requests.Response]) -> BackendError:
    if response is None:
        return BackendError("Backend request failed")
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if not isinstance(payload, dict):
        payload = {}
    code = payload.get("code")
    code = str(code) if code is not None else None
    if payload.get("message"):
        return BackendError(str(payload["message"]), code=code)
    return BackendError(f"HTTP {response.status_code}", code=code)


class SupabaseClient:
    def __init__(
        self,
        url: str,
        api_key: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = url.rstrip("/") + REST_PATH
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
                "Accept": "application/json",
            }
        )

    @classmethod
    def from_settings(cls, settings: BackendSettings) -> "SupabaseClient":
        return cls(settings.url, settings.api_key, timeout=settings.timeout)

    @staticmethod
    def build_params(
        columns: str = "*",
        eq: Optional[Mapping[str, Any]] = None,
        in_: Optional[Mapping[str, Iterable[Any]]] = None,
        limit: Optional[int] = None,
    ) -> Dict[str, str]:
        """Translate filters into PostgREST query parameters."""
        params: Dict[str, str] = {"select": columns}
        for column, value in (eq or {}).items():
            params[column] = f"eq.{value}"
        for column, values in (in_ or {}).items():
            params[column] = "in.(" + ",".join(_quote(v) for v in values) + ")"
        if limit is not None:
            params["limit"] = str(limit)
        return params

    def select(
        self,
        table: str,
        columns: str = "*",
        eq: Optional[Mapping[str, Any]] = None,
        in_: Optional[Mapping[str, Iterable[Any]]] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        params = self.build_params(columns, eq=eq, in_=in_, limit=limit)
        url = f"{self.base_url}/{table}"
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as exc:
            raise _http_error(exc.response) from exc
        except requests.exceptions.RequestException as exc:
            raise BackendError(f"Could not reach the backend: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise BackendError(f"Backend returned invalid JSON for '{table}'") from exc

        if not isinstance(payload, list):
            raise BackendError(f"Unexpected response shape for '{table}'")
        return payload
