from __future__ import annotations
from typing import Any, Dict, Optional
import requests

from fabricboot.http.errors import (
    HttpError, UnauthorizedError, ForbiddenError, NotFoundError,
    ThrottleError, ServerError, NetworkError
)

_STATUS_ERRORS = {
    401: (UnauthorizedError, "Unauthorized"),
    403: (ForbiddenError, "Forbidden"),
    404: (NotFoundError, "Not Found"),
    429: (ThrottleError, "Too Many Requests"),
}


class HttpClient:
    """Single-shot HTTP client: one request per call, failures raised as typed errors."""

    def __init__(self, base_url: str = "", timeout: float = 30.0, logger=None, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._log = logger  # optional, expects .debug()

    def _full_url(self, url: str) -> str:
        if url.startswith("http://") or url.startswith("https://"):
            return url
        if self.base_url:
            return f"{self.base_url}/{url.lstrip('/')}"
        return url

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _log_debug(self, msg: str) -> None:
        if self._log:
            self._log.debug(msg)

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        full = self._full_url(url)
        self._log_debug(f"HTTP {method.upper()} {full}")
        try:
            resp = self._session.request(
                method=method.upper(),
                url=full,
                headers=headers or {},
                params=params,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as ex:
            raise NetworkError(-1, full, str(ex)) from ex

        self._log_debug(f"HTTP {resp.status_code} {full}")
        if resp.status_code < 400:
            return resp

        # Map to typed errors
        body_snip = _safe_snip(resp)
        if resp.status_code in _STATUS_ERRORS:
            cls, msg = _STATUS_ERRORS[resp.status_code]
            raise cls(resp.status_code, full, msg, body_snip)
        if 500 <= resp.status_code <= 599:
            raise ServerError(resp.status_code, full, "Server error", body_snip)
        raise HttpError(resp.status_code, full, "HTTP error", body_snip)

    def get_text(self, url: str, **kwargs) -> str:
        r = self.request("GET", url, **kwargs)
        return r.text or ""


def _safe_snip(resp: requests.Response, max_len: int = 400) -> str:
    txt = resp.text or ""
    return txt[:max_len]
