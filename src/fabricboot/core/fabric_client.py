# src/fabricboot/core/fabric_client.py
from __future__ import annotations
from typing import Any, Callable, Dict
from fabricboot.http.client import HttpClient
from fabricboot.config.loader import DEFAULT_BASE_URL, get_http_config

FABRIC_BASE = DEFAULT_BASE_URL

class FabricClient:
    """
    Tiny Fabric REST wrapper. Token is provided lazily via token_provider().
    """
    def __init__(
        self,
        token_provider: Callable[[], str],
        base_url: str = FABRIC_BASE,
        timeout: float | None = None,
        logger=None,
        session=None,
    ):
        to = float(timeout if timeout is not None else get_http_config().get("timeout_seconds", 30))
        self._token_provider = token_provider
        self._http = HttpClient(base_url=base_url, timeout=to, logger=logger, session=session)

    def _auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self._token_provider()}"}

    def get_text(self, path_or_url: str, *, params: Dict[str, Any] | None = None) -> str:
        return self._http.get_text(path_or_url, headers=self._auth_headers(), params=params)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "FabricClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

def call_api(token: str, base_url: str, path: str, **kwargs) -> str:
    with FabricClient(lambda: token, base_url=base_url, **kwargs) as client:
        return client.get_text(path)
