from __future__ import annotations
import json, os, pathlib
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

DEFAULT_AUTHORITY = "https://login.microsoftonline.com/organizations"
DEFAULT_REDIRECT_URI = "http://localhost"
DEFAULT_SCOPES = [
    "https://api.fabric.microsoft.com/Workspace.ReadWrite.All",
    "https://api.fabric.microsoft.com/Item.ReadWrite.All",
]
DEFAULT_BASE_URL = "https://api.fabric.microsoft.com/v1/"
DEFAULT_PATH = "workspaces"
DEFAULT_TIMEOUT = 30.0

# Placeholder shipped in sample configs
PLACEHOLDER_CLIENT_ID = "YourApplicationId"

_SETTINGS_PATH = pathlib.Path("config/appsettings.json")


@dataclass
class FabricConfig:
    client_id: str = ""
    authority: str = DEFAULT_AUTHORITY
    redirect_uri: str = DEFAULT_REDIRECT_URI
    scopes: List[str] = field(default_factory=lambda: list(DEFAULT_SCOPES))
    base_url: str = DEFAULT_BASE_URL
    path: str = DEFAULT_PATH
    tenant: str = ""
    timeout: float = DEFAULT_TIMEOUT


def load_appsettings(path: str | pathlib.Path | None = None) -> dict:
    p = pathlib.Path(path) if path else _SETTINGS_PATH
    if not p.exists():
        return {}
    try:
        text = p.read_text(encoding="utf-8").strip()
        if not text:
            return {}
        data = json.loads(text)
    except (OSError, ValueError):
        # malformed JSON → fall back to defaults
        return {}
    return data if isinstance(data, dict) else {}


def _split_scopes(raw: Any) -> List[str]:
    # accepts ["a", "b"] or "a b"
    if isinstance(raw, str):
        return raw.split()
    out: List[str] = []
    for item in raw or []:
        out.extend(str(item).split())
    return out


def get_fabric_config(
    settings: Optional[dict] = None,
    env: Optional[Mapping[str, str]] = None,
) -> FabricConfig:
    settings = load_appsettings() if settings is None else settings
    env = os.environ if env is None else env
    cfg: Dict[str, Any] = dict(settings.get("fabric") or {})

    client_id = (env.get("FABRIC_CLIENT_ID") or cfg.get("clientId") or "").strip()
    if client_id == PLACEHOLDER_CLIENT_ID:
        client_id = ""

    scopes_raw = env.get("FABRIC_SCOPES") or cfg.get("scopes")
    scopes = _split_scopes(scopes_raw) if scopes_raw else list(DEFAULT_SCOPES)

    return FabricConfig(
        client_id=client_id,
        authority=(env.get("FABRIC_AUTHORITY") or cfg.get("authority") or DEFAULT_AUTHORITY).strip(),
        redirect_uri=(env.get("FABRIC_REDIRECT_URI") or cfg.get("redirectUri") or DEFAULT_REDIRECT_URI).strip(),
        scopes=scopes,
        base_url=(env.get("FABRIC_BASE_URL") or cfg.get("baseUrl") or DEFAULT_BASE_URL).strip(),
        path=(cfg.get("path") or DEFAULT_PATH).strip(),
        tenant=(env.get("FABRIC_TENANT") or cfg.get("tenant") or "").strip(),
        timeout=float(get_http_config(settings)["timeout_seconds"]),
    )


def get_http_config(settings: Optional[dict] = None) -> dict:
    settings = load_appsettings() if settings is None else settings
    cfg = settings.get("http") or {}
    return {
        "timeout_seconds": int(cfg.get("timeout_seconds") or DEFAULT_TIMEOUT),
    }
