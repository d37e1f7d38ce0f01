from __future__ import annotations
from urllib.parse import urlparse
import msal
import requests

from fabricboot.core.auth import (
    AuthError, InvalidClientId, InvalidAuthority, InvalidScope,
    UserCancelled, NetworkError, ConsentRequired
)

def build_authority(tenant: str) -> str:
    return f"https://login.microsoftonline.com/{tenant}"

def redirect_port(redirect_uri: str | None) -> int | None:
    """MSAL listens on http://localhost:<port>; None lets it pick a free port."""
    if not redirect_uri:
        return None
    return urlparse(redirect_uri).port

def _map_msal_error(error: str, desc: str) -> AuthError:
    e = error or ""
    d = desc or ""
    if "AADSTS65004" in d or e in ("access_denied", "authentication_canceled"):
        return UserCancelled(d or "Sign-in cancelled.")
    if "AADSTS65001" in d or e == "consent_required":
        return ConsentRequired(d or "Consent required.")
    if "AADSTS700016" in d or e in ("unauthorized_client", "invalid_client"):
        return InvalidClientId(d or "Invalid client ID or app not found.")
    if "AADSTS70011" in d or e == "invalid_scope":
        return InvalidScope(d or "Invalid scope.")
    if "AADSTS90002" in d or e == "invalid_tenant":
        return InvalidAuthority(d or "Tenant not found.")
    return AuthError(d or e or "Unknown error")

def build_public_client(client_id: str, authority: str) -> msal.PublicClientApplication:
    try:
        return msal.PublicClientApplication(client_id, authority=authority)
    except requests.exceptions.RequestException as ex:
        raise NetworkError(str(ex)) from ex
    except ValueError as ex:
        # msal validates the authority during construction
        raise InvalidAuthority(str(ex)) from ex

def msal_acquire_token_interactive(
    client_id: str, authority: str, scopes: list[str], *, port: int | None = None
) -> str:
    app = build_public_client(client_id, authority)
    try:
        res = app.acquire_token_interactive(scopes=scopes, port=port)
    except requests.exceptions.RequestException as ex:
        raise NetworkError(str(ex)) from ex

    if "access_token" not in res:
        raise _map_msal_error(res.get("error", ""), res.get("error_description", ""))

    return res["access_token"]
