from __future__ import annotations
from dataclasses import dataclass

from fabricboot.config.loader import FabricConfig

class AuthError(Exception):
    code = "auth_error"; hint = "Unknown error."
    def __init__(self, message: str = "", *, hint: str | None = None):
        super().__init__(message or self.__class__.__name__)
        if hint: self.hint = hint

class InvalidClientId(AuthError):
    code = "invalid_client_id"; hint = "Set fabric.clientId in config/appsettings.json or FABRIC_CLIENT_ID."
class InvalidAuthority(AuthError):
    code = "invalid_authority"; hint = "Authority URL invalid or unreachable."
class InvalidScope(AuthError):
    code = "invalid_scope"; hint = "One or more requested scopes are not valid for this app."
class UserCancelled(AuthError):
    code = "user_cancelled"; hint = "Sign-in was cancelled or declined."
class NetworkError(AuthError):
    code = "network_error"; hint = "Network or timeout issue."
class ConsentRequired(AuthError):
    code = "consent_required"; hint = "Consent required for the requested Fabric permissions."

@dataclass
class FabricSession:
    client_id: str
    authority: str
    scopes: list[str]
    token: str

def connect(cfg: FabricConfig) -> FabricSession:
    client_id = (cfg.client_id or "").strip()
    # helpers do the heavy lifting
    from fabricboot.core.auth_helpers import (
        build_authority, msal_acquire_token_interactive, redirect_port
    )

    tenant = (cfg.tenant or "").strip()
    authority = build_authority(tenant) if tenant else (cfg.authority or "").strip()
    scopes = [s for s in (cfg.scopes or []) if s.strip()]

    if not client_id: raise InvalidClientId("Client ID required.")
    if not authority.startswith("https://"): raise InvalidAuthority("Authority must be an https URL.")
    if not scopes: raise InvalidScope("At least one scope required.")

    print(f"[AUTH] Authority={authority}, Client={client_id[:6]}..., starting interactive sign-in")
    token = msal_acquire_token_interactive(
        client_id, authority, scopes, port=redirect_port(cfg.redirect_uri)
    )
    return FabricSession(client_id=client_id, authority=authority, scopes=scopes, token=token)

def authenticate(cfg: FabricConfig) -> str:
    return connect(cfg).token
