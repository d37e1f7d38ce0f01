# src/fabricboot/app/main_app.py
from __future__ import annotations
import argparse
import sys
from typing import Callable, Optional

from fabricboot.config.loader import FabricConfig, get_fabric_config, load_appsettings
from fabricboot.core.auth import AuthError, authenticate
from fabricboot.core.fabric_client import call_api
from fabricboot.http.errors import HttpError

def run(cfg: Optional[FabricConfig] = None, out: Callable[[str], None] = print) -> str:
    cfg = cfg or get_fabric_config()

    token = authenticate(cfg)
    out(token)

    body = call_api(token, cfg.base_url, cfg.path, timeout=cfg.timeout)
    out(body)
    return body

def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="fabricboot", description="Sign in and list Fabric workspaces.")
    ap.add_argument("--config", help="path to appsettings.json (default: config/appsettings.json)")
    args = ap.parse_args(argv)

    settings = load_appsettings(args.config)
    cfg = get_fabric_config(settings)
    try:
        run(cfg)
    except (AuthError, HttpError) as e:
        hint = getattr(e, "hint", "") or getattr(e, "body_snippet", "")
        print(f"[run] {e.code}: {e}" + (f" ({hint})" if hint else ""), file=sys.stderr)
        return 1
    return 0
