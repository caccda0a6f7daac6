"""Resolve the API endpoint, token and TLS setting of the current cf login.

Environment wins (CF_API / CF_TOKEN / CF_SKIP_SSL_VALIDATION, optionally from
a .env file); otherwise the cf CLI's own config.json is read.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from buildpack_report.services.cf_client import DEFAULT_MAX_PAGES, CloudFoundryClient
from buildpack_report.services.errors import SessionError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CFSession:
    api: str
    authorization: str
    skip_ssl_validation: bool = False
    timeout: float = 5.0
    max_pages: int = DEFAULT_MAX_PAGES

    def client(self) -> CloudFoundryClient:
        return CloudFoundryClient(
            api=self.api,
            authorization=self.authorization,
            skip_ssl_validation=self.skip_ssl_validation,
            timeout=self.timeout,
            max_pages=self.max_pages,
        )


def _truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def cf_config_path() -> Path:
    home = os.getenv("CF_HOME") or str(Path.home())
    return Path(home) / ".cf" / "config.json"


def _read_cf_config(path: Path) -> dict:
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise SessionError(f"cannot read cf config {path}: {e}") from e
    return data if isinstance(data, dict) else {}


def _authorization(token: str) -> str:
    token = token.strip()
    if not token or " " in token:
        return token
    return f"bearer {token}"


def load_session(env_file: Optional[str] = ".env") -> CFSession:
    """Build a CFSession from the environment or the cf CLI config."""
    if env_file:
        load_dotenv(env_file, override=False)

    api = (os.getenv("CF_API") or "").strip()
    token = (os.getenv("CF_TOKEN") or "").strip()
    skip_ssl = _truthy(os.getenv("CF_SKIP_SSL_VALIDATION"))

    if not api or not token:
        config = _read_cf_config(cf_config_path())
        target = str(config.get("Target") or "").strip()
        api = api or target
        # the cf login token and TLS setting only apply to the target they were issued for
        if target and target.rstrip("/") == api.rstrip("/"):
            token = token or str(config.get("AccessToken") or "").strip()
            if os.getenv("CF_SKIP_SSL_VALIDATION") is None:
                skip_ssl = bool(config.get("SSLDisabled"))
        elif target:
            log.debug("ignoring cf login for %s; CF_API is %s", target, api)

    if not api:
        raise SessionError("no API endpoint set; run `cf api` or export CF_API")
    if not token:
        raise SessionError("not logged in; run `cf login` or export CF_TOKEN")

    try:
        timeout = float(os.getenv("CF_REPORT_TIMEOUT") or 5.0)
        max_pages = int(os.getenv("CF_REPORT_MAX_PAGES") or DEFAULT_MAX_PAGES)
    except ValueError as e:
        raise SessionError(f"invalid CF_REPORT_TIMEOUT / CF_REPORT_MAX_PAGES: {e}") from e

    return CFSession(
        api=api,
        authorization=_authorization(token),
        skip_ssl_validation=skip_ssl,
        timeout=timeout,
        max_pages=max_pages,
    )
