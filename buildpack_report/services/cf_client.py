"""Cloud Foundry API client.

Thin REST wrapper with:
- one pooled httpx.Client carrying the session's authorization header
- optional TLS verification bypass (cf api --skip-ssl-validation)
- transparent v2 pagination via ``next_url``

No retries: the first failure is raised to the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from buildpack_report.models.cf_resources import ListPage
from buildpack_report.services.errors import (
    DecodeError,
    PaginationLoopError,
    StatusError,
    TransportError,
)

log = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

DEFAULT_MAX_PAGES = 10000


class CloudFoundryClient:
    def __init__(
        self,
        api: str,
        authorization: str,
        skip_ssl_validation: bool = False,
        timeout: float = 5.0,
        max_pages: int = DEFAULT_MAX_PAGES,
    ) -> None:
        self._api = api.rstrip("/")
        self._max_pages = max_pages
        if skip_ssl_validation:
            log.info("warning: skipping TLS validation...")
        self._http = httpx.Client(
            timeout=timeout,
            headers={"Authorization": authorization, "Accept": "application/json"},
            verify=not skip_ssl_validation,
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> CloudFoundryClient:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    @property
    def api(self) -> str:
        return self._api

    def _url(self, path: str) -> str:
        return path if path.startswith("http") else f"{self._api}{path}"

    def fetch(self, path: str) -> Any:
        """GET JSON for a path (relative to the API) or a full URL."""
        url = self._url(path)
        log.info("GET %s", url)
        try:
            r = self._http.get(url)
        except httpx.TransportError as e:
            raise TransportError(f"GET {url} failed: {e}") from e

        if r.status_code != 200:
            raise StatusError(url, r.status_code, r.text)

        try:
            return r.json()
        except ValueError as e:
            raise DecodeError(f"GET {url} returned malformed JSON: {e}") from e

    def fetch_model(self, path: str, model: type[M]) -> M:
        """GET and validate into ``model``. Shape mismatches raise DecodeError."""
        data = self.fetch(path)
        return _decode(model, data, path)

    def list_all(
        self,
        path: str,
        visit: Callable[[Any], None],
        model: Optional[type[BaseModel]] = None,
    ) -> None:
        """Call ``visit`` for every resource of a paged listing, in server order.

        Anything ``visit`` raises aborts the listing and propagates.
        """
        seen: set[str] = set()
        pages = 0
        next_path = path
        while next_path:
            url = self._url(next_path)
            if url in seen:
                raise PaginationLoopError(f"next_url {url} was already fetched while listing {path}")
            pages += 1
            if pages > self._max_pages:
                raise PaginationLoopError(f"listing {path} exceeded {self._max_pages} pages")
            seen.add(url)

            page = self.fetch_model(next_path, ListPage)
            for raw in page.resources:
                visit(_decode(model, raw, url) if model is not None else raw)
            next_path = page.next_url


def _decode(model: type[M], data: Any, where: str) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"unexpected {model.__name__} payload from {where}: {e}") from e
