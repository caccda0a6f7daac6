"""Pytest configuration and fixtures.

``cf_api`` stands in for a Cloud Foundry API: responses are registered per
path (including query string) and served through respx, so the real httpx
client code runs end to end.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import httpx
import pytest
import respx

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from buildpack_report.services.cf_client import CloudFoundryClient  # noqa: E402

API = "https://api.example.com"


class FakeCF:
    def __init__(self) -> None:
        self._responses: dict[str, Any] = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, json: Any = None, status: int = 200, content: bytes | None = None) -> None:
        if content is not None:
            self._responses[path] = httpx.Response(status, content=content)
        else:
            self._responses[path] = httpx.Response(status, json=json)

    def fail(self, path: str, exc: Exception) -> None:
        self._responses[path] = exc

    def add_listing(self, path: str, pages: list[list[dict]]) -> None:
        """Register ``pages`` as path, path?page=2, ... chained by next_url."""
        for i, resources in enumerate(pages):
            here = path if i == 0 else f"{path}?page={i + 1}"
            nxt = f"{path}?page={i + 2}" if i + 1 < len(pages) else None
            self.add(here, {"total_results": sum(len(p) for p in pages), "next_url": nxt, "resources": resources})

    @property
    def paths(self) -> list[str]:
        return [r.url.raw_path.decode() for r in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        entry = self._responses.get(request.url.raw_path.decode())
        if entry is None:
            return httpx.Response(404, json={"description": "Unknown request"})
        if isinstance(entry, Exception):
            raise entry
        return entry


@pytest.fixture
def cf_api():
    with respx.mock(assert_all_called=False) as router:
        fake = FakeCF()
        router.route(host="api.example.com").mock(side_effect=fake)
        yield fake


@pytest.fixture
def client():
    with CloudFoundryClient(api=API, authorization="bearer test-token") as c:
        yield c


@pytest.fixture(autouse=True)
def _reset_report_logger():
    yield
    log = logging.getLogger("buildpack_report")
    for h in list(log.handlers):
        log.removeHandler(h)
    log.setLevel(logging.NOTSET)
    log.propagate = True


def org(guid: str, name: str) -> dict:
    return {
        "metadata": {"guid": guid, "updated_at": "2019-03-01T10:00:00Z"},
        "entity": {"name": name, "spaces_url": f"/v2/organizations/{guid}/spaces"},
    }


def space(guid: str, name: str) -> dict:
    return {
        "metadata": {"guid": guid},
        "entity": {"name": name, "apps_url": f"/v2/spaces/{guid}/apps"},
    }


def app(
    guid: str,
    name: str,
    memory: int = 256,
    instances: int = 1,
    buildpack: str | None = None,
    detected_buildpack: str | None = None,
) -> dict:
    return {
        "metadata": {"guid": guid},
        "entity": {
            "name": name,
            "memory": memory,
            "instances": instances,
            "buildpack": buildpack,
            "detected_buildpack": detected_buildpack,
        },
    }


def buildpack(name: str, filename: str, enabled: bool = True) -> dict:
    return {
        "metadata": {"guid": f"bp-{name}"},
        "entity": {"name": name, "filename": filename, "enabled": enabled},
    }


def droplet(*buildpacks: dict) -> dict:
    return {"guid": "d1", "state": "STAGED", "buildpacks": list(buildpacks)}
