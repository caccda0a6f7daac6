"""Catalog of buildpacks enabled on the platform, keyed by name."""

from __future__ import annotations

import logging

from buildpack_report.models.cf_resources import Buildpack
from buildpack_report.services.cf_client import CloudFoundryClient

log = logging.getLogger(__name__)

BUILDPACKS_PATH = "/v2/buildpacks"


def build_catalog(client: CloudFoundryClient) -> dict[str, Buildpack]:
    """Enabled buildpacks by name. Disabled ones are skipped; a later duplicate name wins."""
    catalog: dict[str, Buildpack] = {}

    def _visit(bp: Buildpack) -> None:
        if not bp.enabled:
            return
        if bp.name in catalog:
            log.debug("buildpack %s listed twice; keeping %s", bp.name, bp.filename)
        catalog[bp.name] = bp

    client.list_all(BUILDPACKS_PATH, _visit, model=Buildpack)
    return catalog
