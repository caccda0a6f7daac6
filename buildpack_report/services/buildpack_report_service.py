"""Walk orgs -> spaces -> apps and classify each app's staged buildpacks.

Messages attached to a row:
  needs attention (1)  current droplet could not be fetched
  needs attention (2)  droplet records no buildpacks
  needs attention (3)  buildpack in droplet has no version
  needs attention (4)  buildpack in droplet is not an enabled platform buildpack
  needs attention (5)  platform buildpack is a different version than the droplet's

Listing failures abort the report; only the droplet fetch is recoverable.
"""

from __future__ import annotations

import logging
from typing import Optional

from buildpack_report.models.cf_resources import Application, Buildpack, Droplet, Organization, Space
from buildpack_report.models.report import OK_MESSAGE, ReportRow
from buildpack_report.services.buildpack_catalog import build_catalog
from buildpack_report.services.cf_client import CloudFoundryClient
from buildpack_report.services.errors import CloudFoundryAPIError

log = logging.getLogger(__name__)

ORGANIZATIONS_PATH = "/v2/organizations"

DROPLET_UNAVAILABLE = "needs attention (1)"
NO_DROPLET_BUILDPACKS = "needs attention (2)"
MISSING_VERSION = "needs attention (3)"
NOT_IN_CATALOG = "needs attention (4)"
VERSION_MISMATCH = "needs attention (5)"


def droplet_path(app_guid: str) -> str:
    return f"/v3/apps/{app_guid}/droplets/current"


def fetch_current_droplet(client: CloudFoundryClient, app: Application) -> Optional[Droplet]:
    """Current droplet of ``app``, or None when it cannot be retrieved."""
    try:
        return client.fetch_model(droplet_path(app.guid), Droplet)
    except CloudFoundryAPIError as e:
        log.debug("droplet for %s (%s) unavailable: %s", app.name, app.guid, e)
        return None


def classify_app(
    org: Organization,
    space: Space,
    app: Application,
    droplet: Optional[Droplet],
    catalog: dict[str, Buildpack],
) -> ReportRow:
    bps: list[str] = []
    messages: list[str] = []

    if droplet is None:
        messages.append(DROPLET_UNAVAILABLE)
    else:
        if not droplet.buildpacks:
            messages.append(NO_DROPLET_BUILDPACKS)
        for bp in droplet.buildpacks:
            bps.append(bp.name)
            if not bp.version:
                bps.append(bp.display_name)
                messages.append(MISSING_VERSION)
                continue
            bps.append(f"{bp.display_name} v{bp.version}")
            platform_bp = catalog.get(bp.name)
            if platform_bp is None:
                messages.append(NOT_IN_CATALOG)
            elif not platform_bp.filename.endswith(f"v{bp.version}.zip"):
                messages.append(VERSION_MISMATCH)

    if not bps:
        fallback = app.entity.buildpack or app.entity.detected_buildpack
        if fallback:
            bps.append(fallback)

    if not messages:
        messages.append(OK_MESSAGE)

    return ReportRow(
        organization=org.name,
        space=space.name,
        application=app.name,
        buildpacks=tuple(bps),
        total_memory=str(app.total_memory),
        messages=tuple(messages),
    )


def build_report(
    client: CloudFoundryClient,
    catalog: Optional[dict[str, Buildpack]] = None,
) -> list[ReportRow]:
    """Rows for every app on the platform, depth-first in server order."""
    if catalog is None:
        catalog = build_catalog(client)

    rows: list[ReportRow] = []

    def _visit_org(org: Organization) -> None:
        def _visit_space(space: Space) -> None:
            def _visit_app(app: Application) -> None:
                droplet = fetch_current_droplet(client, app)
                rows.append(classify_app(org, space, app, droplet, catalog))

            client.list_all(space.entity.apps_url, _visit_app, model=Application)

        client.list_all(org.entity.spaces_url, _visit_space, model=Space)

    client.list_all(ORGANIZATIONS_PATH, _visit_org, model=Organization)
    log.debug("report has %d rows", len(rows))
    return rows
