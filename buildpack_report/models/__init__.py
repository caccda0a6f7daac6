"""Pydantic models."""

from buildpack_report.models.cf_resources import (
    Application,
    Buildpack,
    Droplet,
    DropletBuildpack,
    ListPage,
    Organization,
    Space,
)
from buildpack_report.models.report import OK_MESSAGE, ReportRow

__all__ = [
    "Application",
    "Buildpack",
    "Droplet",
    "DropletBuildpack",
    "ListPage",
    "OK_MESSAGE",
    "Organization",
    "ReportRow",
    "Space",
]
