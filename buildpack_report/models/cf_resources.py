"""Typed projections of the Cloud Foundry v2/v3 resources the report reads.

Each endpoint gets its own model so an organization never carries app fields
and vice versa. Only the fields the report consumes are declared; anything
else the API returns is ignored. JSON ``null`` falls back to the field default.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator


class _CFModel(BaseModel):
    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class ResourceMetadata(_CFModel):
    guid: str = ""
    updated_at: Optional[datetime] = None


class ListPage(_CFModel):
    """One page of a v2 listing."""

    next_url: str = ""
    resources: list[dict[str, Any]] = Field(default_factory=list)


class OrganizationEntity(_CFModel):
    name: str = ""
    spaces_url: str = ""


class Organization(_CFModel):
    metadata: ResourceMetadata = Field(default_factory=ResourceMetadata)
    entity: OrganizationEntity = Field(default_factory=OrganizationEntity)

    @property
    def name(self) -> str:
        return self.entity.name


class SpaceEntity(_CFModel):
    name: str = ""
    apps_url: str = ""


class Space(_CFModel):
    metadata: ResourceMetadata = Field(default_factory=ResourceMetadata)
    entity: SpaceEntity = Field(default_factory=SpaceEntity)

    @property
    def name(self) -> str:
        return self.entity.name


class ApplicationEntity(_CFModel):
    name: str = ""
    buildpack: str = ""  # configured by the developer
    detected_buildpack: str = ""  # detected during staging
    memory: int = 0  # MB per instance
    instances: int = 0
    package_updated_at: Optional[datetime] = None


class Application(_CFModel):
    metadata: ResourceMetadata = Field(default_factory=ResourceMetadata)
    entity: ApplicationEntity = Field(default_factory=ApplicationEntity)

    @property
    def guid(self) -> str:
        return self.metadata.guid

    @property
    def name(self) -> str:
        return self.entity.name

    @property
    def total_memory(self) -> int:
        return self.entity.memory * self.entity.instances


class BuildpackEntity(_CFModel):
    name: str = ""
    enabled: bool = False
    filename: str = ""  # e.g. "java-buildpack-offline-v4.20.zip"


class Buildpack(_CFModel):
    """Entry of the platform buildpack catalog."""

    metadata: ResourceMetadata = Field(default_factory=ResourceMetadata)
    entity: BuildpackEntity = Field(default_factory=BuildpackEntity)

    @property
    def name(self) -> str:
        return self.entity.name

    @property
    def enabled(self) -> bool:
        return self.entity.enabled

    @property
    def filename(self) -> str:
        return self.entity.filename


class DropletBuildpack(_CFModel):
    name: str = ""
    buildpack_name: str = ""
    version: str = ""

    @property
    def display_name(self) -> str:
        return self.buildpack_name or self.name


class Droplet(_CFModel):
    """v3 droplet. An empty ``buildpacks`` list means staging went wrong."""

    buildpacks: list[DropletBuildpack] = Field(default_factory=list)
