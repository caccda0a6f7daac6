"""cf CLI plugin metadata for the report-buildpacks command."""

from __future__ import annotations

from pydantic import BaseModel, Field


class VersionType(BaseModel):
    major: int = 0
    minor: int = 0
    build: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.build}"


class PluginCommand(BaseModel):
    name: str
    help_text: str
    usage: str
    options: dict[str, str] = Field(default_factory=dict)


class PluginMetadata(BaseModel):
    name: str
    version: VersionType
    min_cli_version: VersionType
    commands: list[PluginCommand] = Field(default_factory=list)

    def command(self, name: str) -> PluginCommand:
        for cmd in self.commands:
            if cmd.name == name:
                return cmd
        raise KeyError(name)


COMMAND_NAME = "report-buildpacks"

PLUGIN_METADATA = PluginMetadata(
    name="report-buildpacks",
    version=VersionType(major=0, minor=2, build=0),
    min_cli_version=VersionType(major=6, minor=7, build=0),
    commands=[
        PluginCommand(
            name=COMMAND_NAME,
            help_text="Report all buildpacks used in installation",
            usage="cf report-buildpacks",
            options={
                "output-json": "if set sends JSON to stdout instead of a rendered table",
                "quiet": "if set suppresses printing of progress messages to stderr",
            },
        )
    ],
)
