from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

OK_MESSAGE = "OK"


class ReportRow(BaseModel):
    """One application in the buildpack report."""

    organization: str
    space: str
    application: str
    buildpacks: tuple[str, ...] = ()
    total_memory: str = ""
    messages: tuple[str, ...] = (OK_MESSAGE,)

    model_config = ConfigDict(frozen=True)

    @field_validator("messages")
    @classmethod
    def _never_empty(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return v or (OK_MESSAGE,)

    def to_json_dict(self) -> dict:
        """Dict for JSON output; empty buildpacks / total_memory are omitted."""
        out: dict = {
            "organization": self.organization,
            "space": self.space,
            "application": self.application,
        }
        if self.buildpacks:
            out["buildpacks"] = list(self.buildpacks)
        if self.total_memory:
            out["total_memory"] = self.total_memory
        out["messages"] = list(self.messages)
        return out
