"""Render report rows as JSON or as a grid table."""

from __future__ import annotations

import json
import sys
from typing import Iterable, Optional, TextIO

from tabulate import tabulate

from buildpack_report.models.report import ReportRow

TABLE_HEADERS = ["Organization", "Space", "Application", "Buildpacks", "Total Memory", "Messages"]


def render_json(rows: Iterable[ReportRow]) -> str:
    return json.dumps([row.to_json_dict() for row in rows]) + "\n"


def table_rows(rows: Iterable[ReportRow]) -> list[list[str]]:
    return [
        [
            row.organization,
            row.space,
            row.application,
            ", ".join(row.buildpacks),
            row.total_memory,
            ", ".join(row.messages),
        ]
        for row in rows
    ]


def render_table(rows: Iterable[ReportRow]) -> str:
    return tabulate(table_rows(rows), headers=TABLE_HEADERS, tablefmt="grid", disable_numparse=True) + "\n"


def render(rows: list[ReportRow], out: Optional[TextIO] = None, output_json: bool = False) -> None:
    out = out or sys.stdout
    out.write(render_json(rows) if output_json else render_table(rows))
    out.flush()
