"""Tests for JSON and table rendering of report rows."""

import io
import json

from buildpack_report.models.report import ReportRow
from buildpack_report.services.report_renderer import TABLE_HEADERS, render, render_json, render_table, table_rows

ROWS = [
    ReportRow(
        organization="acme",
        space="dev",
        application="api",
        buildpacks=("java_buildpack", "java_buildpack v4.20"),
        total_memory="1536",
        messages=("OK",),
    ),
    ReportRow(
        organization="acme",
        space="dev",
        application="broken",
        buildpacks=(),
        total_memory="0",
        messages=("needs attention (1)", "needs attention (2)"),
    ),
]


def test_row_messages_default_to_ok():
    row = ReportRow(organization="o", space="s", application="a", messages=())

    assert row.messages == ("OK",)


def test_json_omits_empty_buildpacks():
    data = json.loads(render_json(ROWS))

    assert data[0] == {
        "organization": "acme",
        "space": "dev",
        "application": "api",
        "buildpacks": ["java_buildpack", "java_buildpack v4.20"],
        "total_memory": "1536",
        "messages": ["OK"],
    }
    assert "buildpacks" not in data[1]
    assert data[1]["messages"] == ["needs attention (1)", "needs attention (2)"]


def test_json_empty_report_is_empty_array():
    assert json.loads(render_json([])) == []


def test_table_has_headers_and_joined_fields():
    out = render_table(ROWS)

    for header in TABLE_HEADERS:
        assert header in out
    assert "java_buildpack, java_buildpack v4.20" in out
    assert "needs attention (1), needs attention (2)" in out


def test_json_and_table_share_rows_and_order():
    data = json.loads(render_json(ROWS))
    table = table_rows(ROWS)

    assert [d["application"] for d in data] == [t[2] for t in table]
    assert [", ".join(d["messages"]) for d in data] == [t[5] for t in table]


def test_render_writes_to_stream():
    out = io.StringIO()

    render(ROWS, out, output_json=True)

    assert json.loads(out.getvalue())[1]["application"] == "broken"
